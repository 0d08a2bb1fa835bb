''' Distribution list state and the operations that change it

The application state is an immutable VisualizerState. Each operation
(add, remove, clear, ...) takes a state and returns a new one, so a failed
operation leaves the previous state untouched.
'''

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from ..common import distributions
from ..common.distributions import Distribution
from .chart import Color, palette_color, chart_data
from .report.visualizer import ReportVisualizer


FIELDS = ('lambda', 'n', 'p')


class CalculationError(RuntimeError):
    ''' Distribution could not be built from validated parameters '''
    message = 'Failed to calculate statistics. Please try again.'

    def __init__(self, message=None):
        super().__init__(message or self.message)


def blank_fields():
    ''' Empty text for every input field '''
    return MappingProxyType({name: '' for name in FIELDS})


@dataclass(frozen=True)
class DistEntry:
    ''' One distribution added to the list

        Args:
            id (int): Unique identifier within the list
            disttype (str): Distribution name, 'poisson' or 'binomial'
            name (str): Display name
            params (dict): Validated parameters
            color (Color): Color assigned when the entry was added
    '''
    id: int
    disttype: str
    name: str
    params: MappingProxyType
    color: Color
    dist: Distribution = field(compare=False, repr=False)


@dataclass(frozen=True)
class VisualizerState:
    ''' Everything the visualizer remembers

        Args:
            entries (tuple): DistEntry instances in the order added
            disttype (str): Distribution type selected for entry
            fields (mapping): Raw text of the input fields
            next_id (int): Identifier for the next entry added
    '''
    entries: tuple = ()
    disttype: str = 'poisson'
    fields: MappingProxyType = field(default_factory=blank_fields)
    next_id: int = 1

    def __len__(self):
        return len(self.entries)

    def get(self, entry_id):
        ''' Get the entry with the given id, or None '''
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None


def select_type(state, disttype):
    ''' Change the distribution type being entered '''
    distributions.get_class(disttype)  # Raises on unknown type
    return replace(state, disttype=disttype)


def set_field(state, name, text):
    ''' Store the text typed into an input field '''
    if name not in FIELDS:
        raise KeyError(f'Unknown input field {name}')
    fields = dict(state.fields)
    fields[name] = text
    return replace(state, fields=MappingProxyType(fields))


def preview(state):
    ''' Mean/variance preview rows for the fields being entered, or None '''
    return distributions.get_class(state.disttype).preview(state.fields)


def add(state, disttype=None, fields=None):
    ''' Validate the input fields and append a new distribution

        Args:
            state (VisualizerState): Current state
            disttype (str): Distribution type. Defaults to state.disttype.
            fields (dict): Raw text values. Defaults to state.fields.

        Returns:
            New VisualizerState with the distribution appended and
            the input fields cleared

        Raises:
            ValidationError: if the fields fail validation
            CalculationError: if the distribution or its chart could not be built
    '''
    disttype = state.disttype if disttype is None else disttype
    fields = state.fields if fields is None else fields

    cls = distributions.get_class(disttype)
    params = cls.validate(fields)

    index = len(state.entries)
    try:
        dist = cls(**params)
        entry = DistEntry(id=state.next_id,
                          disttype=cls.name,
                          name=f'{cls.name} {index + 1}',
                          params=MappingProxyType(dist.params),
                          color=palette_color(index),
                          dist=dist)
        entries = state.entries + (entry,)
        chart_data(entries)  # Shared axis must fit the new support bound
    except Exception as exc:
        logging.exception('Error calculating statistics for %s %s', disttype, params)
        raise CalculationError() from exc

    logging.info('Added %s', entry.name)
    return replace(state,
                   entries=entries,
                   fields=blank_fields(),
                   next_id=state.next_id + 1)


def remove(state, entry_id):
    ''' Remove the distribution with the given id '''
    return replace(state, entries=tuple(e for e in state.entries if e.id != entry_id))


def clear(state):
    ''' Remove all distributions and blank the input fields '''
    return replace(state, entries=(), fields=blank_fields())


class VisualizerResults:
    ''' Chart and distribution list at one point in time

        Args:
            state (VisualizerState): State to report on
    '''
    def __init__(self, state):
        self.state = state
        self.entries = state.entries
        self.chart = chart_data(state.entries)
        self.report = ReportVisualizer(self)

    def _repr_markdown_(self):
        return self.report.summary().get_md()


class DistVisualizer:
    ''' Distribution Visualizer

        Owns the current VisualizerState and replaces it on every operation.

        Args:
            state (VisualizerState): Starting state. Defaults to empty.
    '''
    def __init__(self, state=None):
        self.state = VisualizerState() if state is None else state

    @property
    def entries(self):
        return self.state.entries

    def select_type(self, disttype):
        ''' Set the distribution type to enter '''
        self.state = select_type(self.state, disttype)

    def set_field(self, name, text):
        ''' Set text of an input field '''
        self.state = set_field(self.state, name, text)

    def preview(self):
        return preview(self.state)

    def add(self, disttype=None, fields=None):
        ''' Add a distribution. If no fields are given, the stored input
            fields are used.

            Returns:
                The new DistEntry
        '''
        self.state = add(self.state, disttype, fields)
        return self.state.entries[-1]

    def add_distribution(self, dist):
        ''' Add a Distribution instance or config dictionary. The parameters
            are passed through the same validation as typed entries.
        '''
        if isinstance(dist, dict):
            config = dist.copy()
            disttype = config.pop('dist', 'poisson')
        else:
            config = dist.params
            disttype = dist.name
        raw = {k: str(v) for k, v in config.items()}
        return self.add(disttype, raw)

    def remove(self, entry_id):
        self.state = remove(self.state, entry_id)

    def clear(self):
        ''' Clear all distributions and input fields '''
        self.state = clear(self.state)

    def chart(self):
        ''' Chart data for the current list '''
        return chart_data(self.state.entries)

    def calculate(self):
        ''' Get results for the current list '''
        return VisualizerResults(self.state)
