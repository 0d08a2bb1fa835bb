''' Bar chart data for a list of distributions

All distributions share one integer x axis running from 0 to the largest
support bound in the list. The chart is always rebuilt from the full list.
'''

from dataclasses import dataclass, field
import numpy as np


@dataclass(frozen=True)
class Color:
    ''' Bar border and fill colors '''
    border: str
    fill: str


PALETTE = (
    Color('#4bc0c0', '#4bc0c033'),
    Color('#ff6384', '#ff638433'),
    Color('#ffcd56', '#ffcd5633'),
    Color('#36a2eb', '#36a2eb33'),
    Color('#9966ff', '#9966ff33'),
)


def palette_color(index):
    ''' Color for the index-th distribution, cycling through the palette '''
    return PALETTE[index % len(PALETTE)]


@dataclass
class ChartDataset:
    ''' Bar heights for one distribution '''
    label: str
    data: np.ndarray
    fill: str
    border: str
    border_width: int = 1

    def to_dict(self):
        return {'label': self.label,
                'data': [float(y) for y in self.data],
                'backgroundColor': self.fill,
                'borderColor': self.border,
                'borderWidth': self.border_width}


@dataclass
class ChartData:
    ''' Shared x axis and one dataset per distribution '''
    labels: np.ndarray
    datasets: list = field(default_factory=list)

    @property
    def max_x(self):
        return int(self.labels[-1])

    def to_dict(self):
        ''' Chart payload as plain lists and dictionaries '''
        return {'labels': [int(x) for x in self.labels],
                'datasets': [d.to_dict() for d in self.datasets]}


def axis_bound(dists):
    ''' Largest support bound among the distributions (0 if there are none) '''
    return max((d.support_bound() for d in dists), default=0)


def chart_data(entries):
    ''' Build the chart data from the full list of distribution entries

        Args:
            entries (sequence): DistEntry instances, in display order

        Returns:
            ChartData
    '''
    dists = [entry.dist for entry in entries]
    xvalues = np.arange(axis_bound(dists) + 1)

    datasets = []
    for i, dist in enumerate(dists):
        # Color by position in the list, not the color stored on the entry
        color = palette_color(i)
        datasets.append(ChartDataset(label=dist.label(),
                                     data=np.asarray(dist.pmf(xvalues), dtype=float),
                                     fill=color.fill,
                                     border=color.border))
    return ChartData(xvalues, datasets)
