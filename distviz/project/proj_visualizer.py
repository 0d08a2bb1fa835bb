''' Distribution Visualizer project component '''

from .component import ProjectComponent
from ..visualizer import DistVisualizer


class ProjectVisualizer(ProjectComponent):
    ''' Distribution Visualizer project component

        Args:
            model (DistVisualizer): Visualizer to wrap. A new, empty one
                is created if not given.
            name (str): Name of the calculation
    '''
    def __init__(self, model=None, name='visualizer'):
        super().__init__(name=name)
        self.model = DistVisualizer() if model is None else model

    def calculate(self):
        ''' Run calculation '''
        self._result = self.model.calculate()
        return self._result

    def get_config(self):
        ''' Get configuration '''
        d = {}
        d['mode'] = 'visualizer'
        d['name'] = self.name
        d['desc'] = self.description
        d['disttype'] = self.model.state.disttype
        d['distributions'] = [entry.dist.get_config() for entry in self.model.entries]
        return d

    def load_config(self, config):
        ''' Load config into this project. Distribution parameters go through
            the same validation as typed entries, so an invalid config raises
            ValidationError.
        '''
        self.name = config.get('name', 'visualizer')
        self.description = config.get('desc', '')
        self.model = DistVisualizer()
        for dist in config.get('distributions', []):
            self.model.add_distribution(dist)
        self.model.select_type(config.get('disttype', 'poisson'))
        self._result = None
