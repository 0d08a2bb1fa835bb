'''
distviz - Discrete Distribution Visualizer

Compare the probability mass functions of Poisson and Binomial
distributions side by side as bar charts.
'''

from .version import __version__, __date__

from .common import distributions
from .common.schema import ValidationError
from .visualizer import DistVisualizer, CalculationError
from . import visualizer
from . import project

__all__ = ['__version__', '__date__', 'distributions', 'ValidationError', 'DistVisualizer',
           'CalculationError', 'visualizer', 'project']
