''' Project components load and save calculation setups as YAML configuration files '''

from .component import ProjectComponent
from .proj_visualizer import ProjectVisualizer
