from .visualizer_help import VisualizerHelp
