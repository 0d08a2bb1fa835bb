''' Distribution Visualizer compares the probability mass functions of
    Poisson and Binomial distributions on a shared bar chart.
'''

from .visualizer import (DistVisualizer, VisualizerState, VisualizerResults, DistEntry,
                         CalculationError, add, remove, clear, select_type, set_field, preview)
from .chart import ChartData, ChartDataset, chart_data, PALETTE
