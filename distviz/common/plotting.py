''' Common functions for plotting results '''

from contextlib import contextmanager
import numpy as np
import matplotlib as mpl
import matplotlib.pyplot as plt


# Common plot parameters, usage: "with mpl.style.context(plotstyle):"
plotstyle = {'figure.figsize': (10, 6), 'font.size': 12}


def activate_plotstyle(style='default'):
    ''' Activate a Matplotlib style, one of the styles in mpl.style.available
        or 'default'.
    '''
    mpl.rcParams.update(mpl.rcParamsDefault)
    mpl.style.use(style)


class ReportPlot:
    ''' Context manager for adding figures to report. Ensures figure is closed
        so it doesn't display twice in Jupyter and is properly garbage collected.

        Use via plot_figure() function to chain with plt.style.context.
    '''
    def __enter__(self):
        self._fig = plt.figure()
        return self._fig

    def __exit__(self, exc_type, exc_val, exc_trace):
        plt.close(self._fig)


@contextmanager
def plot_figure():
    ''' Context manager for adding plots to Reports with the defined style.

        Usage:
            with plot_figure() as fig:
                ... # Plot stuff to figure
    '''
    with plt.style.context(plotstyle), ReportPlot() as fig:
        yield fig


def initplot(plot=None):
    ''' Initialize a Figure and Axis to plot on.

        Args:
            plot: plt.Figure, plt.Axis, or None. If None, new figure and
                axis will be created. If Figure or Axis, the Figure AND Axis
                will be returned.

        Returns:
            fig: plt.Figure instance
            ax: plt.Axis instance
    '''
    if plot is None:
        fig = plt.gcf()
        ax = plt.gca()
    elif hasattr(plot, 'gca'):
        fig, ax = plot, plot.gca()
    elif hasattr(plot, 'figure'):
        fig, ax = plot.figure, plot
    else:
        raise ValueError('Undefined plot type')
    return fig, ax


def grouped_bars(ax, labels, datasets, width=0.8):
    ''' Draw datasets side by side at each x label, like a grouped bar chart.

        Args:
            ax (plt.Axis): Axis to draw on
            labels (array): Integer x values shared by all datasets
            datasets (list): ChartDataset instances
            width (float): Total width of each group of bars

        Returns:
            List of BarContainer, one per dataset
    '''
    labels = np.asarray(labels)
    ndata = len(datasets)
    if ndata == 0:
        return []
    barwidth = width / ndata
    offsets = (np.arange(ndata) - (ndata - 1) / 2) * barwidth
    bars = []
    for offset, data in zip(offsets, datasets):
        bars.append(ax.bar(labels + offset, data.data, width=barwidth,
                           color=data.fill, edgecolor=data.border,
                           linewidth=data.border_width, label=data.label))
    return bars
