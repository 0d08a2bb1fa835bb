''' Report the distribution list and its probability mass functions '''

from ...common import report, plotting


class ReportVisualizer:
    ''' Output for distribution visualizer

        Args:
            results: VisualizerResults instance
    '''
    def __init__(self, results):
        self.results = results
        self.plot = PlotVisualizer(self.results)

    def summary(self, **kwargs):
        ''' Table of the distributions in the list '''
        r = report.Report(**kwargs)
        if len(self.results.entries) == 0:
            r.txt('No distributions added.\n\n')
            return r

        hdr = ['Name', 'Distribution', 'Mean', 'Variance']
        rows = []
        for entry in self.results.entries:
            rows.append([entry.name,
                         entry.dist.label(),
                         report.Number(entry.dist.mean(), fmin=4),
                         report.Number(entry.dist.var(), fmin=4)])
        r.table(rows, hdr)
        return r

    def single(self, entry_id, **kwargs):
        ''' Report parameters of a single distribution '''
        entry = self.results.state.get(entry_id)
        if entry is None:
            raise ValueError(f'No distribution with id {entry_id}')
        r = report.Report(**kwargs)
        r.hdr(entry.name, level=3)
        r.table([list(row) for row in entry.dist.summary_rows()], ['Parameter', 'Value'])
        return r

    def pmf_table(self, **kwargs):
        ''' Table of probability mass for every x value on the chart '''
        chart = self.results.chart
        r = report.Report(**kwargs)
        if len(chart.datasets) == 0:
            return r
        hdr = ['x'] + [d.label for d in chart.datasets]
        rows = []
        for i, x in enumerate(chart.labels):
            rows.append([str(x)] + [report.Number(d.data[i], n=4, fmt='decimal', fmin=6) for d in chart.datasets])
        r.table(rows, hdr)
        return r

    def all(self, **kwargs):
        ''' Report summary, bar chart, and probability table '''
        r = report.Report(**kwargs)
        r.hdr('Probability Distributions', level=2)
        r.append(self.summary(**kwargs))
        if len(self.results.entries) > 0:
            with plotting.plot_figure() as fig:
                self.plot.bars(fig=fig)
                r.plot(fig)
            for entry in self.results.entries:
                r.append(self.single(entry.id, **kwargs))
            r.hdr('Probability Mass', level=3)
            r.append(self.pmf_table(**kwargs))
        return r


class PlotVisualizer:
    ''' Plot the probability mass functions as a bar chart

        Args:
            results: VisualizerResults instance
    '''
    def __init__(self, results):
        self.results = results

    def bars(self, fig=None, legend=True):
        ''' Plot the chart data as grouped bars

            Args:
                fig (plt.Figure): matplotlib figure to plot on. Will be cleared.
                legend (bool): Show the legend
        '''
        fig, _ = plotting.initplot(fig)
        fig.clf()
        ax = fig.add_subplot(1, 1, 1)
        chart = self.results.chart
        plotting.grouped_bars(ax, chart.labels, chart.datasets)
        if len(chart.labels) <= 30:
            ax.set_xticks(chart.labels)
        ax.set_xlabel('Values')
        ax.set_ylabel('Probability Mass')
        if legend and len(chart.datasets) > 0:
            ax.legend(loc='upper right')
        return fig
