''' Inline help reports for the Distribution Visualizer '''
from ...common import report, distributions


class VisualizerHelp:
    @staticmethod
    def page():
        rpt = report.Report()
        rpt.hdr('Distribution Visualizer', level=2)
        rpt.txt('Compare the probability mass functions of discrete probability '
                'distributions on one bar chart.\n\n')
        rpt.txt('Select `Poisson` or `Binomial` as the distribution type and '
                'enter its parameters, then press `Add Distribution`. '
                'Each distribution added to the list is drawn on the chart in its own '
                'color. The x axis runs from 0 to the largest value needed by any '
                'distribution in the list: n for a Binomial, and '
                'ceil(λ + 3√λ) for a Poisson.\n\n')
        rpt.hdr('Distributions', level=3)
        for name in distributions.names():
            cls = distributions.get_class(name)
            rpt.txt(f'**{cls.title}**: {cls().helpstr()}\n\n')
        rpt.hdr('Parameters', level=3)
        rpt.table([['Poisson', 'λ', 'Mean rate, greater than 0'],
                   ['Binomial', 'n', 'Number of trials, a positive integer'],
                   ['Binomial', 'p', 'Probability of success, between 0 and 1']],
                  ['Distribution', 'Parameter', 'Allowed values'])
        rpt.txt('Use the ✕ button next to a distribution to remove it, or `Clear All` '
                'to remove every distribution and blank the input fields.\n\n')
        return rpt
