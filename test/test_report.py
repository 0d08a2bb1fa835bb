''' Test the reports '''
import pytest
import matplotlib
matplotlib.use('Agg')
from matplotlib.figure import Figure

from distviz import DistVisualizer
from distviz.common import report


def make_results():
    viz = DistVisualizer()
    viz.add('poisson', {'lambda': '2'})
    viz.add('binomial', {'n': '4', 'p': '0.5'})
    return viz.calculate()


def test_number():
    assert report.Number(0.135335283, n=4, fmt='decimal', fmin=6).string() == '0.135335'
    assert report.Number(2, fmin=4).string() == '2.0000'
    assert report.Number(0, n=4).string() == '0.000'
    with pytest.raises(ValueError):
        report.Number(1, fmt='roman').string()


def test_empty():
    results = DistVisualizer().calculate()
    md = results.report.summary().get_md()
    assert 'No distributions added.' in md
    assert results.report.pmf_table().get_md() == ''
    md = results.report.all().get_md(figfmt='text')
    assert 'No distributions added.' in md


def test_summary():
    results = make_results()
    md = results.report.summary().get_md()
    assert 'poisson 1' in md
    assert 'Poisson (λ=2)' in md
    assert 'binomial 2' in md
    assert 'Binomial (n=4, p=0.5)' in md
    assert '2.0000' in md
    assert results._repr_markdown_() == md


def test_single():
    results = make_results()
    entry = results.entries[1]
    md = results.report.single(entry.id).get_md()
    assert 'binomial 2' in md
    assert 'Trials (n)' in md
    with pytest.raises(ValueError):
        results.report.single(999)


def test_pmf_table():
    results = make_results()
    md = results.report.pmf_table().get_md()
    lines = [line for line in md.splitlines() if line.startswith('|')]
    assert len(lines) == 10  # Header, separator, x = 0 to 7
    assert '0.135335' in md  # Poisson pmf(0) = exp(-2)
    assert '0.375000' in md  # Binomial pmf(2)


def test_all():
    results = make_results()
    rpt = results.report.all()
    md = rpt.get_md(figfmt='text')
    assert 'Probability Distributions' in md
    assert 'o: Poisson (λ=2)' in md    # Text plot legend
    assert '#: Binomial (n=4, p=0.5)' in md
    html = rpt.get_html(figfmt='svg')
    assert '<table' in html
    assert '<svg' in html or 'data:image/svg+xml' in html


def test_save(tmpdir):
    rpt = make_results().report.summary()
    fname = tmpdir.join('report')
    rpt.save_md(str(fname))
    rpt.save_html(str(fname))
    with open(str(fname) + '.md', 'r', encoding='utf-8') as f:
        assert 'Poisson' in f.read()
    with open(str(fname) + '.html', 'r', encoding='utf-8') as f:
        assert '<table' in f.read()


def test_plot():
    results = make_results()
    fig = Figure()
    results.report.plot.bars(fig=fig)
    ax = fig.axes[0]
    assert len(ax.containers) == 2
    assert len(ax.containers[0].patches) == 8
    assert ax.get_xlabel() == 'Values'
    assert ax.get_ylabel() == 'Probability Mass'


def test_help():
    from distviz.gui.help_strings import VisualizerHelp
    md = VisualizerHelp.page().get_md()
    assert '**Poisson**: Poisson discrete distribution' in md
    assert '**Binomial**: Binomial discrete distribution' in md
