''' Test building bar chart data from the distribution list '''
import math
import numpy as np
import pytest

from distviz.visualizer import DistVisualizer, PALETTE, chart_data


def test_empty():
    chart = chart_data(())
    assert list(chart.labels) == [0]
    assert chart.datasets == []
    assert chart.max_x == 0
    assert chart.to_dict() == {'labels': [0], 'datasets': []}


def test_shared_axis():
    viz = DistVisualizer()
    viz.add('poisson', {'lambda': '2'})
    chart = viz.chart()
    assert list(chart.labels) == list(range(8))

    viz.add('binomial', {'n': '4', 'p': '0.5'})
    chart = viz.chart()
    assert list(chart.labels) == list(range(8))  # Poisson still widest
    assert len(chart.datasets) == 2
    assert chart.datasets[0].label == 'Poisson (λ=2)'
    assert chart.datasets[1].label == 'Binomial (n=4, p=0.5)'
    assert all(len(d.data) == 8 for d in chart.datasets)
    assert np.all(chart.datasets[1].data[5:] == 0)
    assert np.isclose(chart.datasets[1].data[2], 0.375)

    viz.add('binomial', {'n': '20', 'p': '0.1'})
    assert viz.chart().max_x == 20


def test_colors():
    viz = DistVisualizer()
    for lam in range(1, 8):
        viz.add('poisson', {'lambda': str(lam)})
    chart = viz.chart()
    assert chart.datasets[0].border == PALETTE[0].border
    assert chart.datasets[0].fill == PALETTE[0].fill
    assert chart.datasets[5].border == PALETTE[0].border  # Palette cycles after 5
    assert chart.datasets[6].border == PALETTE[1].border
    assert chart.datasets[0].fill == '#4bc0c033'
    assert chart.datasets[0].border_width == 1


def test_color_by_position():
    ''' Chart colors follow list position, entry colors are fixed when added '''
    viz = DistVisualizer()
    first = viz.add('poisson', {'lambda': '1'})
    second = viz.add('poisson', {'lambda': '3'})
    assert first.color == PALETTE[0]
    assert second.color == PALETTE[1]

    viz.remove(first.id)
    chart = viz.chart()
    assert chart.datasets[0].border == PALETTE[0].border
    assert viz.entries[0].color == PALETTE[1]


def test_to_dict():
    viz = DistVisualizer()
    viz.add('binomial', {'n': '2', 'p': '0.5'})
    d = viz.chart().to_dict()
    assert d['labels'] == [0, 1, 2]
    assert d['datasets'][0]['label'] == 'Binomial (n=2, p=0.5)'
    assert np.allclose(d['datasets'][0]['data'], [0.25, 0.5, 0.25])
    assert d['datasets'][0]['backgroundColor'] == '#4bc0c033'
    assert d['datasets'][0]['borderColor'] == '#4bc0c0'
    assert d['datasets'][0]['borderWidth'] == 1


def test_binomial_beside_wider():
    viz = DistVisualizer()
    viz.add('poisson', {'lambda': '4'})   # axis to ceil(4 + 3*2) = 10
    viz.add('binomial', {'n': '5', 'p': '0.5'})
    chart = viz.chart()
    assert chart.max_x == 10
    binom = chart.datasets[1].data
    assert np.isclose(binom[0], 0.03125)
    assert np.all(binom[6:] == 0)
    assert np.isclose(sum(binom), 1)


@pytest.mark.parametrize('lam', [1E-6, 0.01, 0.5, 1, 2, 3.7, 9, 10.25, 42, 100, 999.5])
def test_poisson_axis(lam):
    viz = DistVisualizer()
    viz.add('poisson', {'lambda': str(lam)})
    chart = viz.chart()
    bound = int(math.ceil(lam + 3*math.sqrt(lam)))
    assert chart.max_x == bound
    assert list(chart.labels) == list(range(bound + 1))
    data = chart.datasets[0].data
    assert len(data) == bound + 1
    assert np.all(np.isfinite(data))
    assert np.all(data >= 0)
    assert sum(data) <= 1 + 1E-12
