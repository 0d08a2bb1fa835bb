''' Test the distribution list operations '''
import pytest

from distviz import DistVisualizer, ValidationError, CalculationError
from distviz.common import distributions
from distviz import visualizer
from distviz.visualizer import PALETTE


def test_add():
    viz = DistVisualizer()
    viz.set_field('lambda', '2')
    entry = viz.add()
    assert entry.name == 'poisson 1'
    assert entry.disttype == 'poisson'
    assert dict(entry.params) == {'lambda': 2.0}
    assert entry.color == PALETTE[0]
    assert viz.state.fields['lambda'] == ''   # Fields blanked after adding

    viz.select_type('binomial')
    viz.set_field('n', '4')
    viz.set_field('p', '0.5')
    entry = viz.add()
    assert entry.name == 'binomial 2'
    assert dict(entry.params) == {'n': 4, 'p': 0.5}
    assert viz.state.disttype == 'binomial'
    assert len(viz.state) == 2
    assert viz.state.fields == {'lambda': '', 'n': '', 'p': ''}


def test_invalid_add():
    viz = DistVisualizer()
    viz.add('poisson', {'lambda': '1'})
    before = viz.state
    with pytest.raises(ValidationError) as exc:
        viz.add('binomial', {'n': '0', 'p': '0.5'})
    assert exc.value.message == 'Number of trials must be positive'
    assert viz.state is before

    viz.select_type('binomial')
    viz.set_field('n', '2.5')
    viz.set_field('p', '0.5')
    with pytest.raises(ValidationError):
        viz.add()
    assert viz.entries == before.entries
    assert viz.state.fields['n'] == '2.5'  # Entered text is kept on failure


def test_calculation_error(monkeypatch):
    def fail(self):
        raise ArithmeticError('overflow')
    monkeypatch.setattr(distributions.DPoisson, 'support_bound', fail)
    viz = DistVisualizer()
    with pytest.raises(CalculationError) as exc:
        viz.add('poisson', {'lambda': '2'})
    assert str(exc.value) == 'Failed to calculate statistics. Please try again.'
    assert len(viz.entries) == 0


def test_remove():
    viz = DistVisualizer()
    a = viz.add('poisson', {'lambda': '1'})
    before = viz.state.entries
    b = viz.add('binomial', {'n': '3', 'p': '0.2'})
    assert a.id != b.id
    viz.remove(b.id)
    assert viz.entries == before

    viz.remove(12345)  # Unknown id does nothing
    assert viz.entries == before

    # New entry is named by list length and still gets a unique id
    c = viz.add('poisson', {'lambda': '5'})
    assert c.name == 'poisson 2'
    assert c.id not in (a.id, b.id)
    assert c.color == PALETTE[1]


def test_clear():
    viz = DistVisualizer()
    viz.select_type('binomial')
    viz.add('binomial', {'n': '3', 'p': '0.2'})
    viz.set_field('n', '7')
    viz.clear()
    assert viz.entries == ()
    assert viz.state.fields == {'lambda': '', 'n': '', 'p': ''}
    assert viz.state.disttype == 'binomial'
    assert list(viz.chart().labels) == [0]


def test_pure_functions():
    state = visualizer.VisualizerState()
    state2 = visualizer.set_field(state, 'lambda', '3')
    assert state.fields['lambda'] == ''
    assert state2.fields['lambda'] == '3'
    state3 = visualizer.add(state2)
    assert len(state2) == 0
    assert len(state3) == 1
    assert state3.get(state3.entries[0].id) is state3.entries[0]
    assert state3.get(99) is None
    assert len(visualizer.clear(state3)) == 0
    assert len(visualizer.remove(state3, state3.entries[0].id)) == 0


def test_fields_and_types():
    viz = DistVisualizer()
    with pytest.raises(KeyError):
        viz.set_field('sigma', '1')
    with pytest.raises(ValueError):
        viz.select_type('normal')
    assert viz.state.disttype == 'poisson'
    assert viz.preview() == [('Note', 'Mean and variance are both equal to lambda')]
    viz.select_type('binomial')
    assert viz.preview() is None
    viz.set_field('n', '10')
    viz.set_field('p', '0.3')
    assert viz.preview() == [('Mean (np)', '3.0000'), ('Variance (np(1-p))', '2.1000')]


def test_add_distribution():
    viz = DistVisualizer()
    viz.add_distribution({'dist': 'binomial', 'n': 4, 'p': 0.5})
    viz.add_distribution(distributions.get_distribution('poisson', **{'lambda': 2.5}))
    assert [e.name for e in viz.entries] == ['binomial 1', 'poisson 2']
    assert dict(viz.entries[1].params) == {'lambda': 2.5}
    with pytest.raises(ValidationError):
        viz.add_distribution({'dist': 'binomial', 'n': 4, 'p': 2})


@pytest.mark.parametrize('disttype, fields', [
    ('binomial', {'n': '1e20', 'p': '0.5'}),
    ('poisson', {'lambda': '1e300'}),
])
def test_support_too_large(disttype, fields):
    ''' Valid parameters whose chart axis can't be built are rejected at add time '''
    viz = DistVisualizer()
    viz.add('poisson', {'lambda': '2'})
    before = viz.state
    with pytest.raises(CalculationError):
        viz.add(disttype, fields)
    assert viz.state is before
    assert list(viz.chart().labels) == list(range(8))
