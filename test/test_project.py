''' Test saving and loading setup files '''
import os
from io import StringIO
import pytest

from distviz import DistVisualizer, ValidationError
from distviz.project import ProjectVisualizer


EXAMPLE = os.path.join(os.path.dirname(__file__), 'ex_visualizer.yaml')


def test_load_example():
    proj = ProjectVisualizer.from_configfile(EXAMPLE)
    assert proj.name == 'visualizer'
    assert proj.description == 'Poisson and binomial comparison'
    assert proj.model.state.disttype == 'binomial'
    assert [e.name for e in proj.model.entries] == ['poisson 1', 'binomial 2']
    assert list(proj.result.chart.labels) == list(range(8))


def test_saveload_fname(tmpdir):
    viz = DistVisualizer()
    viz.add('poisson', {'lambda': '2.5'})
    viz.add('binomial', {'n': '12', 'p': '0.125'})
    viz.select_type('binomial')
    proj = ProjectVisualizer(viz)
    proj.description = 'Saved'
    report = proj.calculate().report.summary().get_md()

    fname = os.path.join(tmpdir, 'setup.yaml')
    proj.save_config(fname)
    proj2 = ProjectVisualizer.from_configfile(fname)
    assert proj2.get_config() == proj.get_config()
    assert proj2.calculate().report.summary().get_md() == report
    assert proj2.description == 'Saved'


def test_saveload_fobj():
    viz = DistVisualizer()
    viz.add('binomial', {'n': '3', 'p': '0.75'})
    proj = ProjectVisualizer(viz)
    f = StringIO()
    proj.save_config(f)
    f.seek(0)
    proj2 = ProjectVisualizer.from_configfile(f)
    assert proj2.get_config() == proj.get_config()
    assert proj2.get_config()['distributions'] == [{'n': 3, 'p': 0.75, 'dist': 'binomial'}]


def test_bad_files():
    assert ProjectVisualizer.from_configfile(StringIO('[unclosed')) is None
    assert ProjectVisualizer.from_configfile(StringIO('just text')) is None

    with pytest.raises(ValidationError):
        ProjectVisualizer.from_configfile(StringIO('distributions:\n- dist: poisson\n  lambda: -1\n'))


def test_empty():
    proj = ProjectVisualizer()
    config = proj.get_config()
    assert config['mode'] == 'visualizer'
    assert config['distributions'] == []
    proj2 = ProjectVisualizer.from_config(config)
    assert len(proj2.model.entries) == 0
