''' Test the discrete distributions '''
import numpy as np
import pytest
import scipy.stats

from distviz.common import distributions
from distviz.common.schema import ValidationError


def test_names():
    assert distributions.names() == ['poisson', 'binomial']
    assert distributions.get_class('binom') is distributions.DBinom
    with pytest.raises(ValueError):
        distributions.get_class('normal')
    with pytest.raises(ValueError):
        distributions.get_distribution('normal', loc=0)


def test_poisson():
    d = distributions.get_distribution('poisson', **{'lambda': 2})
    assert d.support_bound() == 7   # ceil(2 + 3*sqrt(2))
    assert np.isclose(d.mean(), 2)
    assert np.isclose(d.var(), 2)
    x = np.arange(8)
    assert np.allclose(d.pmf(x), scipy.stats.poisson.pmf(x, 2))
    assert d.label() == 'Poisson (λ=2)'
    assert d.summary_rows() == [('Lambda (λ)', '2'), ('Mean', '2'), ('Variance', '2')]

    # Scipy name for the rate is accepted
    d = distributions.get_distribution('poisson', mu=1)
    assert d.params == {'lambda': 1}
    assert d.support_bound() == 4
    d = distributions.get_distribution('poisson', **{'lambda': 0.01})
    assert d.support_bound() == 1


def test_binomial():
    d = distributions.get_distribution('binomial', n=4, p=0.5)
    assert d.support_bound() == 4
    assert np.isclose(d.mean(), 2)
    assert np.isclose(d.var(), 1)
    assert d.label() == 'Binomial (n=4, p=0.5)'

    x = np.arange(8)
    y = d.pmf(x)
    assert np.allclose(y[:5], scipy.stats.binom.pmf(x[:5], 4, 0.5))
    assert np.all(y[5:] == 0)
    assert np.isclose(sum(y), 1)

    d = distributions.get_distribution('binom', n=5, p=0.5)
    assert np.isclose(d.pmf(0), 0.03125)
    assert np.isscalar(d.pmf(0))
    assert d.pmf(6) == 0
    assert d.summary_rows() == [('Trials (n)', '5'), ('Probability (p)', '0.5'),
                                ('Mean (np)', '2.5000'), ('Variance (np(1-p))', '1.2500')]


def test_validate():
    params = distributions.DBinom.validate({'n': '10', 'p': '0.2'})
    d = distributions.DBinom(**params)
    assert d.params == {'n': 10, 'p': 0.2}
    with pytest.raises(ValidationError):
        distributions.DPoisson.validate({'lambda': '-3'})


def test_helpstr():
    for name in distributions.names():
        cls = distributions.get_class(name)
        assert cls().helpstr().startswith(cls.title)


def test_config():
    d = distributions.get_distribution('binomial', n=3, p=0.25)
    config = d.get_config()
    assert config == {'n': 3, 'p': 0.25, 'dist': 'binomial'}
    d2 = distributions.from_config(config)
    assert d2.params == d.params
    assert d.params == {'n': 3, 'p': 0.25}  # get_config did not change params


def test_preview():
    assert distributions.DPoisson.preview({'lambda': ''}) == [('Note', 'Mean and variance are both equal to lambda')]
    assert distributions.DBinom.preview({'n': '', 'p': '0.5'}) is None
    assert distributions.DBinom.preview({'n': '4', 'p': 'x'}) is None
    assert distributions.DBinom.preview({'n': '4', 'p': '0.5'}) == [('Mean (np)', '2.0000'),
                                                                   ('Variance (np(1-p))', '1.0000')]
