''' Discrete Probability Distribution Manager

The Distribution class wraps the scipy.stats discrete distributions so each
supported family exposes the same interface: validation of text-entry
parameters, the upper bound of the support to plot, and the probability mass
function.

Use get_distribution(), given a distribution name, to return an instance
of Distribution class.
'''

import math
import numpy as np
import scipy.stats as stats

from .schema import poisson_schema, binomial_schema


def get_distribution(name, **kwds):
    ''' Get an instance of the Distribution class.

        Parameters
        ----------
        name: string
            Name of the distribution ('poisson' or 'binomial')
        kwds: keyword arguments
            Arguments used to set up the distribution
    '''
    try:
        return _aliases[name](**kwds)
    except KeyError:
        raise ValueError(f'Unknown distribution `{name}`') from None


def get_class(name):
    ''' Get the Distribution subclass registered under name '''
    try:
        return _aliases[name]
    except KeyError:
        raise ValueError(f'Unknown distribution `{name}`') from None


def from_config(config):
    ''' Load a Distribution instance from a config dictionary. '''
    config = config.copy()
    name = config.pop('dist', 'poisson')
    return get_distribution(name, **config)


def names():
    ''' List of available distribution names, in display order '''
    return [cls.name for cls in _registry]


def _fmt(value):
    ''' Format a parameter value the way it was typed (2 rather than 2.0) '''
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class Distribution:
    ''' Base class for the discrete distributions

        Subclasses define the scipy.stats distribution, the parameter schema
        and the upper bound of the support to use on a plot axis.

        Parameters
        ----------
        kwds: keyword arguments
            Distribution parameters, already validated
    '''
    name = None
    title = None
    dist = None
    schema = None

    def __init__(self, **kwds):
        self.kwds = {}
        self.distargs = {}
        self.update_kwds(**kwds)

    def __getattr__(self, name):
        ''' Get attribute. Passed to the frozen distribution so this class
            behaves similar to rv_frozen. Allows access to things like mean(),
            var(), cdf(), rvs(), etc.
        '''
        if name.startswith('_') or name in ('kwds', 'distargs'):
            raise AttributeError(name)
        dfrozen = self.dist(**self.distargs)
        return getattr(dfrozen, name)

    def update_kwds(self, **kwds):
        ''' Update the distribution parameters. Subclass this. '''
        raise NotImplementedError

    @classmethod
    def validate(cls, raw):
        ''' Validate text entry fields, returning the parameter dictionary '''
        return cls.schema.validate(raw)

    @classmethod
    def preview(cls, raw):
        ''' Statistics to show while parameters are being typed in.
            Returns list of (label, text) tuples, or None if nothing to show.
        '''
        return None

    @property
    def params(self):
        ''' Parameters of the distribution '''
        return dict(self.kwds)

    def support_bound(self):
        ''' Largest x value needed to show the distribution. Subclass this. '''
        raise NotImplementedError

    def pmf(self, x):
        ''' Probability mass at x '''
        return self.dist(**self.distargs).pmf(x)

    def label(self):
        ''' Label for the distribution in chart legends. Subclass this. '''
        raise NotImplementedError

    def summary_rows(self):
        ''' Rows of (label, value) describing the distribution '''
        return [('Mean', _fmt(self.mean())), ('Variance', _fmt(self.var()))]

    def get_config(self):
        ''' Get configuration dictionary (args plus distribution name) '''
        d = self.params
        d.update({'dist': self.name})
        return d

    def helpstr(self):
        return ''


class DPoisson(Distribution):
    ''' Poisson discrete distribution defined by mean rate "lambda" '''
    name = 'poisson'
    title = 'Poisson'
    dist = stats.poisson
    schema = poisson_schema

    def update_kwds(self, **kwds):
        ''' Update the keywords for the distribution. '''
        if 'mu' in kwds:  # scipy's name for the rate
            kwds['lambda'] = kwds.pop('mu')
        self.kwds.update(kwds)
        lam = self.kwds.setdefault('lambda', 1)
        self.distargs = {'mu': lam}

    @classmethod
    def preview(cls, raw):
        return [('Note', 'Mean and variance are both equal to lambda')]

    def support_bound(self):
        lam = self.kwds['lambda']
        return int(math.ceil(lam + 3 * math.sqrt(lam)))

    def label(self):
        return f'Poisson (λ={_fmt(self.kwds["lambda"])})'

    def summary_rows(self):
        lam = _fmt(self.kwds['lambda'])
        return [('Lambda (λ)', lam), ('Mean', lam), ('Variance', lam)]

    def helpstr(self):
        return ('Poisson discrete distribution with mean rate lambda. '
                'Mean and variance are both equal to lambda.')


class DBinom(Distribution):
    ''' Binomial distribution defined by "n" and "p". '''
    name = 'binomial'
    title = 'Binomial'
    dist = stats.binom
    schema = binomial_schema

    def update_kwds(self, **kwds):
        self.kwds.update(kwds)
        n = self.kwds.setdefault('n', 1)
        p = self.kwds.setdefault('p', 0.5)
        # stats.binom fails on float n
        self.kwds['n'] = int(n)
        self.distargs = {'n': int(n), 'p': p}

    @classmethod
    def preview(cls, raw):
        ntext, ptext = raw.get('n', ''), raw.get('p', '')
        if not ntext or not ptext:
            return None
        try:
            n, p = float(ntext), float(ptext)
        except ValueError:
            return None
        return [('Mean (np)', f'{n*p:.4f}'),
                ('Variance (np(1-p))', f'{n*p*(1-p):.4f}')]

    def support_bound(self):
        return self.kwds['n']

    def pmf(self, x):
        ''' Probability mass at x. Zero above n without evaluating the
            library function there.
        '''
        n = self.distargs['n']
        xarr = np.atleast_1d(np.asarray(x))
        out = np.zeros(xarr.shape, dtype=float)
        inside = xarr <= n
        out[inside] = self.dist.pmf(xarr[inside], **self.distargs)
        if np.ndim(x) == 0:
            return out[0]
        return out

    def label(self):
        return f'Binomial (n={self.kwds["n"]}, p={_fmt(self.kwds["p"])})'

    def summary_rows(self):
        n, p = self.kwds['n'], self.kwds['p']
        return [('Trials (n)', str(n)),
                ('Probability (p)', _fmt(p)),
                ('Mean (np)', f'{n*p:.4f}'),
                ('Variance (np(1-p))', f'{n*p*(1-p):.4f}')]

    def helpstr(self):
        return 'Binomial discrete distribution: number of successes in n trials with success probability p.'


_registry = [DPoisson, DBinom]
_aliases = {cls.name: cls for cls in _registry}
_aliases['binom'] = DBinom
