''' Markdown report formatting and rendering '''

import re
from io import BytesIO
import base64
from collections import ChainMap
from contextlib import suppress
import numpy as np
import markdown
import matplotlib.pyplot as plt

from .style import css


# Defaults if kwargs aren't provided
default_sigfigs = 4
default_numformat = 'auto'
default_thresh = 5
default_E = True

_TAG = re.compile(r'\[\[(VAL|PLT)(\d+)\]\]')


class Number:
    ''' A formatted numeric value for use in a report

        Args:
            value (float): The value to report
            n (int): Number of significant figures
            fmt (string): auto, decimal, scientific (sci), or engineering (eng)
            fmin (int): Minimum number of decimal places. Keeps small
                probabilities from rounding away.
            thresh (int): Values with magnitude outside 10**-thresh to
                10**thresh are shown in scientific notation in "auto" format
            elower (bool): Use lowercase "e" in scientific notation
    '''
    numfmts = ['auto', 'decimal', 'scientific', 'sci', 'engineering', 'eng']

    def __init__(self, value, **kwargs):
        self.value = value
        self.kwargs = kwargs

    def __str__(self):
        return self.string()

    def _repr_markdown_(self):
        return self.string()

    def string(self, **kwargs):
        ''' Get string representation of the number. Arguments given to
            Number() take precedence over the ones given here.
        '''
        kargs = ChainMap(self.kwargs, kwargs)
        figs = kargs.get('n', default_sigfigs)
        fmin = kargs.get('fmin', None)
        fmt = kargs.get('fmt', default_numformat).lower()
        thresh = kargs.get('thresh', default_thresh)
        echr = 'e' if kargs.get('elower', default_E) else 'E'

        if fmt not in self.numfmts:
            raise ValueError(f'Number Format must be one of {", ".join(self.numfmts)}')
        if figs < 1:
            raise ValueError('Significant Figures must be >= 1')

        value = self.value
        if value is None or not np.isfinite(value):
            return 'nan' if value is None else format(value)

        fmt = {'scientific': 'sci', 'engineering': 'eng'}.get(fmt, fmt)
        if value == 0:
            zero = '0' if figs == 1 else '0.' + '0'*(figs-1)
            return zero + 'e+00' if fmt in ('sci', 'eng') else zero

        if fmt == 'auto':
            fmt = 'sci' if not 10**-thresh <= abs(value) <= 10**thresh else 'decimal'

        exp = int(np.floor(np.log10(abs(value))))
        decimals = figs - 1 - exp
        if fmin is not None and fmin > decimals:
            decimals = fmin
            figs = decimals + exp + 1

        if fmt == 'decimal':
            return f'{np.round(value, decimals):.{max(0, decimals)}f}'
        if fmt == 'sci':
            return f'{value:.{figs-1}{echr}}'
        return self._engineering(value, exp, figs, echr)

    @staticmethod
    def _engineering(value, exp, figs, echr):
        ''' Scientific notation with the exponent a multiple of 3 '''
        exp3 = exp - (exp % 3)
        mantissa = value / 10**exp3
        decimals = figs - 1 - int(np.floor(np.log10(abs(mantissa))))
        mantissa = np.round(mantissa, decimals)
        if mantissa == int(mantissa):
            mantissa = int(mantissa)
        return f'{mantissa:.{max(0, decimals)}f}{echr}{exp3:+03d}'


class Plot:
    ''' A matplotlib figure for use in a report.

        Args:
            fig (plt.Figure): The figure to format
    '''
    def __init__(self, fig=None):
        self.fig = fig  # MPL figure

    def __del__(self):
        plt.close(self.fig)

    def _repr_markdown_(self):
        ''' Markdown representation for Jupyter '''
        return f'![]({self.svg_b64()})'

    def png_buf(self, dpi=120):
        ''' Render figure as BytesIO buffer in PNG format '''
        buf = BytesIO()
        self.fig.savefig(buf, format='png', dpi=dpi)
        buf.seek(0)
        return buf

    def png_b64(self, dpi=120):
        ''' Render to base-64 encoded PNG '''
        buf = self.png_buf(dpi=dpi)
        b64 = base64.b64encode(buf.read()).decode('utf-8')
        return f'data:image/png;base64,{b64}'

    def svg_buf(self):
        ''' Render to BytesIO buffer in SVG format '''
        buf = BytesIO()
        self.fig.savefig(buf, bbox_inches='tight', format='svg')
        svg = buf.getvalue().decode('utf-8')
        svg = svg[svg.find('<svg'):]  # Strip HTML header stuff
        buf = BytesIO(svg.encode())
        buf.seek(0)
        return buf

    def svg_b64(self):
        ''' Render base-64 encoded SVG string, prefixed for use in markdown or html image tag '''
        buf = self.svg_buf()
        b64 = base64.b64encode(buf.read()).decode('utf-8')
        return f'data:image/svg+xml;base64,{b64}'

    def textplot(self, H=18, W=55):
        ''' Plot the bars in the figure as plain text. Each bar container
            (one per dataset) is drawn with its own character.

            Args:
                H (int): Character height of plot
                W (int): Character width of plot
        '''
        chars = 'o#x+*'
        allplotstrs = []
        for ax in self.fig.axes:
            if len(ax.containers) == 0:
                continue
            xmin, xmax = ax.get_xlim()
            _, ymax = ax.get_ylim()

            s = np.full((H, W), ' ')
            for i, container in enumerate(ax.containers):
                char = chars[i % len(chars)]
                for p in container.patches:
                    with suppress(ValueError):
                        # ValueError when bar height or ymax is nan
                        ynorm = int(p.get_height()/ymax * (H-1))
                        xnorm1 = int((p.get_x()-xmin)/(xmax-xmin) * (W-1))
                        xnorm2 = xnorm1 + max(1, int(np.round(p.get_width()/(xmax-xmin) * (W-1))))
                        for y in range(ynorm):
                            s[y][xnorm1:xnorm2] = char

            margin = 7
            lines = []
            for h, line in enumerate(reversed(s)):
                prefix = f'{ymax:.3g}'.rjust(margin)[:margin] if h == 0 else ' ' * margin
                lines.append(prefix + '|' + ''.join(line))
            lines.append(' ' * margin + '-'*W)
            bottom = ' ' * (margin + 1)
            bottom += f'{xmin:.4g}'.ljust(W//2 - 3)
            bottom += f'{(xmin+xmax)/2:.4g}'.ljust(W//2 - 3)
            bottom += f'{xmax:.4g}'
            lines.append(bottom)

            legend = [f'{chars[i % len(chars)]}: {c.get_label()}' for i, c in enumerate(ax.containers)
                      if not c.get_label().startswith('_')]
            allplotstrs.append('\n'.join(lines + [''] + legend))
        return '\n\n\n'.join(allplotstrs) + '\n\n'


class Report:
    ''' A Report consisting of text, plots, and values for formatting
        in different formats.

        Args:
            figfmt (string): Format for matplotlib figures - svg, png, or text
            pngdpi (int): Dots per inch for PNG images
            inline (bool): Render Mardkown images inline (True) or as references in footer
            n (int): Significant figures for Number values
            fmt (string): Number format for Number values
    '''
    def __init__(self, **kwargs):
        self._s = ''
        self._plots = []
        self._values = []
        self.kwargs = kwargs

    def __str__(self):
        return self.get_md()

    def _repr_markdown_(self):
        ''' Markdown representation for Jupyter '''
        return self.get_md()

    def hdr(self, text, level=1):
        ''' Add a header to the report

            Args:
                text (string): Text of the header
                level (int): Header level. 1 is top level (# HEADER) in markdown.
        '''
        self._s += f'{"#"*level} {text}\n\n'

    def txt(self, text):
        ''' Add text to the report '''
        self._s += text

    def plot(self, fig, end='\n\n'):
        ''' Add matplotlib figure to the report '''
        self._s += self._tag(Plot(fig)) + end

    def _tag(self, obj):
        ''' Store a Number or Plot and return its placeholder. Anything else
            is converted to text.
        '''
        if isinstance(obj, Number):
            self._values.append(obj)
            return f'[[VAL{len(self._values)-1}]]'
        if isinstance(obj, Plot):
            self._plots.append(obj)
            return f'[[PLT{len(self._plots)-1}]]'
        return str(obj)

    def table(self, rows, hdr):
        ''' Add a table to the report

            Args:
                rows (list): List of lists for each row. Each item may be a
                    string or Number.
                hdr (list): Column headers
        '''
        widths = [max(9, len(str(h))+2) for h in hdr]
        for row in rows:
            widths = [max(w, len(c)+1) if isinstance(c, str) else w for w, c in zip(widths, row)]

        def line(cells):
            return '| ' + ' | '.join(f'{self._tag(c):{w}}' for w, c in zip(widths, cells)) + ' |\n'

        s = '\n' + line(hdr)
        s += '|' + '|'.join('-'*(w+2) for w in widths) + '|\n'
        for row in rows:
            s += line(row)
        self._s += s + '\n\n'

    def append(self, report, end=''):
        ''' Append another report onto this one '''
        offsets = {'VAL': len(self._values), 'PLT': len(self._plots)}
        self._s += _TAG.sub(lambda m: f'[[{m.group(1)}{int(m.group(2)) + offsets[m.group(1)]}]]', report._s)
        self._s += end
        self._values.extend(report._values)
        self._plots.extend(report._plots)

    def get_md(self, **kwargs):
        ''' Get the report in markdown format.

            Args:
                **kwargs: See Report class. Arguments specified at Report
                instantiation override arguments given here.
        '''
        kargs = ChainMap(self.kwargs, kwargs)
        figfmt = kargs.get('figfmt', 'svg')      # svg, png, text
        pngdpi = kargs.get('pngdpi', 120)
        inline = kargs.get('inline', False)
        footer = []

        def image(plot):
            if figfmt in ('text', 'txt'):
                return plot.textplot()
            src = plot.svg_b64() if figfmt == 'svg' else plot.png_b64(dpi=pngdpi)
            if inline:
                return f'![]({src})'
            footer.append(f'[IMG{len(footer)}]: {src}')
            return f'![IMG{len(footer)-1}][]\n\n'

        def replace(match):
            idx = int(match.group(2))
            if match.group(1) == 'VAL':
                return self._values[idx].string(**kargs)
            return image(self._plots[idx])

        s = _TAG.sub(replace, self._s)
        return (s + '\n\n' + '\n'.join(footer)).strip()

    def get_html(self, **kwargs):
        ''' Get report in HTML format, including CSS '''
        CSS = '<style type="text/css">' + css.css + '</style>'
        html = markdown.markdown(self.get_md(**kwargs), extensions=['markdown.extensions.tables'])
        html = html.encode('ascii', 'xmlcharrefreplace').decode('utf-8')

        # Some table styles can't go in CSS, at least as rendered by QTextWidget, so must go in table tags
        html = html.replace('<table>', '<table border="0.5" cellpadding="0" cellspacing="0">')
        html = html.replace('<th>', '<th align="center" bgcolor="lightgray">')
        return CSS + '\n' + html

    def save_html(self, fname, **kwargs):
        ''' Get report in HTML format and save to file. '''
        if not fname.lower().endswith(('.html', '.htm')):
            fname += '.html'
        with open(fname, 'w', encoding='utf-8') as f:
            f.write(self.get_html(**kwargs))

    def save_md(self, fname, **kwargs):
        ''' Save report in markdown format. Images are embedded inline. '''
        if not fname.lower().endswith('.md'):
            fname += '.md'
        kwargs.setdefault('inline', True)
        with open(fname, 'w', encoding='utf-8') as f:
            f.write(self.get_md(**kwargs))
