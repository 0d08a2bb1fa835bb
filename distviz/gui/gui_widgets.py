''' Report viewer widget and Save Report dialog '''

from PyQt6 import QtWidgets

from ..common.style import css
from .gui_settings import gui_settings
from . import gui_common


class MarkdownTextEdit(QtWidgets.QTextEdit):
    ''' Read-only text widget displaying a Report as HTML, with a Save option in context menu. '''
    def __init__(self):
        super().__init__()
        font = self.font()
        font.setPointSize(10)
        self.setFont(font)
        self.setReadOnly(True)
        self.rpt = None

    def contextMenuEvent(self, event):
        ''' Create custom context menu '''
        menu = self.createStandardContextMenu()
        menu.addSeparator()
        actsave = menu.addAction('Save page...')
        actsave.triggered.connect(self.savepage)
        menu.exec(event.globalPos())

    def setReport(self, rpt):
        ''' Display the Report instance. Plots are rendered as PNG. '''
        self.rpt = rpt
        if rpt is None:
            self.clear()
            return
        html = rpt.get_html(figfmt='png', inline=True, **gui_settings.report_args)
        if gui_common.isdark():
            html = '<style type="text/css">' + css.css_dark + '</style>\n' + html
        self.setHtml(html)

    def savepage(self):
        ''' Save the displayed report to a file '''
        if self.rpt is not None:
            savereport(self.rpt)


def savereport(rpt, **kwargs):
    ''' Save Report object contents to file, prompting user for file name.
        Format is determined by the file extension.
    '''
    kargs = dict(gui_settings.report_args)
    kargs.update(kwargs)
    fname, filt = QtWidgets.QFileDialog.getSaveFileName(
        caption='File to Save', filter='HTML (*.html);;Markdown (*.md)')
    if fname:
        if filt.startswith('Markdown') or fname.lower().endswith('.md'):
            rpt.save_md(fname, figfmt='svg', **kargs)
        else:
            rpt.save_html(fname, figfmt='svg', **kargs)
