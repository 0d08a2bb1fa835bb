''' Configuration Preferences for the Distribution Visualizer GUI

The settings are saved using the Qt QSettings interface (and only apply to the GUI).
Settings are saved in an INI file to the location:
    (Windows) -- $APPDATA$/distviz/DistributionVisualizer.ini
    (Mac/Unix) -- ~/.config/distviz/DistributionVisualizer.ini
'''
import logging
from PyQt6 import QtCore
import matplotlib as mpl

from ..common import report, plotting


DFLTSTYLE = 'default'
DFLTSIGFIGS = 4
DFLTNUMFORMAT = 'auto'


class Settings:
    ''' Read and write GUI preferences. Invalid stored values fall back to defaults. '''
    _settings = QtCore.QSettings(QtCore.QSettings.Format.IniFormat,
                                 QtCore.QSettings.Scope.UserScope,
                                 'distviz', 'DistributionVisualizer')

    def sync(self):
        ''' Sync the settings to disk. QSettings already does this periodically. '''
        self._settings.sync()

    @property
    def plot_style(self) -> str:
        ''' Matplotlib style name '''
        style = self._settings.value('style/theme', DFLTSTYLE, type=str)
        if style != DFLTSTYLE and style not in mpl.style.available:
            logging.warning('Unknown plot style %s', style)
            style = DFLTSTYLE
        return style

    @plot_style.setter
    def plot_style(self, stylename: str) -> None:
        self._settings.setValue('style/theme', stylename)

    @property
    def sigfigs(self) -> int:
        ''' Significant figures for report values '''
        return self._settings.value('report/sigfigs', DFLTSIGFIGS, type=int)

    @sigfigs.setter
    def sigfigs(self, value: int) -> None:
        self._settings.setValue('report/sigfigs', max(1, int(value)))

    @property
    def numformat(self) -> str:
        ''' Number format for report values '''
        fmt = self._settings.value('report/numformat', DFLTNUMFORMAT, type=str)
        if fmt not in report.Number.numfmts:
            logging.warning('Unknown number format %s', fmt)
            fmt = DFLTNUMFORMAT
        return fmt

    @numformat.setter
    def numformat(self, value: str) -> None:
        self._settings.setValue('report/numformat', value)

    @property
    def report_args(self) -> dict:
        ''' Keyword arguments for Report formatting '''
        return {'n': self.sigfigs, 'fmt': self.numformat}

    def set_defaults(self):
        ''' Restore all default settings '''
        self.plot_style = DFLTSTYLE
        self.sigfigs = DFLTSIGFIGS
        self.numformat = DFLTNUMFORMAT

    def apply(self):
        ''' Apply settings to the plotting and report modules '''
        plotting.activate_plotstyle(self.plot_style)
        report.default_sigfigs = self.sigfigs
        report.default_numformat = self.numformat


gui_settings = Settings()
