''' System-level GUI functions '''

import sys
import logging
import traceback
from PyQt6 import QtWidgets, QtGui


# System exception handler. Not pretty, but better than just shutting down.
def handle_exception(exc_type, exc_value, exc_traceback):
    ''' Show exceptions in message box and log them. '''
    if isinstance(exc_value, KeyboardInterrupt):
        return
    msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.error(msg)
    msgbox = QtWidgets.QMessageBox()
    msgbox.setWindowTitle('Distribution Visualizer')
    msgbox.setText('The following exception occurred.')
    msgbox.setInformativeText(msg)
    msgbox.exec()


sys.excepthook = handle_exception


def centerWindow(window, w, h):
    ''' Set window geometry so it appears centered in the window
        If window size is too big, maximize it
    '''
    desktopsize = QtGui.QGuiApplication.primaryScreen().availableGeometry()
    window.setGeometry(desktopsize.width()//2 - w//2, desktopsize.height()//2 - h//2, w, h)
    if h >= desktopsize.height() or w >= desktopsize.width():
        window.showMaximized()


def isdark():
    ''' Determine whether the application palette is a dark theme '''
    palette = QtWidgets.QApplication.instance().palette()
    return palette.color(QtGui.QPalette.ColorRole.Window).lightness() < 128


class BlockedSignals:
    ''' Context manager for blocking pyqt signals that
        restores the signal block to its previous state when done.

        with BlockedSignals(widget):
            ...
    '''
    def __init__(self, widget):
        self.widget = widget
        self._saved_state = self.widget.signalsBlocked()

    def __enter__(self):
        self._saved_state = self.widget.signalsBlocked()
        self.widget.blockSignals(True)

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.widget.blockSignals(self._saved_state)
