''' Main window holding the visualizer page, menus, and help '''

from PyQt6 import QtWidgets, QtGui, QtCore
import matplotlib as mpl

from .. import version
from ..project import ProjectVisualizer
from ..common.schema import ValidationError
from ..visualizer import CalculationError
from . import gui_common
from . import gui_widgets
from .gui_settings import gui_settings
from .page_visualizer import VisualizerWidget


class HelpWindow(QtWidgets.QDockWidget):
    ''' Dock widget for showing page help '''
    def __init__(self):
        super().__init__('Help')
        self.textedit = gui_widgets.MarkdownTextEdit()
        self.setWidget(self.textedit)

    def setHelp(self, rpt):
        self.textedit.setReport(rpt)


class PreferencesDialog(QtWidgets.QDialog):
    ''' Dialog for editing plot style and report number format '''
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle('Preferences')
        self.cmbStyle = QtWidgets.QComboBox()
        self.cmbStyle.addItems(['default'] + sorted(mpl.style.available))
        self.cmbStyle.setCurrentText(gui_settings.plot_style)
        self.sigfigs = QtWidgets.QSpinBox()
        self.sigfigs.setRange(1, 20)
        self.sigfigs.setValue(gui_settings.sigfigs)
        self.cmbFormat = QtWidgets.QComboBox()
        self.cmbFormat.addItems(['auto', 'decimal', 'scientific', 'engineering'])
        self.cmbFormat.setCurrentText(gui_settings.numformat)
        self.buttons = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok |
            QtWidgets.QDialogButtonBox.StandardButton.Cancel |
            QtWidgets.QDialogButtonBox.StandardButton.RestoreDefaults)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        self.buttons.button(QtWidgets.QDialogButtonBox.StandardButton.RestoreDefaults).clicked.connect(self.defaults)

        layout = QtWidgets.QFormLayout()
        layout.addRow('Plot style', self.cmbStyle)
        layout.addRow('Significant figures', self.sigfigs)
        layout.addRow('Number format', self.cmbFormat)
        layout.addRow(self.buttons)
        self.setLayout(layout)

    def defaults(self):
        gui_settings.set_defaults()
        self.cmbStyle.setCurrentText(gui_settings.plot_style)
        self.sigfigs.setValue(gui_settings.sigfigs)
        self.cmbFormat.setCurrentText(gui_settings.numformat)

    def accept(self):
        ''' Save the settings and apply them '''
        gui_settings.plot_style = self.cmbStyle.currentText()
        gui_settings.sigfigs = self.sigfigs.value()
        gui_settings.numformat = self.cmbFormat.currentText()
        gui_settings.sync()
        gui_settings.apply()
        super().accept()


class MainGUI(QtWidgets.QMainWindow):
    ''' Main window with the visualizer page and menus '''
    openconfigfolder = QtCore.QStandardPaths.standardLocations(
        QtCore.QStandardPaths.StandardLocation.HomeLocation)[0]

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle('Distribution Visualizer - v' + version.__version__)
        gui_common.centerWindow(self, 1200, 800)
        gui_settings.apply()

        self.helpdock = HelpWindow()
        self.helpdock.setVisible(False)
        self.addDockWidget(QtCore.Qt.DockWidgetArea.RightDockWidgetArea, self.helpdock)
        self.page = None

        self.menubar = QtWidgets.QMenuBar()
        actNew = QtGui.QAction('&New', self)
        actNew.triggered.connect(self.newproject)
        actOpen = QtGui.QAction('&Load setup...', self)
        actOpen.triggered.connect(self.load_project)
        actSave = QtGui.QAction('&Save setup...', self)
        actSave.triggered.connect(self.save_project)
        actPrefs = QtGui.QAction('&Preferences...', self)
        actPrefs.triggered.connect(self.preferences)
        actQuit = QtGui.QAction('E&xit', self)
        actQuit.triggered.connect(self.close)
        actHelp = QtGui.QAction('&Help', self)
        actHelp.triggered.connect(self.open_page_help)
        actAbout = QtGui.QAction('&About', self)
        actAbout.triggered.connect(self.about)

        self.menuFile = QtWidgets.QMenu('&File')
        self.menuFile.addAction(actNew)
        self.menuFile.addAction(actOpen)
        self.menuFile.addAction(actSave)
        self.menuFile.addSeparator()
        self.menuFile.addAction(actPrefs)
        self.menuFile.addSeparator()
        self.menuFile.addAction(actQuit)
        self.menuHelp = QtWidgets.QMenu('&Help')
        self.menuHelp.addAction(actHelp)
        self.menuHelp.addAction(actAbout)
        self.menubar.addMenu(self.menuFile)
        self.setMenuBar(self.menubar)
        self.set_component(ProjectVisualizer())

    def set_component(self, component):
        ''' Show a new visualizer page for the project component '''
        if self.page is not None:
            self.page.setParent(None)
        self.page = VisualizerWidget(component)
        self.setCentralWidget(self.page)
        self.menubar.clear()
        self.menubar.addMenu(self.menuFile)
        self.menubar.addMenu(self.page.get_menu())
        self.menubar.addMenu(self.menuHelp)
        self.helpdock.setHelp(self.page.help_report())

    def newproject(self):
        ''' Start over with an empty distribution list '''
        self.set_component(ProjectVisualizer())

    def open_page_help(self):
        self.helpdock.setHelp(self.page.help_report())
        self.helpdock.setVisible(True)

    def about(self):
        QtWidgets.QMessageBox.about(self, 'Distribution Visualizer',
                                    f'Distribution Visualizer\n\nVersion: {version.__version__} - {version.__date__}')

    def save_project(self):
        ''' Save distributions to a setup file '''
        fname, _ = QtWidgets.QFileDialog.getSaveFileName(caption='Select file to save', directory=self.openconfigfolder,
                                                         filter='Setup files (*.yaml *.yml)')
        if fname:
            self.page.component.save_config(fname)

    def load_project(self):
        ''' Load distributions from a setup file '''
        fname, _ = QtWidgets.QFileDialog.getOpenFileName(caption='Select file to open', directory=self.openconfigfolder,
                                                         filter='Setup files (*.yaml *.yml)')
        if not fname:
            return
        try:
            component = ProjectVisualizer.from_configfile(fname)
        except (ValidationError, CalculationError) as exc:
            QtWidgets.QMessageBox.warning(self, 'Load setup', f'Invalid distribution in {fname}: {exc}')
            return
        if component is None:
            QtWidgets.QMessageBox.warning(self, 'Load setup', f'Could not read setup file {fname}')
            return
        self.set_component(component)

    def preferences(self):
        ''' Show the preferences dialog and redraw with the new settings '''
        dlg = PreferencesDialog(self)
        if dlg.exec():
            self.page.refresh()
