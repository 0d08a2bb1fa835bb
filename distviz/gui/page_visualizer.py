''' GUI page for entering distributions and comparing their probability mass functions '''

from PyQt6 import QtWidgets, QtGui, QtCore
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.backends.backend_qtagg import NavigationToolbar2QT as NavigationToolbar

from ..project import ProjectVisualizer
from ..common import distributions
from ..common.schema import ValidationError
from ..visualizer import CalculationError
from . import gui_widgets
from .gui_common import BlockedSignals
from .help_strings import VisualizerHelp


_FORMS = {}


def register_form(cls):
    ''' Class decorator to register a parameter form by its distribution name '''
    _FORMS[cls.KEY] = cls
    return cls


def create_form(key, parent=None):
    try:
        return _FORMS[key](parent)
    except KeyError:
        raise KeyError(f'No parameter form registered for {key}') from None


class ParamForm(QtWidgets.QWidget):
    ''' Base class for the parameter entry form of one distribution type '''
    KEY = None
    changed = QtCore.pyqtSignal(str, str)  # field name, text

    def __init__(self, parent=None):
        super().__init__(parent)
        self.formlayout = QtWidgets.QFormLayout()
        self.setLayout(self.formlayout)
        self.edits = {}
        self.preview = QtWidgets.QLabel()
        self.preview.setWordWrap(True)
        self._build_ui()
        self.formlayout.addRow(self.preview)

    def _build_ui(self):
        ''' Add the entry fields. Subclass this. '''
        raise NotImplementedError

    def _add_field(self, name, label, placeholder):
        edit = QtWidgets.QLineEdit()
        edit.setPlaceholderText(placeholder)
        edit.textEdited.connect(lambda text, name=name: self.changed.emit(name, text))
        self.formlayout.addRow(label, edit)
        self.edits[name] = edit
        return edit

    def set_fields(self, fields):
        ''' Show the raw text of the fields '''
        for name, edit in self.edits.items():
            if edit.text() != fields.get(name, ''):
                with BlockedSignals(edit):
                    edit.setText(fields.get(name, ''))

    def set_preview(self, rows):
        ''' Show the mean/variance preview rows '''
        if rows is None:
            self.preview.setText('')
        else:
            self.preview.setText('\n'.join(f'{label}: {value}' if label != 'Note' else value
                                           for label, value in rows))


@register_form
class PoissonForm(ParamForm):
    KEY = 'poisson'

    def _build_ui(self):
        self._add_field('lambda', 'Lambda (λ) - Mean Rate:', 'Enter lambda value')


@register_form
class BinomialForm(ParamForm):
    KEY = 'binomial'

    def _build_ui(self):
        self._add_field('n', 'Number of Trials (n):', 'Enter number of trials')
        self._add_field('p', 'Probability of Success (p):', 'Enter probability (0-1)')


class DistItemWidget(QtWidgets.QFrame):
    ''' One distribution in the list of added distributions '''
    remove = QtCore.pyqtSignal(int)  # emits entry id

    def __init__(self, entry, parent=None):
        super().__init__(parent)
        self.entry = entry
        self.setFrameShape(QtWidgets.QFrame.Shape.StyledPanel)
        title = QtWidgets.QLabel(entry.name)
        font = title.font()
        font.setBold(True)
        title.setFont(font)
        title.setStyleSheet(f'color: {entry.color.border};')
        details = QtWidgets.QLabel('\n'.join(f'{label}: {value}' for label, value in entry.dist.summary_rows()))
        self.btnRemove = QtWidgets.QToolButton()
        self.btnRemove.setText('✕')
        self.btnRemove.setToolTip('Remove Distribution')
        self.btnRemove.clicked.connect(lambda: self.remove.emit(self.entry.id))

        vlayout = QtWidgets.QVBoxLayout()
        vlayout.addWidget(title)
        vlayout.addWidget(details)
        layout = QtWidgets.QHBoxLayout()
        layout.addLayout(vlayout)
        layout.addStretch()
        layout.addWidget(self.btnRemove, alignment=QtCore.Qt.AlignmentFlag.AlignTop)
        self.setLayout(layout)


class DistributionListWidget(QtWidgets.QWidget):
    ''' Widget for showing the list of added distributions. Wrap this in a ScrollArea. '''
    remove = QtCore.pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent=parent)
        self.pagelayout = QtWidgets.QVBoxLayout()
        self.setLayout(self.pagelayout)
        self.pagelayout.addStretch()  # Stretch is always last item in layout

    def set_entries(self, entries):
        ''' Rebuild the list from the entries '''
        while self.pagelayout.count() > 1:
            item = self.pagelayout.itemAt(0).widget()
            self.pagelayout.removeWidget(item)
            item.setParent(None)
        for entry in entries:
            item = DistItemWidget(entry)
            item.remove.connect(self.remove)
            self.pagelayout.insertWidget(self.pagelayout.count() - 1, item)


class VisualizerWidget(QtWidgets.QWidget):
    ''' Page widget for distribution visualizer '''
    def __init__(self, component, parent=None):
        super().__init__(parent)
        assert isinstance(component, ProjectVisualizer)
        self.component = component

        self.cmbType = QtWidgets.QComboBox()
        self.formstack = QtWidgets.QStackedWidget()
        for name in distributions.names():
            cls = distributions.get_class(name)
            self.cmbType.addItem(f'{cls.title} Distribution', name)
            form = create_form(name)
            form.changed.connect(self.field_changed)
            self.formstack.addWidget(form)
        self.btnAdd = QtWidgets.QPushButton('Add Distribution')
        self.btnClear = QtWidgets.QPushButton('Clear All')
        self.distlist = DistributionListWidget()
        self.scroll = QtWidgets.QScrollArea()
        self.scroll.setWidget(self.distlist)
        self.scroll.setWidgetResizable(True)
        self.scroll.setMinimumWidth(320)
        self.fig = Figure()
        self.canvas = FigureCanvas(self.fig)
        self.canvas.setStyleSheet("background-color:transparent;")
        self.toolbar = NavigationToolbar(self.canvas, self, coordinates=True)
        self.txtOutput = gui_widgets.MarkdownTextEdit()

        inputbox = QtWidgets.QGroupBox('Input Distribution Parameters')
        ilayout = QtWidgets.QVBoxLayout()
        ilayout.addWidget(QtWidgets.QLabel('Distribution Type:'))
        ilayout.addWidget(self.cmbType)
        ilayout.addWidget(self.formstack)
        ilayout.addWidget(self.btnAdd)
        inputbox.setLayout(ilayout)
        listbox = QtWidgets.QGroupBox('Added Distributions')
        blayout = QtWidgets.QVBoxLayout()
        blayout.addWidget(self.btnClear, alignment=QtCore.Qt.AlignmentFlag.AlignRight)
        blayout.addWidget(self.scroll)
        listbox.setLayout(blayout)
        llayout = QtWidgets.QVBoxLayout()
        llayout.addWidget(inputbox)
        llayout.addWidget(listbox, stretch=10)
        rlayout = QtWidgets.QVBoxLayout()
        rlayout.addWidget(self.canvas, stretch=10)
        rlayout.addWidget(self.toolbar)
        self.topwidget = QtWidgets.QWidget()
        self.topwidget.setLayout(rlayout)
        self.rightsplitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Vertical)
        self.rightsplitter.addWidget(self.topwidget)
        self.rightsplitter.addWidget(self.txtOutput)
        self.leftwidget = QtWidgets.QWidget()
        self.leftwidget.setLayout(llayout)
        self.splitter = QtWidgets.QSplitter()
        self.splitter.addWidget(self.leftwidget)
        self.splitter.addWidget(self.rightsplitter)
        self.splitter.setCollapsible(0, False)
        self.splitter.setCollapsible(1, False)
        layout = QtWidgets.QHBoxLayout()
        layout.addWidget(self.splitter)
        self.setLayout(layout)

        self.menu = QtWidgets.QMenu('&Distributions')
        self.actSave = QtGui.QAction('&Save report...', self)
        self.actClear = QtGui.QAction('&Clear', self)
        self.menu.addAction(self.actClear)
        self.menu.addAction(self.actSave)
        self.actClear.triggered.connect(self.clear)
        self.actSave.triggered.connect(self.save_report)
        self.cmbType.currentIndexChanged.connect(self.type_changed)
        self.btnAdd.clicked.connect(self.add_distribution)
        self.btnClear.clicked.connect(self.clear)
        self.distlist.remove.connect(self.remove_distribution)
        self.refresh()

    @property
    def model(self):
        return self.component.model

    def get_menu(self):
        ''' Get the menu for this widget '''
        return self.menu

    def type_changed(self, index):
        ''' Distribution type combobox changed '''
        self.model.select_type(self.cmbType.itemData(index))
        self.refresh_inputs()

    def field_changed(self, name, text):
        ''' Text was typed in a parameter field '''
        self.model.set_field(name, text)
        self.formstack.currentWidget().set_preview(self.model.preview())

    def add_distribution(self):
        ''' Validate the entered parameters and add the distribution '''
        try:
            self.model.add()
        except ValidationError as exc:
            QtWidgets.QMessageBox.warning(self, 'Distribution Visualizer', exc.message)
            return
        except CalculationError as exc:
            QtWidgets.QMessageBox.critical(self, 'Distribution Visualizer', str(exc))
            return
        self.refresh()

    def remove_distribution(self, entry_id):
        self.model.remove(entry_id)
        self.refresh()

    def clear(self):
        ''' Clear the distribution list and input fields '''
        self.model.clear()
        self.refresh()

    def refresh_inputs(self):
        ''' Show the selected type and field text stored in the model '''
        state = self.model.state
        index = self.cmbType.findData(state.disttype)
        with BlockedSignals(self.cmbType):
            self.cmbType.setCurrentIndex(index)
        self.formstack.setCurrentIndex(index)
        form = self.formstack.currentWidget()
        form.set_fields(state.fields)
        form.set_preview(self.model.preview())

    def refresh(self):
        ''' Redraw everything from the model state '''
        self.refresh_inputs()
        self.distlist.set_entries(self.model.entries)
        result = self.component.calculate()
        result.report.plot.bars(fig=self.fig)
        self.canvas.draw_idle()
        self.txtOutput.setReport(result.report.summary())

    def update_proj_config(self):
        ''' Update model with values entered on page.
            Happens on entry, nothing to do here.
        '''

    def get_report(self):
        ''' Get full report '''
        return self.component.calculate().report.all()

    def save_report(self):
        ''' Save full report, asking user for filename '''
        gui_widgets.savereport(self.get_report())

    def help_report(self):
        ''' Get the help report to display the current widget mode '''
        return VisualizerHelp.page()
