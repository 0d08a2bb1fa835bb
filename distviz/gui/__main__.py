#!/usr/bin/env python
''' Distribution Visualizer - User Interface Main '''
import sys
from PyQt6 import QtWidgets
import markdown

from distviz.gui.gui_main import MainGUI


def main():
    app = QtWidgets.QApplication(sys.argv)
    app.setStyle('Fusion')  # Switches light/dark modes

    # Load markdown table extension now rather than on the first report
    markdown.markdown('x', extensions=['markdown.extensions.tables'])

    window = MainGUI()
    window.show()
    app.exec()


if __name__ == '__main__':
    main()
