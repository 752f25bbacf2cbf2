#!/usr/bin/env python3
"""Quick Start Example

This example shows the most basic usage of pylinechartqt:
- Creating two chart widgets, one straight and one curved
- Switching every overlay on
- Assigning 100 random samples in the range 0..30
- Scrolling to the most recent data after the first render
"""

import random
import sys

from PySide6 import QtWidgets

from pylinechartqt import ChartConfiguration, LineChartWidget


def main():
    """Run the quick start example."""
    app = QtWidgets.QApplication(sys.argv)

    data = [random.randint(0, 30) for _ in range(100)]

    window = QtWidgets.QWidget()
    window.setWindowTitle("pylinechartqt Quick Start")
    window.resize(420, 720)
    layout = QtWidgets.QVBoxLayout(window)

    # Configure before assigning data
    line_chart = LineChartWidget(config=ChartConfiguration.all_enabled(draw_curve=False))
    curve_chart = LineChartWidget(config=ChartConfiguration.all_enabled(draw_curve=True))
    layout.addWidget(line_chart)
    layout.addWidget(curve_chart)

    window.show()

    line_chart.set_data(data)
    curve_chart.set_data(data)

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
