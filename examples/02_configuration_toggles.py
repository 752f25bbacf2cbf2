#!/usr/bin/env python3
"""Configuration Toggles Example

Demonstrates:
- Building a ChartConfiguration from check boxes
- Redrawing the current series when the configuration changes
- Replacing the whole series with new data
- Fixed horizontal grid labels instead of labels derived from the data
- Listening to the rendered signal
"""

import logging
import random
import sys

from PySide6 import QtWidgets

from pylinechartqt import ChartConfiguration, ChartStyle, LineChartWidget

TOGGLES = [
    ("draw_curve", "Curve"),
    ("draw_line_shadow", "Line shadow"),
    ("draw_dots", "Dots"),
    ("draw_horizontal_grid", "Horizontal grid"),
    ("draw_vertical_grid", "Vertical grid"),
    ("draw_value_labels", "Value labels"),
]


class ToggleWindow(QtWidgets.QWidget):
    """Chart with a row of overlay check boxes."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Configuration Toggles")
        self.resize(900, 500)

        layout = QtWidgets.QVBoxLayout(self)

        controls = QtWidgets.QHBoxLayout()
        self._boxes = {}
        for attr, label in TOGGLES:
            box = QtWidgets.QCheckBox(label)
            box.setChecked(True)
            box.stateChanged.connect(self._on_toggle)
            controls.addWidget(box)
            self._boxes[attr] = box

        self._fixed_labels = QtWidgets.QCheckBox("Fixed grid labels")
        self._fixed_labels.stateChanged.connect(self._on_toggle)
        controls.addWidget(self._fixed_labels)

        new_data_btn = QtWidgets.QPushButton("New Data")
        new_data_btn.clicked.connect(self._on_new_data)
        controls.addWidget(new_data_btn)
        controls.addStretch()
        layout.addLayout(controls)

        self.chart = LineChartWidget(
            config=self._current_config(),
            style=ChartStyle(line_color="#ff8c00", dot_color="#ff8c00", line_width=2.0),
        )
        self.chart.rendered.connect(self._on_rendered)
        layout.addWidget(self.chart)

        self.status = QtWidgets.QLabel()
        layout.addWidget(self.status)

    def _current_config(self):
        options = {attr: box.isChecked() for attr, box in self._boxes.items()}
        if self._fixed_labels.isChecked():
            options["grid_labels"] = ("0", "25", "50", "75", "100")
        return ChartConfiguration(**options)

    def _on_toggle(self, _state):
        self.chart.set_configuration(self._current_config())

    def _on_new_data(self):
        count = random.randint(5, 60)
        self.chart.set_data([random.randint(-20, 80) for _ in range(count)])

    def _on_rendered(self, result):
        self.status.setText(
            f"{len(result.points)} points, content width {result.content_width:.0f}px"
        )


def main():
    logging.basicConfig(level=logging.DEBUG)
    app = QtWidgets.QApplication(sys.argv)
    window = ToggleWindow()
    window.show()
    window._on_new_data()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
