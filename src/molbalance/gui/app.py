"""Qt application entrypoint for the MolBalance GUI."""

from __future__ import annotations

import sys

from PySide6 import QtCore, QtWidgets
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure

from molbalance.config import configure_logging, load_settings
from molbalance.gui.session import BalanceInputs, BalanceView, run_balance
from molbalance.models import MoleculeGeometry
from molbalance.render import plot_geometry


class MoleculeCanvas(FigureCanvasQTAgg):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        self.figure = Figure(figsize=(6, 6), tight_layout=True)
        super().__init__(self.figure)
        self.setParent(parent)
        self.axes = self.figure.add_subplot(1, 1, 1, projection="3d")

    def plot_molecule(self, geometry: MoleculeGeometry) -> None:
        plot_geometry(self.axes, geometry)
        self.draw()

    def clear(self) -> None:
        self.axes.clear()
        self.draw()


class BalancerWindow(QtWidgets.QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.settings = load_settings()
        self.view = BalanceView()
        self.setWindowTitle("MolBalance")
        self.resize(1000, 650)

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        layout = QtWidgets.QHBoxLayout(central)
        form_panel = QtWidgets.QWidget()
        form_layout = QtWidgets.QFormLayout(form_panel)
        form_layout.setLabelAlignment(QtCore.Qt.AlignmentFlag.AlignRight)

        self.equation_input = QtWidgets.QLineEdit()
        self.equation_input.setPlaceholderText("e.g. Fe + O2 -> Fe2O3")
        self.equation_input.returnPressed.connect(self._balance)
        form_layout.addRow("Equation", self.equation_input)

        self.online_checkbox = QtWidgets.QCheckBox("Fetch structures from PubChem")
        self.online_checkbox.setChecked(self.settings.online)
        form_layout.addRow(self.online_checkbox)

        self.balance_button = QtWidgets.QPushButton("Balance")
        self.balance_button.clicked.connect(self._balance)
        form_layout.addRow(self.balance_button)

        self.result_label = QtWidgets.QLabel()
        self.result_label.setTextInteractionFlags(QtCore.Qt.TextInteractionFlag.TextSelectableByMouse)
        form_layout.addRow("Balanced", self.result_label)

        self.molecule_picker = QtWidgets.QComboBox()
        self.molecule_picker.currentTextChanged.connect(self._show_molecule)
        form_layout.addRow("Molecule", self.molecule_picker)

        self.molecule_canvas = MoleculeCanvas()

        layout.addWidget(form_panel, stretch=1)
        layout.addWidget(self.molecule_canvas, stretch=2)

    def _balance(self) -> None:
        inputs = BalanceInputs(
            equation=self.equation_input.text(),
            online=self.online_checkbox.isChecked(),
        )
        self.view = run_balance(inputs, self.settings)

        self.molecule_picker.blockSignals(True)
        self.molecule_picker.clear()
        self.molecule_picker.addItems(list(self.view.geometries))
        self.molecule_picker.blockSignals(False)

        if not self.view.ok:
            self.result_label.setStyleSheet("color: red")
            self.result_label.setText(self.view.error)
            self.molecule_canvas.clear()
            return

        self.result_label.setStyleSheet("")
        self.result_label.setText(self.view.balanced_equation)
        self._show_molecule(self.molecule_picker.currentText())

    def _show_molecule(self, formula: str) -> None:
        geometry = self.view.geometries.get(formula)
        if geometry is not None:
            self.molecule_canvas.plot_molecule(geometry)


def main() -> None:
    configure_logging(load_settings().log_level)
    app = QtWidgets.QApplication(sys.argv)
    window = BalancerWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
