from __future__ import annotations

import sys

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QApplication, QHBoxLayout, QLabel, QPushButton, QWidget

from mvcbus.dev.counter import COUNTER_CHANGED, INCREMENT, RESET, start_counter
from mvcbus.domain.notification import Notification
from mvcbus.patterns.facade import Facade
from mvcbus.qt.signal_mediator import QtSignalMediator


class CounterWidget(QWidget):
    """
    Label + two buttons. Knows nothing about the bus.
    """

    increment_requested = Signal(int)
    reset_requested = Signal()

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("mvcbus counter")

        self._label = QLabel("0")
        plus = QPushButton("+1")
        reset = QPushButton("Reset")
        plus.clicked.connect(lambda: self.increment_requested.emit(1))
        reset.clicked.connect(lambda: self.reset_requested.emit())

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.addWidget(self._label, 1)
        layout.addWidget(plus)
        layout.addWidget(reset)

    def set_count(self, value: int) -> None:
        self._label.setText(str(value))


class CounterMediator(QtSignalMediator):
    NAME = "CounterMediator"

    signal_notifications = {
        "increment_requested": INCREMENT,
        "reset_requested": RESET,
    }
    notification_interests = (COUNTER_CHANGED,)

    def handle_notification(self, notification: Notification) -> None:
        self.view_component.set_count(notification.body)


def main() -> None:
    """
    Start the counter demo window.

    Notes
    -----
    Optional CLI usage:
        python -m mvcbus.dev.run_demo --config path/to/mvcbus.yaml
    """
    app = QApplication(sys.argv)

    config_path = None
    if "--config" in sys.argv:
        i = sys.argv.index("--config")
        if i + 1 < len(sys.argv):
            config_path = sys.argv[i + 1]

    facade = Facade.from_config(config_path)
    win = CounterWidget()
    start_counter(facade, CounterMediator(view_component=win))
    win.show()

    app.aboutToQuit.connect(facade.close)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
