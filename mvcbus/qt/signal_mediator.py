from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple

from PySide6.QtCore import QObject

from mvcbus.logger import get_logger
from mvcbus.patterns.mediator import Mediator

log = get_logger("qt")


def _signal_body(args: Tuple[Any, ...]) -> Any:
    """Collapse emitted signal arguments into a notification body."""
    if not args:
        return None
    if len(args) == 1:
        return args[0]
    return args


class QtSignalMediator(Mediator):
    """
    Mediator for a Qt view component that forwards its signals as notifications.

    Subclasses map signal names to notification names with the
    `signal_notifications` class attribute, or call `bind_signal` before the
    mediator is registered. Signals are connected in `on_register` and
    disconnected in `on_remove`, so a removed mediator stops talking to the
    bus even if the widget outlives it.

    The emitted signal arguments become the notification body: nothing ->
    None, one argument -> that value, several -> a tuple.
    """

    signal_notifications: ClassVar[Dict[str, str]] = {}

    def __init__(self, mediator_name: Optional[str] = None, view_component: Optional[QObject] = None) -> None:
        super().__init__(mediator_name, view_component)
        self._bindings: Dict[str, str] = dict(self.signal_notifications)
        self._connections: List[Tuple[Any, Callable[..., None]]] = []

    def bind_signal(self, signal_name: str, notification_name: str) -> None:
        """
        Forward ``signal_name`` of the view component as ``notification_name``.

        Takes effect on the next registration.
        """
        self._bindings[signal_name] = notification_name

    def on_register(self) -> None:
        component = self.view_component
        if component is None:
            return
        for signal_name, notification_name in self._bindings.items():
            signal = getattr(component, signal_name)
            slot = self._make_slot(notification_name)
            signal.connect(slot)
            self._connections.append((signal, slot))
        log.debug("%s connected %d signal(s)", self.mediator_name, len(self._connections))

    def on_remove(self) -> None:
        for signal, slot in self._connections:
            signal.disconnect(slot)
        self._connections.clear()

    def _make_slot(self, notification_name: str) -> Callable[..., None]:
        def _forward(*args: Any) -> None:
            self.send_notification(notification_name, _signal_body(args))

        return _forward
