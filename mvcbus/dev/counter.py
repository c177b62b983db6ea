"""
Counter demo: model side and commands.

Kept free of Qt so the wiring can be exercised without a display.
"""

from __future__ import annotations

from typing import Optional

from mvcbus.domain.notification import Notification
from mvcbus.patterns.command import MacroCommand, SimpleCommand
from mvcbus.patterns.facade import Facade
from mvcbus.patterns.mediator import Mediator
from mvcbus.patterns.proxy import Proxy

STARTUP = "startup"
INCREMENT = "increment"
RESET = "reset"
COUNTER_CHANGED = "counterChanged"


class CounterProxy(Proxy):
    """Holds the current count and announces every change."""

    NAME = "CounterProxy"

    def __init__(self, start: int = 0) -> None:
        super().__init__(self.NAME, start)

    @property
    def value(self) -> int:
        return self.data

    def increment(self, step: int = 1) -> None:
        self.data += step
        self.send_notification(COUNTER_CHANGED, self.data)

    def reset(self) -> None:
        self.data = 0
        self.send_notification(COUNTER_CHANGED, self.data, "reset")


class IncrementCommand(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        proxy = self.facade.retrieve_proxy(CounterProxy.NAME)
        step = notification.body if notification.body is not None else 1
        proxy.increment(int(step))


class ResetCommand(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        self.facade.retrieve_proxy(CounterProxy.NAME).reset()


class PrepareModelCommand(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        self.facade.register_proxy(CounterProxy())
        self.facade.register_command(INCREMENT, IncrementCommand)
        self.facade.register_command(RESET, ResetCommand)


class PrepareViewCommand(SimpleCommand):
    """Register the mediator passed as the startup body, if any."""

    def execute(self, notification: Notification) -> None:
        if isinstance(notification.body, Mediator):
            self.facade.register_mediator(notification.body)


class StartupCommand(MacroCommand):
    def initialize_macro_command(self) -> None:
        self.add_sub_command(PrepareModelCommand)
        self.add_sub_command(PrepareViewCommand)


def start_counter(facade: Facade, mediator: Optional[Mediator] = None) -> None:
    """
    Wire the counter demo into ``facade``.

    Startup runs once: the startup command is unbound after it has executed.
    """
    facade.register_command(STARTUP, StartupCommand)
    facade.send_notification(STARTUP, mediator)
    facade.remove_command(STARTUP)
