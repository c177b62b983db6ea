"""
Command patterns.

Commands are short-lived: the Controller builds a fresh instance from its
registered factory for every matching notification, executes it and drops
it. Business logic that reacts to notifications (rather than to view
events) belongs here.
"""

from __future__ import annotations

from typing import Callable, List, Protocol

from mvcbus.domain.notification import Notification
from mvcbus.patterns.notifier import Notifier


class Command(Protocol):
    """Structural interface the Controller expects from a command instance."""

    def execute(self, notification: Notification) -> None: ...


CommandFactory = Callable[[], Command]


class SimpleCommand(Notifier):
    """
    Base for single-step commands.

    Override `execute`. The command is bound to the facade before execution,
    so `send_notification` and `self.facade` are usable inside it.
    """

    def execute(self, notification: Notification) -> None:
        pass


class MacroCommand(Notifier):
    """
    Command that runs a fixed list of sub-commands in order.

    Subclasses populate the list in `initialize_macro_command` by calling
    `add_sub_command`. Each sub-command is instantiated on execution, bound
    to the same facade and executed with the same notification.
    """

    def __init__(self) -> None:
        self._sub_commands: List[CommandFactory] = []
        self.initialize_macro_command()

    def initialize_macro_command(self) -> None:
        pass

    def add_sub_command(self, factory: CommandFactory) -> None:
        """Append a sub-command factory (FIFO execution order)."""
        self._sub_commands.append(factory)

    def execute(self, notification: Notification) -> None:
        """
        Execute every sub-command in the order they were added.

        Raises
        ------
        Exception
            Whatever a sub-command raises; later sub-commands are skipped.
        """
        for factory in list(self._sub_commands):
            command = factory()
            if isinstance(command, Notifier) and self._facade is not None:
                command.initialize_notifier(self._facade)
            command.execute(notification)
