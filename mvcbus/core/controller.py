from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from mvcbus.core.observer import Observer
from mvcbus.core.view import View
from mvcbus.domain.notification import Notification
from mvcbus.logger import get_logger
from mvcbus.patterns.command import CommandFactory
from mvcbus.patterns.notifier import Notifier

if TYPE_CHECKING:
    from mvcbus.patterns.facade import Facade

log = get_logger("controller")


@dataclass(eq=False)
class Controller:
    """
    Maps notification names to command factories.

    Responsibilities
    ----------------
    - Observe the View for every name that has a command bound to it.
    - On a matching notification, build a fresh command, bind it to the
      facade (when one is attached) and execute it.

    Notes
    -----
    The controller registers exactly one observer per bound name, with
    itself as context. Re-binding a name replaces the factory without adding
    a second observer.

    Parameters
    ----------
    view
        View the controller observes.
    facade
        Facade commands are bound to before execution. Optional so the
        controller can be used on its own in tests.
    """

    view: View
    facade: Optional["Facade"] = None

    _commands: Dict[str, CommandFactory] = field(default_factory=dict, init=False, repr=False)

    def register_command(self, notification_name: str, factory: CommandFactory) -> None:
        """
        Bind ``factory`` to ``notification_name``.

        Parameters
        ----------
        notification_name
            Name that triggers the command.
        factory
            Zero-argument callable returning a command, typically the
            command class itself.
        """
        if notification_name not in self._commands:
            self.view.register_observer(notification_name, Observer(self.execute_command, self))
        self._commands[notification_name] = factory
        log.debug("bound command %r to %r", getattr(factory, "__name__", factory), notification_name)

    def execute_command(self, notification: Notification) -> None:
        """
        Instantiate and execute the command bound to ``notification.name``.

        Does nothing if no command is bound. Exceptions from the command
        propagate to the sender.
        """
        factory = self._commands.get(notification.name)
        if factory is None:
            return

        command = factory()
        if isinstance(command, Notifier) and self.facade is not None:
            command.initialize_notifier(self.facade)
        command.execute(notification)

    def has_command(self, notification_name: str) -> bool:
        return notification_name in self._commands

    def remove_command(self, notification_name: str) -> None:
        """Unbind ``notification_name``; no-op if nothing is bound."""
        if self._commands.pop(notification_name, None) is None:
            return
        self.view.remove_observer(notification_name, self)
        log.debug("unbound command for %r", notification_name)

    def command_names(self) -> List[str]:
        """Bound notification names in binding order."""
        return list(self._commands)
