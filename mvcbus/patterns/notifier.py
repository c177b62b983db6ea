from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from mvcbus.patterns.facade import Facade


class Notifier:
    """
    Mixin giving mediators, proxies and commands a `send_notification` shortcut.

    There is no process-wide facade. A participant is bound to the facade it
    belongs to by `initialize_notifier`, which the Facade calls when the
    participant is registered (or, for commands, right before execution).
    """

    _facade: Optional["Facade"] = None

    def initialize_notifier(self, facade: "Facade") -> None:
        """Bind this participant to ``facade``."""
        self._facade = facade

    @property
    def facade(self) -> "Facade":
        """
        The facade this participant is bound to.

        Raises
        ------
        RuntimeError
            If `initialize_notifier` has not been called yet.
        """
        if self._facade is None:
            raise RuntimeError(
                f"{type(self).__name__} is not bound to a facade; "
                "register it through a Facade before sending notifications"
            )
        return self._facade

    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        """Build a notification and dispatch it through the bound facade."""
        self.facade.send_notification(name, body, type)
