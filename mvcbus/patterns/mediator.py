"""
Mediator contract and default implementation.

A mediator sits between one view component and the notification bus. It
tells the View which notification names it wants to hear about, reacts to
them in `handle_notification`, and translates view-component events into
outgoing notifications.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Protocol, Sequence, Tuple, runtime_checkable

from mvcbus.domain.notification import Notification
from mvcbus.patterns.notifier import Notifier


@runtime_checkable
class MediatorLike(Protocol):
    """
    Structural interface the View expects from a mediator.

    Any object providing these members can be registered; inheriting from
    `Mediator` is a convenience, not a requirement.
    """

    @property
    def mediator_name(self) -> str: ...

    view_component: Any

    def list_notification_interests(self) -> Sequence[str]: ...

    def handle_notification(self, notification: Notification) -> None: ...

    def on_register(self) -> None: ...

    def on_remove(self) -> None: ...


class Mediator(Notifier):
    """
    Default mediator.

    Subclasses declare interests with the `notification_interests` class
    attribute (or override `list_notification_interests`) and react in
    `handle_notification`.

    Interest lists are computed once per instance and then cached, so the
    View sees the same set when it registers the mediator and when it
    removes it.

    Parameters
    ----------
    mediator_name
        Registry key. Defaults to `NAME` for single-instance mediators.
    view_component
        Opaque UI handle this mediator manages.
    """

    NAME: ClassVar[str] = "Mediator"

    notification_interests: ClassVar[Sequence[str]] = ()

    def __init__(self, mediator_name: Optional[str] = None, view_component: Any = None) -> None:
        self._mediator_name = self.NAME if mediator_name is None else mediator_name
        self.view_component = view_component
        self._interests: Optional[Tuple[str, ...]] = None

    @property
    def mediator_name(self) -> str:
        return self._mediator_name

    def list_notification_interests(self) -> Tuple[str, ...]:
        if self._interests is None:
            self._interests = tuple(self._compute_interests())
        return self._interests

    def _compute_interests(self) -> Sequence[str]:
        """Hook for subclasses whose interests depend on instance state."""
        return self.notification_interests

    def handle_notification(self, notification: Notification) -> None:
        pass

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mediator_name={self._mediator_name!r})"
