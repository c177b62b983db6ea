from __future__ import annotations

from typing import Any, Callable

from mvcbus.domain.notification import Notification

NotifyMethod = Callable[[Notification], Any]


class Observer:
    """
    A (callback, context) pair registered against one notification name.

    The callback is what gets invoked on dispatch. The context is the object
    the callback belongs to and is used only to find the observer again when
    it has to be removed.

    Equality is defined by the context alone: two observers wrapping
    different callables of the same mediator compare equal. Observers are
    therefore unhashable.

    Parameters
    ----------
    notify_method
        Callable taking a single Notification, usually a bound method.
    notify_context
        Object the callable is bound to.

    Raises
    ------
    ValueError
        If either argument is None.
    TypeError
        If ``notify_method`` is not callable.
    """

    __slots__ = ("_notify_method", "_notify_context")

    def __init__(self, notify_method: NotifyMethod, notify_context: Any) -> None:
        if notify_method is None or notify_context is None:
            raise ValueError("Observer requires both a notify method and a notify context")
        if not callable(notify_method):
            raise TypeError(f"notify_method must be callable, got {type(notify_method).__name__}")
        self._notify_method = notify_method
        self._notify_context = notify_context

    @property
    def notify_method(self) -> NotifyMethod:
        return self._notify_method

    @property
    def notify_context(self) -> Any:
        return self._notify_context

    def notify(self, notification: Notification) -> None:
        """Deliver ``notification`` to the wrapped callback."""
        self._notify_method(notification)

    def compare_notify_context(self, obj: Any) -> bool:
        """Return True if ``obj`` is (or equals) this observer's context."""
        return obj is self._notify_context or obj == self._notify_context

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Observer):
            return NotImplemented
        return self.compare_notify_context(other._notify_context)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Observer(notify_method={self._notify_method!r}, notify_context={self._notify_context!r})"
