"""
View registry and notification dispatcher.

The View owns two maps:
- mediator name -> mediator
- notification name -> ordered list of Observers

and is the only place notifications are fanned out. Everything else
(Controller, Facade, Notifier) goes through `notify_observers`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from mvcbus.core.observer import Observer
from mvcbus.domain.notification import Notification
from mvcbus.logger import get_logger
from mvcbus.patterns.mediator import MediatorLike

log = get_logger("view")


def _unique_names(*samples: Sequence[str]) -> List[str]:
    """
    Merge interest samples, keeping first-seen order and dropping repeats.

    Parameters
    ----------
    samples
        Interest lists, e.g. sampled at registration and at removal.

    Returns
    -------
    list of str
        Every name appearing in any sample, once.
    """
    merged: List[str] = []
    for sample in samples:
        for name in sample:
            if name not in merged:
                merged.append(name)
    return merged


@dataclass(eq=False)
class View:
    """
    Mediator registry, observer registry and synchronous dispatcher.

    Dispatch Model
    --------------
    `notify_observers` copies the observer list for the notification name
    before calling anything. Handlers may register or remove mediators and
    observers, or send further notifications, without changing who receives
    the notification currently being dispatched.

    Concurrency Model
    -----------------
    No locking. A View must be used from one logical thread (or callers must
    serialize every operation on the same instance themselves).

    Error Model
    -----------
    Looking up or removing something that is not registered is a no-op.
    Registering a mediator under a name already in use is silently ignored.
    Exceptions raised by handlers and lifecycle hooks propagate unchanged;
    observers after a failing one in the same pass are not reached.

    Parameters
    ----------
    trace_notifications
        If True, every dispatched notification is logged at DEBUG level.
    """

    trace_notifications: bool = False

    _mediators: Dict[str, MediatorLike] = field(default_factory=dict, init=False, repr=False)
    _observers: Dict[str, List[Observer]] = field(default_factory=dict, init=False, repr=False)
    _registered_interests: Dict[str, Tuple[str, ...]] = field(default_factory=dict, init=False, repr=False)

    # --- Observer API ---
    def register_observer(self, notification_name: str, observer: Observer) -> None:
        """
        Append an observer to the list for ``notification_name``.

        Parameters
        ----------
        notification_name
            Notification name to observe.
        observer
            Observer to append. Duplicates are not filtered.
        """
        self._observers.setdefault(notification_name, []).append(observer)

    def remove_observer(self, notification_name: str, notify_context: object) -> None:
        """
        Remove the first observer for ``notification_name`` whose context matches.

        The name is dropped from the registry once its last observer is gone.
        Nothing happens if the name or a matching observer is missing.
        """
        observers = self._observers.get(notification_name)
        if observers is None:
            return

        for i, observer in enumerate(observers):
            if observer.compare_notify_context(notify_context):
                del observers[i]
                break

        if not observers:
            del self._observers[notification_name]

    def notify_observers(self, notification: Notification) -> None:
        """
        Deliver ``notification`` to every observer registered for its name.

        Observers are called in registration order, from a snapshot taken
        before the first call.
        """
        observers = self._observers.get(notification.name)
        if observers is None:
            return

        snapshot = list(observers)
        if self.trace_notifications:
            log.debug("dispatch %s to %d observer(s)", notification.name, len(snapshot))

        for observer in snapshot:
            observer.notify(notification)

    def has_observers(self, notification_name: str) -> bool:
        """Return True if at least one observer is registered for the name."""
        return notification_name in self._observers

    # --- Mediator API ---
    def register_mediator(self, mediator: MediatorLike) -> None:
        """
        Register a mediator and wire its notification interests.

        Side Effects
        ------------
        - Stores the mediator under its name.
        - Registers one Observer (``mediator.handle_notification``, context
          ``mediator``) for each interest.
        - Calls ``mediator.on_register()`` once all observers are live.

        Notes
        -----
        If a mediator with the same name is already registered this call
        does nothing. Use `has_mediator` beforehand when the caller needs to
        know.
        """
        name = mediator.mediator_name
        if name in self._mediators:
            log.debug("mediator %r already registered; ignoring", name)
            return

        interests = tuple(_unique_names(mediator.list_notification_interests()))

        self._mediators[name] = mediator
        self._registered_interests[name] = interests
        if interests:
            observer = Observer(mediator.handle_notification, mediator)
            for notification_name in interests:
                self.register_observer(notification_name, observer)

        log.debug("registered mediator %r interests=%s", name, list(interests))
        mediator.on_register()

    def retrieve_mediator(self, mediator_name: str) -> Optional[MediatorLike]:
        """
        Return the mediator registered under ``mediator_name``.

        Returns
        -------
        MediatorLike or None
            The registered mediator, or None when the name is unknown.
        """
        return self._mediators.get(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[MediatorLike]:
        """
        Remove a mediator and every observer it owns.

        Observers are stripped and the mediator is dropped from the registry
        before ``on_remove()`` is called.

        Returns
        -------
        MediatorLike or None
            The removed mediator, or None if nothing was registered.
        """
        mediator = self._mediators.get(mediator_name)
        if mediator is None:
            return None

        # Strip every name seen at either sample so a mediator whose
        # interests drifted while registered leaves nothing behind.
        interests = _unique_names(
            self._registered_interests.pop(mediator_name, ()),
            mediator.list_notification_interests(),
        )
        for notification_name in interests:
            self.remove_observer(notification_name, mediator)

        del self._mediators[mediator_name]
        log.debug("removed mediator %r", mediator_name)

        mediator.on_remove()
        return mediator

    def has_mediator(self, mediator_name: str) -> bool:
        """Return True if a mediator is registered under the name."""
        return mediator_name in self._mediators

    def mediator_names(self) -> List[str]:
        """
        Registered mediator names in registration order.

        Returns
        -------
        list of str
            Snapshot copy; safe to iterate while removing mediators.
        """
        return list(self._mediators)
