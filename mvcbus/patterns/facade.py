"""
Facade: explicit application context.

A `Facade` owns one Model, one View and one Controller and is the single
object the application passes around to wire itself up. There is no
process-wide instance; build one per application (or per test) and call
`close()` when done.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from mvcbus.config.yaml_config import FacadeConfig, load_facade_config
from mvcbus.core.controller import Controller
from mvcbus.core.model import Model
from mvcbus.core.view import View
from mvcbus.domain.notification import Notification
from mvcbus.logger import get_logger, setup_logger
from mvcbus.patterns.command import CommandFactory
from mvcbus.patterns.mediator import MediatorLike
from mvcbus.patterns.notifier import Notifier
from mvcbus.patterns.proxy import Proxy

log = get_logger("facade")


@dataclass(eq=False)
class Facade:
    """
    Single entry point delegating to the Model, View and Controller.

    Parameters
    ----------
    config
        Facade configuration. Defaults are used when omitted.
    model, view, controller
        Optional pre-built collaborators. Missing ones are created; a
        provided controller is re-pointed at this facade. Without an
        explicit view the controller's view is used.

    Raises
    ------
    ValueError
        If both a view and a controller observing a different view are given.

    Notes
    -----
    Mediators, proxies and commands are bound to the facade (via
    `Notifier.initialize_notifier`) before their registry runs the
    `on_register` hook, so the hook may already send notifications.
    """

    config: FacadeConfig = field(default_factory=FacadeConfig)
    model: Optional[Model] = None
    view: Optional[View] = None
    controller: Optional[Controller] = None

    def __post_init__(self) -> None:
        if self.model is None:
            self.model = Model()
        if self.controller is not None:
            if self.view is None:
                self.view = self.controller.view
            elif self.controller.view is not self.view:
                raise ValueError("controller must observe the same View the facade dispatches through")
        if self.view is None:
            self.view = View(trace_notifications=self.config.dispatch.trace_notifications)
        if self.controller is None:
            self.controller = Controller(view=self.view)
        self.controller.facade = self

    @classmethod
    def from_config(cls, path: Optional[str] = None) -> "Facade":
        """
        Build a facade from a YAML config file and apply its logging level.

        Parameters
        ----------
        path
            Explicit config path. If None, uses `load_facade_config` resolution.
        """
        cfg = load_facade_config(path)
        setup_logger(level=cfg.logging.level_value)
        return cls(config=cfg)

    # --- Proxies ---
    def register_proxy(self, proxy: Proxy) -> None:
        proxy.initialize_notifier(self)
        self.model.register_proxy(proxy)

    def retrieve_proxy(self, proxy_name: str) -> Optional[Proxy]:
        return self.model.retrieve_proxy(proxy_name)

    def remove_proxy(self, proxy_name: str) -> Optional[Proxy]:
        return self.model.remove_proxy(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return self.model.has_proxy(proxy_name)

    # --- Mediators ---
    def register_mediator(self, mediator: MediatorLike) -> None:
        """
        Register a mediator with the View.

        A mediator whose name is already taken is ignored and stays unbound.
        """
        if isinstance(mediator, Notifier) and not self.view.has_mediator(mediator.mediator_name):
            mediator.initialize_notifier(self)
        self.view.register_mediator(mediator)

    def retrieve_mediator(self, mediator_name: str) -> Optional[MediatorLike]:
        return self.view.retrieve_mediator(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[MediatorLike]:
        return self.view.remove_mediator(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return self.view.has_mediator(mediator_name)

    # --- Commands ---
    def register_command(self, notification_name: str, factory: CommandFactory) -> None:
        self.controller.register_command(notification_name, factory)

    def remove_command(self, notification_name: str) -> None:
        self.controller.remove_command(notification_name)

    def has_command(self, notification_name: str) -> bool:
        return self.controller.has_command(notification_name)

    # --- Notifications ---
    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        """Build a Notification and dispatch it to every observer of ``name``."""
        self.notify_observers(Notification(name, body, type))

    def notify_observers(self, notification: Notification) -> None:
        self.view.notify_observers(notification)

    # --- Teardown ---
    def close(self) -> None:
        """
        Remove every mediator, proxy and command.

        Mediators and proxies are removed newest first. Exceptions from
        `on_remove` hooks propagate and leave the remaining registrations
        in place.
        """
        for name in reversed(self.view.mediator_names()):
            self.view.remove_mediator(name)
        for name in reversed(self.model.proxy_names()):
            self.model.remove_proxy(name)
        for name in self.controller.command_names():
            self.controller.remove_command(name)
        log.debug("facade closed")

    def __enter__(self) -> "Facade":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
