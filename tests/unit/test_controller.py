"""
Unit tests for mvcbus.core.controller.Controller.

These tests validate command binding and execution:
- a fresh command instance per matching notification
- one View observer per bound name, even after re-binding
- removal detaches the observer
- commands are bound to the facade when one is attached
- command faults propagate to the sender

A real View is used; the facade is a small fake.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

import pytest

from mvcbus.core.controller import Controller
from mvcbus.core.view import View
from mvcbus.domain.notification import Notification
from mvcbus.patterns.command import SimpleCommand


@dataclass
class FakeFacade:
    """Facade double that records outgoing notifications."""

    sent: List[tuple] = field(default_factory=list)

    def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        self.sent.append((name, body, type))


executed: List[tuple] = []


class RecordCommand(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        executed.append((id(self), notification.name, notification.body))


class OtherCommand(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        executed.append(("other", notification.name))


class EchoCommand(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        self.send_notification("echoed", notification.body)


class FailingCommand(SimpleCommand):
    def execute(self, notification: Notification) -> None:
        raise RuntimeError("command failed")


@pytest.fixture(autouse=True)
def _clear_executed() -> None:
    executed.clear()


def test_registered_command_executes_on_notification() -> None:
    view = View()
    controller = Controller(view=view)
    controller.register_command("save", RecordCommand)

    view.notify_observers(Notification("save", 7))

    assert len(executed) == 1
    assert executed[0][1:] == ("save", 7)
    assert controller.has_command("save") is True


def test_new_command_instance_per_notification() -> None:
    view = View()
    controller = Controller(view=view)
    controller.register_command("save", RecordCommand)

    view.notify_observers(Notification("save"))
    view.notify_observers(Notification("save"))

    assert len(executed) == 2


def test_rebinding_replaces_factory_without_second_observer() -> None:
    view = View()
    controller = Controller(view=view)
    controller.register_command("save", RecordCommand)
    controller.register_command("save", OtherCommand)

    view.notify_observers(Notification("save"))

    assert executed == [("other", "save")]


def test_remove_command_detaches_observer() -> None:
    view = View()
    controller = Controller(view=view)
    controller.register_command("save", RecordCommand)

    controller.remove_command("save")
    view.notify_observers(Notification("save"))

    assert executed == []
    assert controller.has_command("save") is False
    assert view.has_observers("save") is False


def test_remove_unknown_command_is_noop() -> None:
    controller = Controller(view=View())
    controller.remove_command("missing")
    assert controller.command_names() == []


def test_execute_command_without_binding_is_noop() -> None:
    controller = Controller(view=View())
    controller.execute_command(Notification("unbound"))
    assert executed == []


def test_command_is_bound_to_facade_before_execution() -> None:
    view = View()
    facade = FakeFacade()
    controller = Controller(view=view, facade=facade)  # type: ignore[arg-type]
    controller.register_command("ping", EchoCommand)

    view.notify_observers(Notification("ping", "hello"))

    assert facade.sent == [("echoed", "hello", None)]


def test_command_fault_propagates() -> None:
    view = View()
    controller = Controller(view=view)
    controller.register_command("boom", FailingCommand)

    with pytest.raises(RuntimeError, match="command failed"):
        view.notify_observers(Notification("boom"))


def test_two_controllers_on_one_view_keep_separate_observers() -> None:
    view = View()
    first = Controller(view=view)
    second = Controller(view=view)
    first.register_command("save", RecordCommand)
    second.register_command("save", OtherCommand)

    first.remove_command("save")
    view.notify_observers(Notification("save"))

    assert executed == [("other", "save")]
