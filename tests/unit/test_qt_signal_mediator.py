"""
Unit tests for mvcbus.qt.signal_mediator.QtSignalMediator.

These tests use a bare QObject with custom signals (no widgets), so no
QApplication or display is needed. Signals emitted from the test thread are
delivered through direct connections.
"""

from __future__ import annotations

from typing import List

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QObject, Signal  # noqa: E402

from mvcbus.domain.notification import Notification  # noqa: E402
from mvcbus.patterns.facade import Facade  # noqa: E402
from mvcbus.patterns.mediator import Mediator  # noqa: E402
from mvcbus.qt.signal_mediator import QtSignalMediator  # noqa: E402


class Editor(QObject):
    saved = Signal(str)
    moved = Signal(int, int)
    closed = Signal()


class EditorMediator(QtSignalMediator):
    NAME = "EditorMediator"
    signal_notifications = {"saved": "docSaved"}


class Sink(Mediator):
    notification_interests = ("docSaved", "cursorMoved", "editorClosed")

    def __init__(self) -> None:
        super().__init__("Sink")
        self.received: List[Notification] = []

    def handle_notification(self, notification: Notification) -> None:
        self.received.append(notification)


def _setup():
    facade = Facade()
    sink = Sink()
    facade.register_mediator(sink)
    editor = Editor()
    return facade, sink, editor


def test_class_bindings_forward_signal_with_single_argument_body() -> None:
    facade, sink, editor = _setup()
    facade.register_mediator(EditorMediator(view_component=editor))

    editor.saved.emit("notes.txt")

    assert [(n.name, n.body) for n in sink.received] == [("docSaved", "notes.txt")]


def test_bind_signal_body_shapes() -> None:
    facade, sink, editor = _setup()
    mediator = EditorMediator(view_component=editor)
    mediator.bind_signal("moved", "cursorMoved")
    mediator.bind_signal("closed", "editorClosed")
    facade.register_mediator(mediator)

    editor.moved.emit(3, 4)
    editor.closed.emit()

    assert [(n.name, n.body) for n in sink.received] == [
        ("cursorMoved", (3, 4)),
        ("editorClosed", None),
    ]


def test_signals_are_disconnected_on_remove() -> None:
    facade, sink, editor = _setup()
    facade.register_mediator(EditorMediator(view_component=editor))

    facade.remove_mediator(EditorMediator.NAME)
    editor.saved.emit("ignored.txt")

    assert sink.received == []


def test_mediator_without_view_component_connects_nothing() -> None:
    facade, sink, editor = _setup()
    facade.register_mediator(EditorMediator())
    facade.remove_mediator(EditorMediator.NAME)

    editor.saved.emit("x")
    assert sink.received == []


def test_bindings_are_per_instance() -> None:
    a = EditorMediator("a")
    a.bind_signal("closed", "editorClosed")

    assert EditorMediator.signal_notifications == {"saved": "docSaved"}
    assert EditorMediator("b")._bindings == {"saved": "docSaved"}
