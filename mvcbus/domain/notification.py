"""
Notification value type.

A `Notification` is the only thing that travels across the bus. It names
*what happened*; the optional body carries the payload and the optional
type tag lets handlers branch on a variant of the same event without
introducing a new name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

BodyT = TypeVar("BodyT")


@dataclass(frozen=True)
class Notification(Generic[BodyT]):
    """
    Immutable named event broadcast through the View.

    Parameters
    ----------
    name
        Dispatch key. Observers are looked up by this value.
    body
        Optional payload. The concrete application chooses its type.
    type
        Optional tag distinguishing variants of the same notification.

    Notes
    -----
    The View never retains a notification after dispatch, so the same
    instance can safely be logged or re-sent.
    """

    name: str
    body: Optional[BodyT] = None
    type: Optional[str] = None

    def __str__(self) -> str:
        return (
            f"Notification Name: {self.name}\n"
            f"Body: {self.body!r}\n"
            f"Type: {self.type if self.type is not None else 'null'}"
        )
