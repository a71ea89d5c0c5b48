"""Messages exchanged between components and the records persisted from them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Message:
    """A message from ``source`` to ``target``.

    For adaptation commands ``content`` carries the requested action.
    """

    source: str = ""
    target: str = ""
    content: str = ""


@dataclass(frozen=True)
class PersistMessage:
    """A message of a given ``type`` that is to be stored by the repository."""

    source: str = ""
    target: str = ""
    type: str = ""
    timestamp: int = 0
    content: str = ""


@dataclass(frozen=True)
class LogEntry:
    """One persisted record, stamped with a wall-clock and a logical clock."""

    name: str
    timestamp: int
    logical_clock: int
    source: str
    target: str
    content: str

    def to_csv(self) -> str:
        """Return the record as one comma separated line, without a newline."""
        return ",".join(
            (
                self.name,
                str(self.logical_clock),
                str(self.timestamp),
                self.source,
                self.target,
                self.content,
            )
        )


Publish = Callable[[str, Union[Message, PersistMessage]], None]