"""Relays component messages and turns them into persistence requests."""

from __future__ import annotations

import time
from collections.abc import Callable

from bsn.messages import Message, PersistMessage, Publish

PERSIST_TOPIC = "persist"
RECONFIGURE_TOPIC = "reconfigure"
STATUS_TOPIC = "status"
EVENT_TOPIC = "event"


class Logger:
    """Stamps incoming messages and publishes them for persistence.

    Status, event and adaptation messages are also forwarded on their own
    topics. Published messages go to ``publish(topic, message)``; without it
    they are collected in ``published``.
    """

    def __init__(
        self,
        frequency: float = 1.0,
        publish: Publish | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.frequency = frequency
        self.time_ref = 0
        self.published: list[tuple[str, Message | PersistMessage]] = []
        self._publish: Publish = publish if publish is not None else self._record
        self._clock = clock if clock is not None else time.time_ns

    def _record(self, topic: str, msg: Message | PersistMessage) -> None:
        self.published.append((topic, msg))

    def now(self) -> int:
        """Current time in nanoseconds."""
        return self._clock()

    def set_up(self) -> None:
        """Take the reference time that persisted timestamps are relative to."""
        self.time_ref = self.now()

    def _persist(self, msg: Message, kind: str) -> None:
        record = PersistMessage(
            source=msg.source,
            target=msg.target,
            type=kind,
            timestamp=self.now() - self.time_ref,
            content=msg.content,
        )
        self._publish(PERSIST_TOPIC, record)

    def receive_adaptation_command(self, msg: Message) -> None:
        """Persist an adaptation command and forward it for reconfiguration."""
        self._persist(msg, "AdaptationCommand")
        self._publish(RECONFIGURE_TOPIC, msg)

    def receive_status(self, msg: Message) -> None:
        """Persist a status message and forward it."""
        self._persist(msg, "Status")
        self._publish(STATUS_TOPIC, msg)

    def receive_energy_status(self, msg: Message) -> None:
        """Persist an energy status message."""
        self._persist(msg, "EnergyStatus")

    def receive_voltage_status(self, msg: Message) -> None:
        """Persist a voltage status message."""
        self._persist(msg, "VoltageStatus")

    def receive_event(self, msg: Message) -> None:
        """Persist an event and forward it."""
        self._persist(msg, "Event")
        self._publish(EVENT_TOPIC, msg)

    def receive_uncertainty(self, msg: Message) -> None:
        """Persist an uncertainty injection."""
        self._persist(msg, "Uncertainty")