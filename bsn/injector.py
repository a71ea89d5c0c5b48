"""Periodic injection of noise and voltage uncertainty into components."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Mapping
from dataclasses import dataclass

from bsn.messages import Message, Publish

_log = logging.getLogger(__name__)

LOG_UNCERTAINTY_TOPIC = "log_uncertainty"


@dataclass
class InjectionProfile:
    """How uncertainty is injected into one component.

    ``type`` is ``step``, ``ramp`` or ``random``; times are in seconds and
    frequencies in hertz.
    """

    type: str = ""
    offset: float = 0.0
    amplitude: float = 0.0
    frequency: float = 1.0
    duration: int = 0
    begin: int = 0
    volt_duration: int = 0
    volt_frequency: float = 1.0
    volt_min: float = 0.0
    volt_max: float = 0.0
    volt_begin: int = 0


@dataclass
class _ComponentState:
    noise_factor: float
    begin: int
    end: int
    volt_factor: float
    volt_begin: int
    volt_end: int


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


class Injector:
    """Injects uncertainty into components, one cycle per ``body`` call.

    Injections go to ``publish(topic, message)``; without it they are
    collected in ``published``.
    """

    def __init__(
        self,
        profiles: Mapping[str, InjectionProfile],
        frequency: float,
        publish: Publish | None = None,
        rng: random.Random | None = None,
        name: str = "/injector",
    ) -> None:
        self.frequency = frequency
        self.name = name
        self.cycles = 0
        self.profiles = dict(profiles)
        self.published: list[tuple[str, Message]] = []
        self._publish: Publish = publish if publish is not None else self._record
        self._rng = rng if rng is not None else random.Random()
        self._state: dict[str, _ComponentState] = {}
        for component, profile in self.profiles.items():
            begin = self.seconds_in_cycles(profile.begin)
            volt_begin = self.seconds_in_cycles(profile.volt_begin)
            self._state[component] = _ComponentState(
                noise_factor=profile.offset,
                begin=begin,
                end=begin + self.seconds_in_cycles(profile.duration),
                volt_factor=profile.volt_frequency,
                volt_begin=volt_begin,
                volt_end=volt_begin + self.seconds_in_cycles(profile.volt_duration),
            )

    def _record(self, topic: str, msg: Message) -> None:
        self.published.append((topic, msg))

    def seconds_in_cycles(self, seconds: float) -> int:
        """Number of whole cycles in ``seconds``, truncated toward zero."""
        return int(seconds * self.frequency)

    def cycles_in_seconds(self, cycles: float) -> int:
        """Number of whole seconds in ``cycles``, truncated toward zero."""
        return int(cycles / self.frequency)

    def _noise(self, profile: InjectionProfile, state: _ComponentState) -> float:
        last_cycle = self.cycles == state.end
        if profile.type == "step" and not last_cycle:
            return profile.amplitude
        if profile.type == "ramp" and not last_cycle:
            steps = self.seconds_in_cycles(profile.duration)
            return state.noise_factor + _divide(profile.amplitude, steps)
        if profile.type == "random":
            return self._rng.random() * profile.amplitude
        return 0.0

    def _volt_noise(self, profile: InjectionProfile, state: _ComponentState) -> float:
        if self.cycles != state.volt_end:
            return 1.0
        return self._rng.random() * (profile.volt_max - profile.volt_min) + profile.volt_min

    def body(self) -> None:
        """Advance one cycle and inject into every component whose window is open."""
        self.cycles += 1
        for component, profile in self.profiles.items():
            state = self._state[component]

            if state.begin <= self.cycles <= state.end:
                state.noise_factor = self._noise(profile, state)
                self.inject(component, f"noise_factor={state.noise_factor:f}")
                if self.cycles == state.end:
                    shift = self.seconds_in_cycles(1.0 / profile.frequency)
                    state.begin += shift
                    state.end += shift

            if state.volt_begin <= self.cycles <= state.volt_end:
                state.volt_factor = self._volt_noise(profile, state)
                self.inject(component, f"voltage_factor={state.volt_factor:f}")
                if self.cycles == state.volt_end:
                    shift = self.seconds_in_cycles(1.0 / profile.volt_frequency)
                    state.volt_begin += shift
                    state.volt_end += shift

    def inject(self, component: str, content: str) -> None:
        """Send ``content`` to ``component`` and to the uncertainty log."""
        msg = Message(source=self.name, target="/" + component, content=content)
        self._publish("uncertainty_/" + component, msg)
        self._publish(LOG_UNCERTAINTY_TOPIC, msg)
        _log.info("Inject [%s] at [%s].", content, component)