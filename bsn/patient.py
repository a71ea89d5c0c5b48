"""Simulated patient that produces vital-sign readings on request."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bsn.generator import DataGenerator, Markov
from bsn.ranges import Range
from bsn.utils import split

_INITIAL_STATE = 2
_RANGE_KEYS = ("_HighRisk0", "_MidRisk0", "_LowRisk", "_MidRisk1", "_HighRisk1")


class PatientModule:
    """Holds one Markov data generator per vital sign and advances them over time.

    ``params`` supplies the configuration: ``vitalSigns`` (comma separated),
    and per vital sign ``<sign>_Change``, ``<sign>_Offset``,
    ``<sign>_State0`` .. ``<sign>_State4`` and the five risk ranges.
    """

    def __init__(self, params: Mapping[str, Any], seed: int | None = None) -> None:
        self.params = params
        self.seed = seed
        self.frequency = 1000.0
        self.period = 1 / self.frequency
        self.patient_data: dict[str, DataGenerator] = {}
        self.vital_signs_frequencies: dict[str, float] = {}
        self.vital_signs_changes: dict[str, float] = {}
        self.vital_signs_offsets: dict[str, float] = {}

    def _param(self, key: str) -> Any:
        try:
            return self.params[key]
        except KeyError:
            raise KeyError(f"missing parameter {key!r}") from None

    def set_up(self) -> None:
        """Read the configuration and build a generator for each vital sign."""
        self.frequency = 1000.0
        vital_signs = split(str(self._param("vitalSigns")).replace(" ", ""), ",")

        for sign in vital_signs:
            self.vital_signs_frequencies[sign] = 0.0
            self.vital_signs_changes[sign] = 1 / float(self._param(sign + "_Change"))
            self.vital_signs_offsets[sign] = float(self._param(sign + "_Offset"))

        for sign in vital_signs:
            self.patient_data[sign] = self.configure_data_generator(sign)

        self.period = 1 / self.frequency

    def configure_data_generator(self, vital_sign: str) -> DataGenerator:
        """Build the data generator of ``vital_sign`` from its parameters."""
        transitions: list[float] = []
        for state in range(5):
            row = split(str(self._param(f"{vital_sign}_State{state}")), ",")
            transitions.extend(float(value) for value in row[:5])

        ranges = []
        for suffix in _RANGE_KEYS:
            bounds = split(str(self._param(vital_sign + suffix)), ",")
            ranges.append(Range(float(bounds[0]), float(bounds[1])))

        generator = DataGenerator(Markov(transitions, ranges, _INITIAL_STATE))
        generator.set_seed(self.seed)
        return generator

    def get_patient_data(self, vital_sign: str) -> float:
        """Return a fresh reading of ``vital_sign``."""
        value = self.patient_data[vital_sign].get_value()
        print(f"Send {vital_sign} data.")
        return value

    def body(self) -> None:
        """Advance one cycle, changing state of each sign whose interval elapsed."""
        for sign in sorted(self.vital_signs_frequencies):
            elapsed = self.vital_signs_frequencies[sign]
            offset = self.vital_signs_offsets[sign]
            if elapsed >= self.vital_signs_changes[sign] + offset:
                self.patient_data[sign].next_state()
                self.vital_signs_frequencies[sign] = offset
                print(f"Changed {sign} state.")
            else:
                self.vital_signs_frequencies[sign] = elapsed + self.period