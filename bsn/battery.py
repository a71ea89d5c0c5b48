"""A simple battery resource model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Battery:
    """A battery that is drained and recharged in multiples of ``unit``."""

    id: str = ""
    capacity: float = 100.0
    current_level: float = 100.0
    unit: float = 1.0

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("Capacity should not be negative or null")
        if self.current_level < 0 or self.current_level > self.capacity:
            raise ValueError(
                "Current level should not be negative or null nor bigger than the capacity"
            )
        if self.unit < 0 or self.unit > self.capacity:
            raise ValueError(
                "The resolution should not be negative or null nor bigger than the capacity"
            )

    def consume(self, mult: float) -> None:
        """Drain ``unit * mult``, never going below zero."""
        self.current_level -= self.unit * mult
        if self.current_level < 0:
            self.current_level = 0

    def generate(self, mult: float) -> None:
        """Recharge ``unit * mult``, never going above the capacity."""
        self.current_level += self.unit * mult
        if self.current_level >= self.capacity:
            self.current_level = self.capacity

    def __str__(self) -> str:
        return (
            f"Battery: {self.id} {self.capacity:g} "
            f"{self.current_level:g} {self.unit:g}\n"
        )