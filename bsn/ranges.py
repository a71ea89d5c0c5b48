"""Closed numeric intervals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Range:
    """A closed interval ``[lower_bound, upper_bound]``."""

    lower_bound: float = 0.0
    upper_bound: float = 0.0

    def __post_init__(self) -> None:
        if self.lower_bound > self.upper_bound:
            raise ValueError(
                "Invalid Range(lower bound is higher than uppper bound)"
            )

    def in_range(self, element: float) -> bool:
        """Return True if ``element`` lies inside the interval, bounds included."""
        return self.lower_bound <= element <= self.upper_bound

    def convert(self, new_lb: float, new_ub: float, value: float) -> float:
        """Map ``value`` linearly from this interval onto ``[new_lb, new_ub]``."""
        fraction = (value - self.lower_bound) / (self.upper_bound - self.lower_bound)
        return fraction * (new_ub - new_lb) + new_lb

    def to_print(self) -> str:
        """Return the interval as ``(lower - upper)`` with six decimals."""
        return f"({self.lower_bound:f} - {self.upper_bound:f})"

    def __str__(self) -> str:
        return f"Range: {self.lower_bound:g}{self.upper_bound:g}\n"