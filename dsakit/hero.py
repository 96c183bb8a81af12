"""A game character with health and a one-letter level."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Hero"]


@dataclass
class Hero:
    """Hero with a health score and a single-character level."""

    health: int = 0
    level: str = ""

    def __post_init__(self) -> None:
        if len(self.level) > 1:
            raise ValueError("level must be a single character")

    def describe(self) -> str:
        """Return the hero's health and level as two lines."""
        return f"Health is : {self.health}\nLevel is : {self.level}"