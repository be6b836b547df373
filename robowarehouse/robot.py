"""Robots moving around the warehouse floor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Robot:
    """A robot: its name, its cell on the map and the payloads it wants and carries."""

    name: str
    row: int
    col: int
    required_payload: int
    current_payload: int = 0