"""Drawing the warehouse map and keeping the step count."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, TextIO

from robowarehouse.robot import Robot

ROW_A, COL_A = 1, 0
ROW_B, COL_B = 3, 0
ROW_C, COL_C = 5, 0
ROW_S, COL_S = 5, 5
ROW_W, COL_W = 6, 5

MAP_WIDTH = 7
MAP_HEIGHT = 7

THREAD_STATUS = ("RUNNING", "READY", "BLOCKED", "DYING")

MAP_DEFAULT: tuple[str, ...] = (
    "XXXXXXX",
    "A  7  X",
    "X 1X4 X",
    "B 2X5 X",
    "X 3X6 X",
    "C    SX",
    "XXXXXWX",
)

_FIXED_CELLS = frozenset("ABCW")


def render_place(robots: Iterable[Robot], row: int, col: int) -> str:
    """List the robots standing on one cell, each as NAME M PAYLOAD followed by a comma."""
    return "".join(
        f"{robot.name}M{robot.current_payload},"
        for robot in robots
        if robot.row == row and robot.col == col
    )


def _render_cell(robots: Sequence[Robot], row: int, col: int) -> str:
    cell = MAP_DEFAULT[row][col]
    if cell in _FIXED_CELLS:
        return f"{cell}    "
    here = [robot for robot in robots if robot.row == row and robot.col == col]
    if not here:
        return f"{cell}    "
    return "".join(
        f"{robot.name}M{robot.current_payload} " if robot.current_payload > 0 else f"{robot.name}   "
        for robot in here
    )


def render_map(robots: Sequence[Robot], step: int) -> str:
    """Render the warehouse map and the robots at each named place for one step."""
    robots = list(robots)
    lines = [f"STEP_INFO_START::{step}", "MAP_INFO::"]
    for row in range(MAP_HEIGHT):
        lines.append("".join(_render_cell(robots, row, col) for col in range(MAP_WIDTH)))
    lines.append("")
    lines.append("PLACE_INFO::")
    for label, row, col in (
        ("W", ROW_W, COL_W),
        ("A", ROW_A, COL_A),
        ("B", ROW_B, COL_B),
        ("C", ROW_C, COL_C),
    ):
        lines.append(f"{label}:{render_place(robots, row, col)}")
    lines.append(f"STEP_INFO_DONE::{step}")
    return "\n".join(lines) + "\n"


class MapPrinter:
    """Prints the map for each step to a text stream."""

    def __init__(self, out: Optional[TextIO] = None, step: int = 0) -> None:
        self.out = out
        self.step = step

    def print_map(self, robots: Sequence[Robot]) -> None:
        """Write the map for the current step."""
        stream = self.out if self.out is not None else sys.stdout
        stream.write(render_map(robots, self.step))

    def increase_step(self) -> None:
        """Advance to the next step."""
        self.step += 1