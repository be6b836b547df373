"""The warehouse simulation: a central control node steering robot threads."""

from __future__ import annotations

import sys
import threading
import time
from enum import IntEnum
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from robowarehouse.blocking import BlockedThreads
from robowarehouse.manager import (
    COL_A,
    COL_B,
    COL_C,
    COL_W,
    MAP_HEIGHT,
    MAP_WIDTH,
    ROW_A,
    ROW_B,
    ROW_C,
    ROW_W,
    MapPrinter,
)
from robowarehouse.message import Message, MessageBox
from robowarehouse.robot import Robot


class Command(IntEnum):
    """Commands the control node sends to a robot."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4
    WAIT = 5
    STOP = 6
    LOAD = 7


_WALL = 100
_PATH = 98
_ROBOT = -1
_MAX_DISTANCE = 16
_POLL_INTERVAL = 0.0005

# Open floor of the warehouse; payload cells are opened only for the robot that wants them.
_FLOOR = (
    "#######",
    "#..#..#",
    "#.###.#",
    "#.###.#",
    "#.###.#",
    "#.....#",
    "#####.#",
)

_PAYLOAD_CELLS = {
    1: (2, 2),
    2: (3, 2),
    3: (4, 2),
    4: (2, 4),
    5: (3, 4),
    6: (4, 4),
    7: (1, 3),
}
_PAYLOAD_AT = {cell: payload for payload, cell in _PAYLOAD_CELLS.items()}

_GOAL_CELLS = {
    "A": (ROW_A, COL_A),
    "B": (ROW_B, COL_B),
    "C": (ROW_C, COL_C),
}

_SHARED_CELLS = frozenset(
    {(ROW_A, COL_A), (ROW_B, COL_B), (ROW_C, COL_C), (ROW_W, COL_W)}
)

_MOVES = (
    (Command.UP, -1, 0),
    (Command.DOWN, 1, 0),
    (Command.LEFT, 0, -1),
    (Command.RIGHT, 0, 1),
)

Job = Tuple[int, str]


def parse_jobs(count: int, spec: str) -> List[Job]:
    """Parse COUNT jobs from a spec such as "2A:4C" into (payload, goal) pairs."""
    if count < 0:
        raise ValueError(f"robot count must not be negative: {count}")
    tokens = [token for token in spec.split(":") if token]
    if len(tokens) < count:
        raise ValueError(f"expected {count} jobs, found {len(tokens)} in {spec!r}")
    jobs: List[Job] = []
    for token in tokens[:count]:
        if len(token) < 2 or not token[0].isdigit():
            raise ValueError(f"malformed job {token!r}")
        payload, goal = int(token[0]), token[1]
        if payload not in _PAYLOAD_CELLS:
            raise ValueError(f"unknown payload {payload} in job {token!r}")
        if goal not in _GOAL_CELLS:
            raise ValueError(f"unknown goal {goal!r} in job {token!r}")
        jobs.append((payload, goal))
    return jobs


def make_robots(jobs: Sequence[Job]) -> List[Robot]:
    """Create one robot per job, named R1, R2, ... and parked at the waiting cell."""
    return [
        Robot(f"R{number}", ROW_W, COL_W, payload, 0)
        for number, (payload, _goal) in enumerate(jobs, start=1)
    ]


def _neighbours(row: int, col: int):
    for _command, d_row, d_col in _MOVES:
        n_row, n_col = row + d_row, col + d_col
        if 0 <= n_row < MAP_HEIGHT and 0 <= n_col < MAP_WIDTH:
            yield n_row, n_col


def find_path(robots: Sequence[Robot], index: int, goals: Sequence[str]) -> Command:
    """Choose the next command for one robot, moving it on the map if it moves."""
    robot = robots[index]
    required = robot.required_payload
    loaded = robot.current_payload == required
    grid = [[_PATH if cell == "." else _WALL for cell in line] for line in _FLOOR]

    if required not in _PAYLOAD_CELLS:
        raise ValueError(f"robot {index} has an invalid payload {required}")
    payload_cell = _PAYLOAD_CELLS[required]
    grid[payload_cell[0]][payload_cell[1]] = _PATH

    if loaded:
        goal_letter = goals[index]
        if goal_letter not in _GOAL_CELLS:
            raise ValueError(f"robot {index} has an invalid goal {goal_letter!r}")
        goal = _GOAL_CELLS[goal_letter]
    else:
        goal = payload_cell
    grid[goal[0]][goal[1]] = 0

    for other in robots:
        if (other.row, other.col) not in _SHARED_CELLS:
            grid[other.row][other.col] = _WALL

    row, col = robot.row, robot.col
    grid[row][col] = _PATH

    distance = 0
    while grid[row][col] == _PATH:
        for i in range(MAP_HEIGHT):
            for j in range(MAP_WIDTH):
                if grid[i][j] == _PATH and any(
                    grid[a][b] == distance for a, b in _neighbours(i, j)
                ):
                    grid[i][j] = distance + 1
        distance += 1
        if distance >= _MAX_DISTANCE:
            grid[row][col] = _ROBOT
            break

    if (row, col) == goal:
        return Command.STOP if loaded else Command.LOAD

    here = grid[row][col]
    for command, d_row, d_col in _MOVES:
        n_row, n_col = row + d_row, col + d_col
        if 0 <= n_row < MAP_HEIGHT and 0 <= n_col < MAP_WIDTH and grid[n_row][n_col] < here:
            robot.row, robot.col = n_row, n_col
            return command
    return Command.WAIT


def apply_command(row: int, col: int, payload: int, command: int) -> Tuple[int, int, int]:
    """Carry out a command on a robot's own state; return its new row, column and payload."""
    if command < Command.WAIT:
        for move, d_row, d_col in _MOVES:
            if command == move:
                return row + d_row, col + d_col, payload
        return row, col, payload
    if command == Command.LOAD:
        return row, col, _PAYLOAD_AT.get((row, col), payload)
    return row, col, payload


def _wait_until(condition: Callable[[], bool]) -> None:
    while not condition():
        time.sleep(_POLL_INTERVAL)


def robot_worker(
    index: int, inbox: MessageBox, outbox: MessageBox, blocked: BlockedThreads
) -> None:
    """Run robot number INDEX: obey each command, report back, then block until released.

    Being released with no command waiting ends the run.
    """
    row, col, payload = ROW_W, COL_W, 0
    _wait_until(inbox.has_message)
    message = inbox.receive()
    while True:
        row, col, payload = apply_command(row, col, payload, message.cmd)
        outbox.send(Message(row=row, col=col, current_payload=payload, cmd=message.cmd))
        blocked.block()
        if not inbox.has_message():
            return
        message = inbox.receive()


def run_warehouse(
    argv: Sequence[str], out: Optional[TextIO] = None, delay: float = 1.0
) -> List[Robot]:
    """Run the simulation for argv = [name, robot count, job spec]; return the robots."""
    if len(argv) < 3:
        raise ValueError("expected a program name, a robot count and a job spec")
    stream = out if out is not None else sys.stdout
    stream.write(f"arguments list:{argv[0]}, {argv[1]}, {argv[2]}\n")

    count = int(argv[1])
    jobs = parse_jobs(count, argv[2])
    goals = [goal for _payload, goal in jobs]
    robots = make_robots(jobs)

    to_robots = [MessageBox() for _ in robots]
    from_robots = [MessageBox() for _ in robots]
    blocked = BlockedThreads()
    workers = [
        threading.Thread(
            target=robot_worker,
            args=(index, to_robots[index], from_robots[index], blocked),
            name=robot.name,
            daemon=True,
        )
        for index, robot in enumerate(robots)
    ]
    for worker in workers:
        worker.start()

    printer = MapPrinter(stream)
    stopped = [False] * count
    while True:
        for index, inbox in enumerate(to_robots):
            command = find_path(robots, index, goals)
            if command is Command.STOP:
                stopped[index] = True
            inbox.send(Message(cmd=int(command)))

        printer.increase_step()
        blocked.unblock_all()

        replies: List[Optional[Message]] = [None] * count
        pending = set(range(count))
        while pending:
            for index in list(pending):
                if from_robots[index].has_message():
                    replies[index] = from_robots[index].receive()
                    pending.discard(index)
            if pending:
                time.sleep(_POLL_INTERVAL)

        for robot, reply in zip(robots, replies):
            robot.current_payload = reply.current_payload

        printer.print_map(robots)
        _wait_until(lambda: blocked.waiting() >= count)

        if all(stopped):
            break
        time.sleep(delay)

    blocked.unblock_all()
    for worker in workers:
        worker.join()
    stream.write("\nProgram Terminate")
    return robots


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: robowarehouse COUNT JOBS, e.g. robowarehouse 2 2A:4C."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        sys.stderr.write("usage: robowarehouse COUNT JOBS\n")
        return 2
    try:
        run_warehouse(["robowarehouse", *args])
    except ValueError as error:
        sys.stderr.write(f"robowarehouse: {error}\n")
        return 1
    sys.stdout.write("\n")
    return 0