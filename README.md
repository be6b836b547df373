# robowarehouse

A small simulation of an automated warehouse. Robots start at the waiting
spot `W`. Each one drives to a numbered shelf (1–7), loads its payload there
and delivers it to one of the unloading docks `A`, `B` or `C`. On every step
a central control node plans one command per robot. Each robot runs in its
own thread and talks to the control node through single-slot message boxes.
The warehouse map is printed after every step until every robot has stopped
at its dock.

## Warehouse layout

```
X X X X X X X
A . . 7 . . X
X . 1 X 4 . X
B . 2 X 5 . X
X . 3 X 6 . X
C . . . . S X
X X X X X W X
```

`X` is wall and `.` is open floor. A robot may enter only the shelf holding
its own payload. Other robots count as obstacles, except on `W`, `A`, `B`
and `C`, where any number of robots may stand together.

## Installation

```
pip install .
```

## Running

```
robowarehouse 3 2A:4C:7B
```

The first argument is the number of robots. The second holds one job per
robot, separated by colons. A job is a payload digit from 1 to 7 followed by
the letter of its destination dock (`A`, `B` or `C`). Jobs beyond the given
count are ignored. Robots are named `R1`, `R2`, … in the order their jobs
are given.

With too few arguments the command prints a usage line and exits with
status 2. With a malformed count or job it prints the error and exits with
status 1.

Each step is printed as a block that starts with `STEP_INFO_START::<n>` and
ends with `STEP_INFO_DONE::<n>`. The block holds the map with the robots
placed on it, where a loaded robot is shown as `<name>M<payload>`. After the
map comes a list of the robots standing at `W`, `A`, `B` and `C`, each
written as `<name>M<payload>,`. The command pauses one second between steps
and prints `Program Terminate` once every robot has stopped.

A robot with no way forward is told to wait. The run ends only when every
robot has reached its dock, so a set of jobs that blocks itself for good
keeps running.

## Library use

```python
import sys
from robowarehouse.simulation import parse_jobs, make_robots, find_path, run_warehouse

jobs = parse_jobs(2, "1A:5B")            # [(1, "A"), (5, "B")]
robots = make_robots(jobs)               # R1 and R2, both at W
goals = [goal for _, goal in jobs]
first_move = find_path(robots, 0, goals) # a Command, e.g. Command.UP

run_warehouse(["robowarehouse", "2", "1A:5B"], out=sys.stdout, delay=0.0)
```

`find_path` moves the robot it plans for on the map when the command is a
move. `apply_command` works out a robot's new row, column and payload for a
command. `run_warehouse` returns the robots in their final state; `delay` is
the pause between steps in seconds.

The pieces can also be used on their own:

- `robowarehouse.robot`: `Robot`, a dataclass holding a robot's name, cell and payloads.
- `robowarehouse.message`: `Message` and `MessageBox`, a box that holds a single message; `receive` on an empty box raises `EmptyMessageBoxError`.
- `robowarehouse.blocking`: `BlockedThreads`, which parks worker threads until they are released all together.
- `robowarehouse.manager`: `render_map`, `render_place` and `MapPrinter`, which draw the warehouse.

## Tests

```
pip install ".[test]"
pytest
```