import io

from robowarehouse.manager import (
    MAP_DEFAULT,
    MAP_HEIGHT,
    MAP_WIDTH,
    MapPrinter,
    render_map,
    render_place,
)
from robowarehouse.robot import Robot


def _map_rows(text):
    lines = text.splitlines()
    start = lines.index("MAP_INFO::") + 1
    return lines[start:start + MAP_HEIGHT]


def test_render_map_frames_step():
    text = render_map([], 3)
    lines = text.splitlines()
    assert lines[0] == "STEP_INFO_START::3"
    assert lines[-1] == "STEP_INFO_DONE::3"
    assert text.endswith("\n")


def test_empty_map_shows_default_cells():
    rows = _map_rows(render_map([], 0))
    for row, line in zip(range(MAP_HEIGHT), rows):
        cells = [line[i:i + 5] for i in range(0, len(line), 5)]
        assert len(cells) == MAP_WIDTH
        assert [cell[0] for cell in cells] == list(MAP_DEFAULT[row])


def test_place_info_sections_in_order():
    lines = render_map([], 0).splitlines()
    start = lines.index("PLACE_INFO::")
    assert [line[:2] for line in lines[start + 1:start + 5]] == ["W:", "A:", "B:", "C:"]


def test_robot_at_start_listed_under_w_but_not_drawn_over_w():
    robot = Robot("R1", 6, 5, 2)
    lines = render_map([robot], 0).splitlines()
    assert "W:R1M0," in lines
    assert "R1" not in _map_rows("\n".join(lines))[6]


def test_loaded_and_empty_robots_drawn_differently():
    loaded = Robot("R1", 5, 1, 3, 3)
    empty = Robot("R2", 1, 1, 4)
    rows = _map_rows(render_map([loaded, empty], 0))
    assert "R1M3 " in rows[5]
    assert "R2   " in rows[1]


def test_render_place_lists_only_robots_on_cell():
    robots = [Robot("R1", 1, 0, 1, 1), Robot("R2", 3, 0, 2, 2), Robot("R3", 1, 0, 5, 5)]
    assert render_place(robots, 1, 0) == "R1M1,R3M5,"
    assert render_place(robots, 5, 0) == ""


def test_printer_writes_and_counts_steps():
    out = io.StringIO()
    printer = MapPrinter(out)
    robots = [Robot("R1", 6, 5, 1)]
    printer.print_map(robots)
    printer.increase_step()
    printer.print_map(robots)
    text = out.getvalue()
    assert printer.step == 1
    assert text == render_map(robots, 0) + render_map(robots, 1)