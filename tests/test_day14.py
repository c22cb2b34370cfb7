import pytest

from advent24.day14 import (
    Robot,
    frames,
    main,
    parse,
    parse_position,
    parse_robot,
    parse_velocity,
    render,
    safety_factor,
)

DUMMY = """p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3"""


def test_part1():
    assert safety_factor(DUMMY, 11, 7, 100) == 12


def test_parse():
    expected = [
        Robot(0, 4, 3, -3),
        Robot(6, 3, -1, -3),
        Robot(10, 3, -1, 2),
        Robot(2, 0, 2, -1),
        Robot(0, 0, 1, 3),
        Robot(3, 0, -2, -2),
        Robot(7, 6, -1, -3),
        Robot(3, 0, -1, -2),
        Robot(9, 3, 2, 3),
        Robot(7, 3, -1, 2),
        Robot(2, 4, 2, -3),
        Robot(9, 5, -3, -3),
    ]
    assert parse(DUMMY) == expected


def test_parse_trailing_newline():
    assert parse("p=1,2 v=3,4\n") == [Robot(1, 2, 3, 4)]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse("nonsense")


def test_position_parsing():
    assert parse_position("p=0,4 v=3,-3") == (" v=3,-3", (0, 4))


def test_velocity_parsing():
    assert parse_velocity(" v=3,-3") == ("", (3, -3))


def test_velocity_parsing_failure():
    with pytest.raises(ValueError):
        parse_velocity("v=3,-3")


def test_robot_parsing():
    assert parse_robot("p=0,4 v=3,-3") == ("", Robot(0, 4, 3, -3))


def test_position_after_wraps():
    robot = Robot(2, 4, 2, -3)
    assert robot.position_after(5, 11, 7) == (1, 3)
    assert robot.position_after(0, 11, 7) == (2, 4)


def test_render():
    assert render([(0, 0), (2, 1)], 3, 2) == "X..\n..X"


def test_frames_shape():
    result = list(frames(DUMMY, 11, 7, 3))
    assert [step for step, _ in result] == [0, 1, 2]
    for _, picture in result:
        lines = picture.split("\n")
        assert len(lines) == 7
        assert all(len(line) == 11 for line in lines)


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DUMMY)
    main([str(path), "--width", "11", "--height", "7"])
    assert capsys.readouterr().out.strip() == "12"