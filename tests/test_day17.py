import pytest

from advent24.day17 import Machine, find_quine, parse, run_program

PART1 = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0"""

PART2 = """Register A: 2024
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0"""


def test_run_program_example():
    assert run_program(PART1) == "4,6,3,5,6,3,5,2,1,0,"


def test_find_quine_example():
    assert find_quine(PART2) == 117440


def test_quine_reproduces_program():
    a = find_quine(PART2)
    machine = Machine(a, 0, 0, (0, 3, 5, 4, 3, 0))
    assert machine.run() == [0, 3, 5, 4, 3, 0]


def test_parse_reads_registers_and_program():
    machine = parse(PART1)
    assert (machine.a, machine.b, machine.c) == (729, 0, 0)
    assert machine.program == (0, 1, 5, 4, 3, 0)
    assert machine.pc == 0


def test_bst_from_register_c():
    machine = Machine(0, 0, 9, (2, 6))
    machine.run()
    assert machine.b == 1


def test_output_sequence():
    machine = Machine(10, 0, 0, (5, 0, 5, 1, 5, 4))
    assert machine.run() == [0, 1, 2]
    assert machine.output_text == "0,1,2"


def test_loop_empties_register_a():
    machine = Machine(2024, 0, 0, (0, 1, 5, 4, 3, 0))
    assert machine.run() == [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]
    assert machine.a == 0


def test_bxl_and_bxc():
    machine = Machine(0, 29, 0, (1, 7))
    machine.run()
    assert machine.b == 26
    machine = Machine(0, 2024, 43690, (4, 0))
    machine.run()
    assert machine.b == 44354


def test_step_reports_halt():
    machine = Machine(0, 0, 0, (1, 1, 1, 2))
    assert machine.step() is True
    assert machine.step() is False
    assert machine.b == 3


def test_run_respects_limit():
    machine = Machine(1, 0, 0, (3, 0))
    machine.run(5)
    assert machine.pc == 0
    assert machine.output == []


def test_combo_values():
    machine = Machine(11, 12, 13, (0, 0))
    assert [machine.combo(n) for n in range(7)] == [0, 1, 2, 3, 11, 12, 13]


def test_reserved_combo_operand_raises():
    with pytest.raises(ValueError):
        Machine(0, 0, 0, (2, 7)).step()