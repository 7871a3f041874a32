import pytest

from pywhitespace import Cmd, translate
from pywhitespace.errors import (DuplicateLabelError, InvalidCommandError, LabelPastEndError,
                                 UndefinedLabelError)
from pywhitespace.instructions import Exit, Jump, JumpIfZero, Push

from conftest import build


def test_backward_reference():
    commands = build((Cmd.MARK, b' '), (Cmd.PUSH, 1), (Cmd.JUMP, b' '))
    assert translate(commands) == [Push(1), Jump(0)]


def test_forward_reference():
    commands = build((Cmd.JUMP, b'\t'), (Cmd.PUSH, 2), (Cmd.MARK, b'\t'), Cmd.EXIT)
    assert translate(commands) == [Jump(2), Push(2), Exit()]


def test_several_labels_at_one_position():
    commands = build((Cmd.JUMP_IF_ZERO, b'a'), (Cmd.MARK, b'a'), (Cmd.MARK, b'b'),
                     Cmd.EXIT, (Cmd.JUMP, b'b'))
    assert translate(commands) == [JumpIfZero(1), Exit(), Jump(1)]


def test_duplicate_label():
    with pytest.raises(DuplicateLabelError):
        translate(build((Cmd.MARK, b'L'), (Cmd.MARK, b'L')))


def test_duplicate_label_in_unreachable_code():
    commands = build((Cmd.MARK, b' '), Cmd.EXIT, (Cmd.MARK, b'\t'), Cmd.EXIT,
                     (Cmd.MARK, b' '), Cmd.EXIT)
    with pytest.raises(DuplicateLabelError, match='S'):
        translate(commands)


def test_label_past_end():
    with pytest.raises(LabelPastEndError):
        translate(build(Cmd.EXIT, (Cmd.MARK, b' ')))


def test_undefined_label():
    with pytest.raises(UndefinedLabelError, match='undefined label: X'):
        translate(build((Cmd.JUMP, b'X'), Cmd.EXIT))


def test_rejects_pseudo_commands():
    with pytest.raises(InvalidCommandError):
        translate(build(Cmd.NONE))
    with pytest.raises(InvalidCommandError):
        translate(build(Cmd.COUNT))


def test_rejects_wrong_argument_types():
    with pytest.raises(InvalidCommandError, match='expected int'):
        translate(build((Cmd.PUSH, 'x')))
    with pytest.raises(InvalidCommandError, match='expected bytes'):
        translate(build((Cmd.CALL, 3)))


def test_infinite_loop_translates(machine):
    vm = machine((Cmd.MARK, b'L'), (Cmd.JUMP, b'L'))
    assert vm.instructions == [Jump(0)]
    assert vm.run(max_steps=100) is False
    assert vm.running
    assert vm.error is None


def test_labels_must_be_bytes():
    with pytest.raises(InvalidCommandError, match='expected bytes'):
        translate(build((Cmd.MARK, 'L'), Cmd.EXIT))


def test_instructions_are_hashable():
    assert len({Push(1), Push(1), Jump(1), Exit()}) == 3
