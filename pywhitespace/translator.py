import logging

from .commands import Argument, Cmd, format_label
from .errors import (DuplicateLabelError, InvalidCommandError, LabelPastEndError,
                     UndefinedLabelError)
from .instructions import OPERATIONS

log = logging.getLogger(__name__)


def _check_argument(index, command, expected):
    if not isinstance(command.argument, expected) or isinstance(command.argument, bool):
        raise InvalidCommandError(
            f'index {index}: expected {expected.__name__} argument for {command.cmd.title}, '
            f'got {type(command.argument).__name__}')


def translate(commands):
    """
    Resolves labels and turns Commands into executable Instructions.

    Label definitions are dropped from the output and recorded as the index
    of the instruction that follows them. References to labels that are not
    known yet are remembered as fix-ups and patched once every label has
    been seen.
    """
    labels = {}
    fixups = {}
    last_label = None
    instructions = []

    for index, command in enumerate(commands):
        if not command.cmd.is_mnemonic:
            raise InvalidCommandError(f'index {index}: invalid command: {command.cmd.title}')

        argument = 0
        if command.cmd.argument is Argument.NUMBER:
            _check_argument(index, command, int)
            argument = command.argument
        elif command.cmd.argument is Argument.LABEL:
            _check_argument(index, command, bytes)

        if command.cmd is Cmd.MARK:
            if command.argument in labels:
                raise DuplicateLabelError(format_label(command.argument), index,
                                          labels[command.argument][1])
            labels[command.argument] = (len(instructions), index)
            last_label = command.argument
            continue

        if command.cmd.references_label:
            if command.argument in labels:
                argument = labels[command.argument][0]
            else:
                fixups[len(instructions)] = command.argument

        instructions.append(OPERATIONS[command.cmd](argument))

    # Labels are recorded in increasing order, so only the last can be past the end
    if last_label is not None and labels[last_label][0] >= len(instructions):
        raise LabelPastEndError(format_label(last_label))

    for position, label in fixups.items():
        if label not in labels:
            raise UndefinedLabelError(format_label(label), position)
        instructions[position].argument = labels[label][0]

    log.debug('translated %d instructions, %d labels, %d fix-ups',
              len(instructions), len(labels), len(fixups))
    return instructions
