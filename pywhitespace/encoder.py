from .commands import Argument, Command
from .errors import NumberTooLargeError
from .parser import MAX_NUMBER_BITS, TRANSITIONS, State
from .tokens import LF, SPACE, TAB


def _prefixes():
    prefixes = {}
    pending = [(State.START, b'')]
    while pending:
        state, prefix = pending.pop()
        for byte, target in TRANSITIONS[state].items():
            path = prefix + bytes([byte])
            if isinstance(target, State):
                pending.append((target, path))
            else:
                prefixes[target] = path
    return prefixes


PREFIXES = _prefixes()


def encode_number(value):
    if value.bit_length() > MAX_NUMBER_BITS:
        raise NumberTooLargeError()
    sign = bytes([TAB if value < 0 else SPACE])
    digits = bytes(TAB if bit == '1' else SPACE for bit in format(abs(value), 'b')) if value else b''
    return sign + digits + bytes([LF])


def encode_label(label):
    return label + bytes([LF])


def encode_command(command):
    result = PREFIXES[command.cmd]
    if command.cmd.argument is Argument.NUMBER:
        result += encode_number(command.argument)
    elif command.cmd.argument is Argument.LABEL:
        result += encode_label(command.argument)
    return result


def encode(commands):
    """Writes commands back out as Whitespace source bytes."""
    return b''.join(encode_command(command) for command in commands)


def program(*commands):
    """
    Shorthand for building source from (cmd, argument) tuples or bare Cmds.
    """
    return encode(command if isinstance(command, Command) else
                  Command(*command) if isinstance(command, tuple) else
                  Command(command)
                  for command in commands)
