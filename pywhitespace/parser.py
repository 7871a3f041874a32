import logging
from enum import Enum

from .commands import Argument, Cmd, Command
from .errors import NumberTooLargeError, UnexpectedByteError, UnexpectedEndError
from .tokens import LF, SIGNIFICANT, SPACE, TAB, sanitize, token_name

log = logging.getLogger(__name__)

MAX_NUMBER_BITS = 63


class State(Enum):
    START = ('start', '')
    IMP_TAB = ('impTab', 'Tab')
    STACK = ('stackManip', 'Stack Manipulation')
    STACK_TAB = ('stackManipTab', 'Stack Manipulation/Tab')
    STACK_LF = ('stackManipLF', 'Stack Manipulation/LF')
    ARITHMETIC = ('arithmetic', 'Arithmetic')
    ARITHMETIC_SPACE = ('arithSpace', 'Arithmetic/Space')
    ARITHMETIC_TAB = ('arithTab', 'Arithmetic/Tab')
    HEAP = ('heapAccess', 'Heap Access')
    IO = ('io', 'IO')
    IO_SPACE = ('ioSpace', 'IO/Space')
    IO_TAB = ('ioTab', 'IO/Tab')
    FLOW = ('flowControl', 'Flow Control')
    FLOW_SPACE = ('flowControlSpace', 'Flow Control/Space')
    FLOW_TAB = ('flowControlTab', 'Flow Control/Tab')
    FLOW_LF = ('flowControlLF', 'Flow Control/LF')

    def __init__(self, label, path):
        self.label = label
        self.path = path

    def __str__(self):
        return self.label


# Every valid instruction shape. A byte missing from a state's row is an
# invalid instruction.
TRANSITIONS = {
    State.START: {SPACE: State.STACK, TAB: State.IMP_TAB, LF: State.FLOW},
    State.IMP_TAB: {SPACE: State.ARITHMETIC, TAB: State.HEAP, LF: State.IO},

    State.STACK: {SPACE: Cmd.PUSH, TAB: State.STACK_TAB, LF: State.STACK_LF},
    State.STACK_TAB: {SPACE: Cmd.COPY, LF: Cmd.SLIDE},
    State.STACK_LF: {SPACE: Cmd.DUPLICATE, TAB: Cmd.SWAP, LF: Cmd.DISCARD},

    State.ARITHMETIC: {SPACE: State.ARITHMETIC_SPACE, TAB: State.ARITHMETIC_TAB},
    State.ARITHMETIC_SPACE: {SPACE: Cmd.ADD, TAB: Cmd.SUBTRACT, LF: Cmd.MULTIPLY},
    State.ARITHMETIC_TAB: {SPACE: Cmd.DIVIDE, TAB: Cmd.MODULO},

    State.HEAP: {SPACE: Cmd.STORE, TAB: Cmd.RETRIEVE},

    State.IO: {SPACE: State.IO_SPACE, TAB: State.IO_TAB},
    State.IO_SPACE: {SPACE: Cmd.WRITE_CHAR, TAB: Cmd.WRITE_NUMBER},
    State.IO_TAB: {SPACE: Cmd.READ_CHAR, TAB: Cmd.READ_NUMBER},

    State.FLOW: {SPACE: State.FLOW_SPACE, TAB: State.FLOW_TAB, LF: State.FLOW_LF},
    State.FLOW_SPACE: {SPACE: Cmd.MARK, TAB: Cmd.CALL, LF: Cmd.JUMP},
    State.FLOW_TAB: {SPACE: Cmd.JUMP_IF_ZERO, TAB: Cmd.JUMP_IF_NEGATIVE, LF: Cmd.RETURN},
    State.FLOW_LF: {LF: Cmd.EXIT},
}


def _unexpected(byte, state):
    if byte in SIGNIFICANT:
        prefix = f'{state.path}/' if state.path else ''
        return UnexpectedByteError(byte, state, f'invalid command: {prefix}{token_name(byte)}')
    return UnexpectedByteError(byte, state)


def parse(tokens):
    """
    Turns a stream of significant bytes into Commands.

    Runs the TRANSITIONS automaton; on reaching a command it reads the
    command's number or label argument, if any, straight from the same
    stream. The first malformed instruction raises a ParseError.
    """
    def read(during):
        byte = next(tokens, None)
        if byte is None:
            raise UnexpectedEndError(during)
        return byte

    def number():
        sign = read('sign for number')
        if sign == LF:
            raise UnexpectedByteError(sign, 'number', 'expected a sign (space/tab)')
        if sign not in (SPACE, TAB):
            raise UnexpectedByteError(sign, 'number')

        value = 0
        bits = 0
        while (current := read('a number')) != LF:
            if current not in (SPACE, TAB):
                raise UnexpectedByteError(current, 'number')
            # Leading zeroes are not counted
            if bits or current == TAB:
                bits += 1
                if bits > MAX_NUMBER_BITS:
                    raise NumberTooLargeError()
            value = value * 2 + (1 if current == TAB else 0)
        return -value if sign == TAB else value

    def label():
        result = bytearray()
        while (current := read('a label')) != LF:
            if current not in (SPACE, TAB):
                raise UnexpectedByteError(current, 'label')
            result.append(current)
        return bytes(result)

    readers = {
        Argument.NONE: lambda: None,
        Argument.NUMBER: number,
        Argument.LABEL: label,
    }

    tokens = iter(tokens)
    state = State.START
    for byte in tokens:
        target = TRANSITIONS[state].get(byte)
        if target is None:
            raise _unexpected(byte, state)
        if isinstance(target, State):
            state = target
        else:
            yield Command(target, readers[target.argument]())
            state = State.START

    if state is not State.START:
        raise UnexpectedEndError(f'an instruction in state {state}')


def parse_source(source):
    commands = list(parse(sanitize(source)))
    log.debug('parsed %d commands', len(commands))
    return commands
