from dataclasses import dataclass
from enum import Enum, auto


class Imp(Enum):
    NONE = 'None'
    STACK = 'Stack Manipulation'
    ARITHMETIC = 'Arithmetic'
    HEAP = 'Heap Access'
    FLOW = 'Flow Control'
    IO = 'I/O'

    def __str__(self):
        return f'IMP:{self.value}'


class Argument(Enum):
    NONE = auto()
    NUMBER = auto()
    LABEL = auto()


class Cmd(Enum):
    NONE = (0, Imp.NONE, Argument.NONE, 'None')
    # [Space]
    PUSH = (1, Imp.STACK, Argument.NUMBER, 'Push')
    DUPLICATE = (2, Imp.STACK, Argument.NONE, 'Duplicate')
    COPY = (3, Imp.STACK, Argument.NUMBER, 'Copy')
    SWAP = (4, Imp.STACK, Argument.NONE, 'Swap')
    DISCARD = (5, Imp.STACK, Argument.NONE, 'Discard')
    SLIDE = (6, Imp.STACK, Argument.NUMBER, 'Slide')
    # [Tab][Space]
    ADD = (7, Imp.ARITHMETIC, Argument.NONE, 'Add')
    SUBTRACT = (8, Imp.ARITHMETIC, Argument.NONE, 'Subtract')
    MULTIPLY = (9, Imp.ARITHMETIC, Argument.NONE, 'Multiply')
    DIVIDE = (10, Imp.ARITHMETIC, Argument.NONE, 'Division')
    MODULO = (11, Imp.ARITHMETIC, Argument.NONE, 'Modulo')
    # [Tab][Tab]
    STORE = (12, Imp.HEAP, Argument.NONE, 'Store')
    RETRIEVE = (13, Imp.HEAP, Argument.NONE, 'Retrieve')
    # [LF]
    MARK = (14, Imp.FLOW, Argument.LABEL, 'Label')
    CALL = (15, Imp.FLOW, Argument.LABEL, 'Call')
    JUMP = (16, Imp.FLOW, Argument.LABEL, 'Jump')
    JUMP_IF_ZERO = (17, Imp.FLOW, Argument.LABEL, 'JumpIfZero')
    JUMP_IF_NEGATIVE = (18, Imp.FLOW, Argument.LABEL, 'JumpIfNegative')
    RETURN = (19, Imp.FLOW, Argument.NONE, 'Return')
    EXIT = (20, Imp.FLOW, Argument.NONE, 'Exit')
    # [Tab][LF]
    WRITE_CHAR = (21, Imp.IO, Argument.NONE, 'WriteChar')
    WRITE_NUMBER = (22, Imp.IO, Argument.NONE, 'WriteNumber')
    READ_CHAR = (23, Imp.IO, Argument.NONE, 'ReadChar')
    READ_NUMBER = (24, Imp.IO, Argument.NONE, 'ReadNumber')

    COUNT = (25, Imp.NONE, Argument.NONE, 'Count')

    def __init__(self, code, imp, argument, title):
        self.code = code
        self.imp = imp
        self.argument = argument
        self.title = title

    @property
    def is_mnemonic(self):
        return Cmd.NONE.code < self.code < Cmd.COUNT.code

    @property
    def references_label(self):
        return self.argument is Argument.LABEL and self is not Cmd.MARK


def format_label(label):
    """Renders a label's space/tab bytes as S/T letters."""
    return label.decode('utf-8', 'replace').replace(' ', 'S').replace('\t', 'T')


@dataclass(frozen=True)
class Command:
    cmd: Cmd
    argument: object = None

    def __str__(self):
        if self.cmd.argument is Argument.NONE:
            return self.cmd.title
        if self.cmd.argument is Argument.LABEL and isinstance(self.argument, bytes):
            return f'{self.cmd.title}({format_label(self.argument)!r})'
        return f'{self.cmd.title}({self.argument!r})'
