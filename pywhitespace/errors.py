class WhitespaceError(Exception):
    pass


class ParseError(WhitespaceError):
    pass


class UnexpectedByteError(ParseError):
    def __init__(self, byte, state, reason=None):
        self.byte = byte
        self.state = state
        message = f'unexpected byte 0x{byte:02X} in state {state}'
        if reason:
            message += f': {reason}'
        super().__init__(message)


class UnexpectedEndError(ParseError):
    def __init__(self, during):
        self.during = during
        super().__init__(f'unexpected end of input while reading {during}')


class NumberTooLargeError(ParseError):
    def __init__(self):
        super().__init__('number too large for implementation (>63 bits)')


class TranslationError(WhitespaceError):
    pass


class InvalidCommandError(TranslationError):
    pass


class DuplicateLabelError(TranslationError):
    def __init__(self, label, index, previous):
        self.label = label
        super().__init__(f'index {index}: duplicate label (from index {previous}): {label}')


class LabelPastEndError(TranslationError):
    def __init__(self, label):
        self.label = label
        super().__init__(f'label points past end of code: {label}')


class UndefinedLabelError(TranslationError):
    def __init__(self, label, index):
        self.label = label
        self.index = index
        super().__init__(f'undefined label: {label}')


class ExecutionError(WhitespaceError):
    pass


class StackUnderflowError(ExecutionError):
    def __init__(self):
        super().__init__('stack underflow')


class NegativeAddressError(ExecutionError):
    def __init__(self, action, address):
        self.address = address
        super().__init__(f'{action} negative heap address: {address}')


class EmptyCallStackError(ExecutionError):
    def __init__(self):
        super().__init__('return with empty call stack')


class ProgramCounterError(ExecutionError):
    def __init__(self, index):
        self.index = index
        super().__init__(f'program counter out of range: {index}')


class DivisionByZeroError(ExecutionError):
    def __init__(self, operation):
        super().__init__(f'{operation} by zero')


class InvalidArgumentError(ExecutionError):
    pass


class InvalidOpcodeError(ExecutionError):
    def __init__(self):
        super().__init__('invalid opcode')


class ConsoleError(ExecutionError):
    pass


class StepLimitError(ExecutionError):
    def __init__(self, steps):
        self.steps = steps
        super().__init__(f'program did not halt within {steps} steps')
