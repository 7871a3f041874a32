from .commands import Cmd
from .errors import (DivisionByZeroError, EmptyCallStackError, InvalidArgumentError,
                     InvalidOpcodeError, NegativeAddressError)

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def wrap(value):
    """Reduces an integer to signed 64-bit two's complement."""
    return (value - INT64_MIN) % 2 ** 64 + INT64_MIN


def truncated_divide(dividend, divisor):
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


class Instruction:
    def __init__(self, argument=0):
        self.argument = argument

    def __eq__(self, other):
        return type(self) is type(other) and self.argument == other.argument

    def __hash__(self):
        return hash((type(self), self.argument))

    def __repr__(self):
        return str(self)

class Nullary(Instruction):
    def __str__(self):
        return f'{type(self).__name__}'

class Unary(Instruction):
    def __str__(self):
        return f'{type(self).__name__}({repr(self.argument)})'

class Invalid(Nullary):
    def perform(self, vm):
        raise InvalidOpcodeError()

class Push(Unary):
    def perform(self, vm):
        vm.stack.append(self.argument)

class Duplicate(Nullary):
    def perform(self, vm):
        vm.require(1)
        vm.stack.append(vm.stack[-1])

class Copy(Unary):
    def perform(self, vm):
        if self.argument < 0:
            raise InvalidArgumentError(f'copy with negative count: {self.argument}')
        vm.require(self.argument + 1)
        vm.stack.append(vm.stack[-self.argument-1])

class Swap(Nullary):
    def perform(self, vm):
        vm.require(2)
        vm.stack[-1], vm.stack[-2] = vm.stack[-2], vm.stack[-1]

class Discard(Nullary):
    def perform(self, vm):
        vm.require(1)
        vm.stack.pop()

class Slide(Unary):
    def perform(self, vm):
        if self.argument < 0:
            raise InvalidArgumentError(f'slide with negative count: {self.argument}')
        vm.require(self.argument + 1)
        a = vm.stack.pop()
        del vm.stack[len(vm.stack)-self.argument:]
        vm.stack.append(a)

class BinArith(Nullary):
    def perform(self, vm):
        vm.require(2)
        a = vm.stack[-1]
        b = vm.stack[-2]
        result = wrap(self._combine(a, b))
        del vm.stack[-2:]
        vm.stack.append(result)

class Add(BinArith):
    def _combine(self, a, b):
        return b + a

class Subtract(BinArith):
    def _combine(self, a, b):
        return b - a

class Multiply(BinArith):
    def _combine(self, a, b):
        return b * a

class Division(BinArith):
    def _combine(self, a, b):
        if a == 0:
            raise DivisionByZeroError('division')
        return truncated_divide(b, a)

class Modulo(BinArith):
    def _combine(self, a, b):
        if a == 0:
            raise DivisionByZeroError('modulo')
        return b - a * truncated_divide(b, a)

class Store(Nullary):
    def perform(self, vm):
        vm.require(2)
        a = vm.stack.pop()
        b = vm.stack.pop()
        vm.store(b, a)

class Retrieve(Nullary):
    def perform(self, vm):
        vm.require(1)
        a = vm.stack[-1]
        if a < 0:
            raise NegativeAddressError('retrieve from', a)
        vm.stack[-1] = vm.heap.get(a, 0)

class Call(Unary):
    def perform(self, vm):
        vm.call_stack.append(vm.instruction_index)
        vm.instruction_index = self.argument

class Jump(Unary):
    def perform(self, vm):
        vm.instruction_index = self.argument

class JumpIfZero(Unary):
    def perform(self, vm):
        vm.require(1)
        if vm.stack.pop() == 0:
            vm.instruction_index = self.argument

class JumpIfNegative(Unary):
    def perform(self, vm):
        vm.require(1)
        if vm.stack.pop() < 0:
            vm.instruction_index = self.argument

class Return(Nullary):
    def perform(self, vm):
        if not vm.call_stack:
            raise EmptyCallStackError()
        vm.instruction_index = vm.call_stack.pop()

class Exit(Nullary):
    def perform(self, vm):
        vm.stop()

class WriteChar(Nullary):
    def perform(self, vm):
        vm.require(1)
        vm.call_console(vm.console.write_char, vm.stack.pop())

class WriteNumber(Nullary):
    def perform(self, vm):
        vm.require(1)
        vm.call_console(vm.console.write_number, vm.stack.pop())

class ReadChar(Nullary):
    def perform(self, vm):
        vm.require(1)
        address = vm.stack.pop()
        vm.store(address, vm.call_console(vm.console.read_char))

class ReadNumber(Nullary):
    def perform(self, vm):
        vm.require(1)
        address = vm.stack.pop()
        vm.store(address, wrap(vm.call_console(vm.console.read_number)))


OPERATIONS = {
    Cmd.NONE: Invalid,
    Cmd.PUSH: Push,
    Cmd.DUPLICATE: Duplicate,
    Cmd.COPY: Copy,
    Cmd.SWAP: Swap,
    Cmd.DISCARD: Discard,
    Cmd.SLIDE: Slide,
    Cmd.ADD: Add,
    Cmd.SUBTRACT: Subtract,
    Cmd.MULTIPLY: Multiply,
    Cmd.DIVIDE: Division,
    Cmd.MODULO: Modulo,
    Cmd.STORE: Store,
    Cmd.RETRIEVE: Retrieve,
    Cmd.MARK: Invalid,
    Cmd.CALL: Call,
    Cmd.JUMP: Jump,
    Cmd.JUMP_IF_ZERO: JumpIfZero,
    Cmd.JUMP_IF_NEGATIVE: JumpIfNegative,
    Cmd.RETURN: Return,
    Cmd.EXIT: Exit,
    Cmd.WRITE_CHAR: WriteChar,
    Cmd.WRITE_NUMBER: WriteNumber,
    Cmd.READ_CHAR: ReadChar,
    Cmd.READ_NUMBER: ReadNumber,
    Cmd.COUNT: Invalid,
}
