import logging

from .console import Console
from .errors import (ConsoleError, NegativeAddressError, ProgramCounterError,
                     StackUnderflowError, WhitespaceError)

log = logging.getLogger(__name__)


class VirtualMachine:
    def __init__(self, instructions, console=None):
        self.instructions = instructions
        self.console = console if console is not None else Console.standard()
        self.instruction_index = 0
        self.call_stack = []
        self.stack = []
        self.heap = {}
        self.running = True
        self.error = None

    def step(self):
        if self.error is not None:
            raise self.error
        if not self.running:
            return
        try:
            instruction = self.current_instruction
            log.debug('%d: %s stack=%s', self.instruction_index, instruction, self.stack)
            self.instruction_index += 1
            instruction.perform(self)
        except WhitespaceError as error:
            self.fail(error)
            raise

    def run(self, max_steps=None):
        """
        Executes until the program exits, or until ``max_steps``
        instructions have run. Returns True if the program exited.
        """
        if self.error is not None:
            raise self.error
        steps = 0
        while self.running and (max_steps is None or steps < max_steps):
            self.step()
            steps += 1
        return not self.running

    def stop(self):
        self.running = False

    def fail(self, error):
        if self.error is None:
            self.error = error
        self.running = False

    def require(self, count):
        if len(self.stack) < count:
            raise StackUnderflowError()

    def store(self, address, value):
        if address < 0:
            raise NegativeAddressError('store to', address)
        self.heap[address] = value

    def call_console(self, operation, *args):
        try:
            return operation(*args)
        except ConsoleError:
            raise
        except Exception as error:
            raise ConsoleError(f'{type(error).__name__}: {error}') from error

    @property
    def current_instruction(self):
        if not 0 <= self.instruction_index < len(self.instructions):
            raise ProgramCounterError(self.instruction_index)
        return self.instructions[self.instruction_index]
