import io
import sys
from dataclasses import dataclass
from typing import Callable

from .errors import ConsoleError


def _write_char(stream):
    def write_char(value):
        stream.write(chr(value))
        stream.flush()
    return write_char


def _write_number(stream):
    def write_number(value):
        stream.write(f'{value}\n')
        stream.flush()
    return write_number


def _read_char(stream):
    def read_char():
        char = stream.read(1)
        if not char:
            raise ConsoleError('unexpected end of input while reading a character')
        return ord(char)
    return read_char


def _read_number(stream):
    def read_number():
        line = stream.readline()
        if not line:
            raise ConsoleError('unexpected end of input while reading a number')
        return int(line.strip())
    return read_number


@dataclass
class Console:
    """
    The four I/O capabilities a VirtualMachine runs against.

    Characters are exchanged as code points, numbers as decimal lines.
    """
    write_char: Callable[[int], None]
    write_number: Callable[[int], None]
    read_char: Callable[[], int]
    read_number: Callable[[], int]

    @classmethod
    def from_streams(cls, input, output):
        return cls(_write_char(output), _write_number(output),
                   _read_char(input), _read_number(input))

    @classmethod
    def standard(cls):
        return cls.from_streams(sys.stdin, sys.stdout)


class StringConsole(Console):
    def __init__(self, input=''):
        self.input = io.StringIO(input)
        self.buffer = io.StringIO()
        super().__init__(_write_char(self.buffer), _write_number(self.buffer),
                         _read_char(self.input), _read_number(self.input))

    @property
    def output(self):
        return self.buffer.getvalue()
