import pytest

from pywhitespace import Command, StringConsole, VirtualMachine, translate


def build(*commands):
    return [command if isinstance(command, Command) else
            Command(*command) if isinstance(command, tuple) else
            Command(command)
            for command in commands]


@pytest.fixture
def machine():
    def make(*commands, input=''):
        return VirtualMachine(translate(build(*commands)), StringConsole(input))
    return make
