from .commands import Cmd, Command, Imp
from .console import Console, StringConsole
from .encoder import encode, program
from .errors import (ExecutionError, ParseError, StepLimitError, TranslationError,
                     WhitespaceError)
from .parser import parse, parse_source
from .tokens import sanitize
from .translator import translate
from .vm import VirtualMachine


def load(source, console=None):
    """Parses and translates ``source`` into a ready-to-run VirtualMachine."""
    return VirtualMachine(translate(parse_source(source)), console)


def whitespace(code, input='', max_steps=None):
    console = StringConsole(input)
    vm = load(code, console)
    if not vm.run(max_steps):
        raise StepLimitError(max_steps)
    return console.output
