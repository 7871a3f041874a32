import argparse
import logging
import sys

from . import load, parse_source
from .errors import StepLimitError, WhitespaceError

log = logging.getLogger('pywhitespace')

DEFAULT_FILENAME = 'hello-world.ws'


def configure_logging(verbose):
    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pywhitespace', description='Run a Whitespace program.')
    parser.add_argument('file', nargs='?', default=DEFAULT_FILENAME,
                        help=f'Source file to run (default: {DEFAULT_FILENAME})')
    parser.add_argument('--max-steps', '-n', type=int, default=None,
                        help='Fail if the program has not exited after this many instructions')
    parser.add_argument('--list', '-l', action='store_true',
                        help='Print the parsed commands and their IMP group instead of running them')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Trace parsing, translation and every executed instruction')
    return parser


def execute(args):
    with open(args.file, 'rb') as source:
        if args.list:
            for command in parse_source(source):
                print(f'{str(command):<24}{command.cmd.imp}')
            return
        vm = load(source)
    log.info('running %s (%d instructions)', args.file, len(vm.instructions))
    if not vm.run(args.max_steps):
        raise StepLimitError(args.max_steps)


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        execute(args)
    except (WhitespaceError, OSError) as error:
        sys.stdout.flush()
        print(f'Error: {error}', file=sys.stderr)
        return 1
    return 0
