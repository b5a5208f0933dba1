#!/usr/bin/python3

import argparse
import logging
import sys

from goembed.config import Config, parse_bool
from goembed.emitter import emit
from goembed.errors import GenerationError


def build_parser():
    parser = argparse.ArgumentParser(
        prog='goembed',
        description='Read stdin and write a Go source file embedding it as a []byte.',
        allow_abbrev=False,
    )
    parser.add_argument('-package', '--package', default='', help='Go package name')
    parser.add_argument('-var', '--var', default='', help='Go var name')
    parser.add_argument(
        '-gzip', '--gzip', nargs='?', const=True, default=False, type=parse_bool,
        metavar='BOOL', help='whether to gzip contents',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='log sizes to stderr')
    return parser


def read_input(stdin):
    try:
        return stdin.read()
    except OSError as e:
        raise GenerationError(f'Reading stdin: {e}') from e


def write_output(config, raw, stdout):
    try:
        emit(config, raw, stdout)
        stdout.flush()
    except OSError as e:
        raise GenerationError(f'Writing stdout: {e}') from e


def main(argv=None, stdin=None, stdout=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(message)s',
        datefmt='%Y/%m/%d %H:%M:%S',
    )

    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    config = Config(package=args.package, var=args.var, gzip=args.gzip)

    try:
        raw = read_input(stdin)
        logging.info('Read %d bytes', len(raw))
        write_output(config, raw, stdout)
    except GenerationError as e:
        logging.critical('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
