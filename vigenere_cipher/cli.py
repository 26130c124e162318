"""
Command line
============
    usage: vigenere [-h] "message" [-m MODE] [-k "KEY"]

Arguments are positional in spirit: the message comes first, then the
optional ``-m MODE``, then ``-k KEY``, in exactly that order.
``--mode`` and ``--key`` are accepted as spellings of the flags. Every
failure, ``-h`` included, exits with status 1 and writes to stderr;
stdout only ever carries the transformed message.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from .cipher import Mode, transform
from .errors import HelpRequested, InvalidKey, UsageError
from .keystream import generate_keystream

logger = logging.getLogger(__name__)

PROG  = "vigenere"
USAGE = '%(prog)s [-h] "message" [-m MODE] [-k "KEY"]'

MODE_FLAGS = ("-m", "--mode")
KEY_FLAGS  = ("-k", "--key")


@dataclass(frozen=True)
class Invocation:
    message: str
    key:     str
    mode:    Mode = Mode.ENCRYPT


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=PROG, usage=USAGE, add_help=False)
    parser.add_argument("message",
                        help="the message to encrypt/decrypt (A-Z, a-z).")
    parser.add_argument("-m", "--mode", dest="mode", metavar="MODE", choices=("0", "1"), default="0",
                        help="encrypt/decrypt the message (0 = encrypt, 1 = decrypt, 0 = default).")
    # Presence and emptiness of -k are checked in parse_args; listed here for the help text.
    parser.add_argument("-k", "--key", dest="key", metavar="KEY",
                        help="the keyword to use (variable length, ASCII-only).")
    # A leading -h is caught in parse_args before argparse runs; listed for the help text.
    parser.add_argument("-h", action="store_true",
                        help="display this help message and usage information.")
    return parser


def parse_args(argv: List[str]) -> Invocation:
    """
    Turn argv (without the program name) into an Invocation.

    Raises HelpRequested for a leading ``-h`` and UsageError for
    anything else that is not ``message [-m MODE] -k KEY``.
    """
    if not argv:
        raise UsageError("missing arguments")
    if argv[0] == "-h":
        raise HelpRequested()
    if not argv[0]:
        raise UsageError("message must not be empty")

    message, rest = argv[0], list(argv[1:])
    options = []
    if rest and rest[0] in MODE_FLAGS:
        if len(rest) < 2:
            raise UsageError("-m requires a MODE")
        options.append("--mode=" + rest[1])
        rest = rest[2:]
    if len(rest) != 2 or rest[0] not in KEY_FLAGS:
        raise UsageError('expected -k "KEY" as the final arguments')
    key = rest[1]
    if not key:
        raise InvalidKey("Vigenère key must not be empty.")

    # The key never goes through argparse, which would eat a literal "--".
    # "--mode=value" and "--" let messages start with '-'.
    ns = build_parser().parse_args(options + ["--", message])
    return Invocation(message=ns.message, key=key, mode=Mode(int(ns.mode)))


def run(invocation: Invocation) -> str:
    keystream = generate_keystream(invocation.message, invocation.key)
    return transform(invocation.message, keystream, invocation.mode)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format=" %(message)s")
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    try:
        invocation = parse_args(argv)
        output = run(invocation)
    except HelpRequested:
        sys.stderr.write(parser.format_help())
        return 1
    except (UsageError, InvalidKey) as exc:
        logger.debug(f"usage error: {exc}")
        sys.stderr.write(parser.format_usage())
        return 1
    print(output)
    return 0
