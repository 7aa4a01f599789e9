"""CLI entrypoint for create-dummy-file."""

import argparse
import locale
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from .byteseq import parse_decimal_bytes, parse_hex_bytes
from .engine import create_dummy_file
from .errors import (
    FillIOError,
    InvalidByteSequenceError,
    MissingParameterError,
    TooManyParametersError,
    UnrecognizedOptionError,
    UsageError,
)
from .policy import DEFAULT_POLICY, FillPolicy, Ones, RepeatingPattern, Zeros, resolve_random
from .sizes import parse_size

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_HELP = 2  # nothing done

PROGRAM_TITLE = "Create File With Random Contents Given Size"

_DESCRIPTION = f"""\
{PROGRAM_TITLE}

Create a file with a given size, and fill the file with a repeating pattern
or pseudo-random data.

Two parameters are required on the command line. The first parameter must be
the size of the file in bytes, as a decimal number, without commas or digit
grouping. Suffixes are recognized for kilobytes, megabytes, etc. The second
parameter is the output file name. You may need to quote the name."""

_EPILOG = """\
data options (mutually exclusive, the last one given wins):
  -d#      one or more decimal bytes from 000 to 255
  -h#      one or more hexadecimal bytes from 00 to FF
  -o       write all ones, 0xFF bytes
  -p#      text pattern to repeat, in local character set
  -r[#]    write pseudo-random data (default); with two or more hex bytes,
           pick each byte at random from those bytes
  -z       write all zeros, 0x00 bytes

examples:
  create-dummy-file 512 x.dat
  create-dummy-file -z 32k x.dat
  create-dummy-file -h00,ff,a5 1m pattern.bin"""

_HELP_WORDS = frozenset({"?", "-?", "/?", "-h", "-help", "--help"})
_SLASH_HELP_WORDS = frozenset({"/h", "/help"})


def _preferred_encoding() -> str:
    return locale.getpreferredencoding(False) or "utf-8"


@dataclass(frozen=True)
class CliConfig:
    """Platform-dependent behaviour of the command line."""

    slash_options: bool = False  # accept /z as well as -z
    text_encoding: str = "utf-8"  # encodes the -p text pattern
    thousands_separator: str = ","

    @classmethod
    def from_platform(cls) -> "CliConfig":
        return cls(
            slash_options=sys.platform.startswith("win"),
            text_encoding=_preferred_encoding(),
        )


@dataclass(frozen=True)
class Invocation:
    """A fully validated request: what to write, how much, and where."""

    size: int
    path: Path
    policy: FillPolicy = DEFAULT_POLICY
    verbose: bool = False


def format_count(count: int, separator: str = ",") -> str:
    """Return ``count`` with digit grouping, e.g. 1048576 -> "1,048,576"."""
    return f"{count:,}".replace(",", separator)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="create-dummy-file",
        usage="%(prog)s [options] fileSize fileName",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    ap.add_argument(
        "--help",
        action="store_true",
        help="Show this help and exit without writing a file (also -?, -h, -help)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log buffer layout and timing details",
    )
    return ap


def _is_help(word: str, config: CliConfig) -> bool:
    return word in _HELP_WORDS or (config.slash_options and word in _SLASH_HELP_WORDS)


def _is_option(word: str, config: CliConfig) -> bool:
    return word.startswith("-") or (config.slash_options and word.startswith("/"))


def _parse_data_option(arg: str, config: CliConfig) -> FillPolicy:
    """Turn one short data option (-d, -h, -o, -p, -r, -z) into a policy."""
    name = arg[1:].lower()
    value = arg[2:]

    if name.startswith("d"):
        # Separators are optional; without them every third digit starts a new byte
        data = parse_decimal_bytes(value)
        if not data:
            raise InvalidByteSequenceError("Decimal byte data must be from 000 to 255", arg)
        return RepeatingPattern(data)

    if name.startswith("h"):
        data = parse_hex_bytes(value)
        if not data:
            raise InvalidByteSequenceError("Hexadecimal byte data must be from 00 to FF", arg)
        return RepeatingPattern(data)

    if name == "o":
        return Ones()

    if name.startswith("p"):
        try:
            data = value.encode(config.text_encoding)
        except UnicodeEncodeError as e:
            raise InvalidByteSequenceError(f"Text pattern cannot be encoded as {config.text_encoding}", arg) from e
        if not data:
            raise InvalidByteSequenceError("Text pattern to repeat must have at least one byte", arg)
        return RepeatingPattern(data)

    if name.startswith("r"):
        data = parse_hex_bytes(value)
        if data is None:
            raise InvalidByteSequenceError("Random byte data must be hex from 00 to FF", arg)
        return resolve_random(data)

    if name == "z":
        return Zeros()

    raise UnrecognizedOptionError(arg)


def _parse_long_option(arg: str, parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    try:
        _, unknown = parser.parse_known_args([arg], namespace=args)
    except argparse.ArgumentError as e:
        raise UnrecognizedOptionError(arg) from e
    if unknown:
        raise UnrecognizedOptionError(arg)


def parse_args(argv: list[str], config: CliConfig | None = None) -> Invocation | None:
    """Validate ``argv`` without touching the file system.

    Tokens are checked in order, so the first bad one is reported. Returns
    None when help was requested. Raises a UsageError subclass for anything
    that cannot be turned into an Invocation.
    """
    config = config or CliConfig.from_platform()
    parser = build_parser()
    args = argparse.Namespace(help=False, verbose=False)
    policy = DEFAULT_POLICY
    size: int | None = None
    path: Path | None = None

    for arg in argv:
        # Scripts often pass empty parameters; ignore them
        if not arg:
            continue
        word = arg.lower()
        if _is_help(word, config):
            return None
        if word.startswith("--") and len(word) > 2:
            _parse_long_option(arg, parser, args)
        elif _is_option(word, config):
            policy = _parse_data_option(arg, config)
        elif size is None:
            size = parse_size(arg)
        elif path is None:
            path = Path(arg)
        else:
            raise TooManyParametersError(arg)

    if size is None:
        raise MissingParameterError("Missing first parameter: file size in bytes.")
    if path is None:
        raise MissingParameterError("Missing second parameter: output file name.")

    return Invocation(size=size, path=path, policy=policy, verbose=args.verbose)


def main(argv: list[str] | None = None, config: CliConfig | None = None) -> int:
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if argv is None:
        argv = sys.argv[1:]
    if config is None:
        config = CliConfig.from_platform()
    parser = build_parser()

    try:
        invocation = parse_args(argv, config)
    except UsageError as e:
        logging.error(str(e))
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE

    if invocation is None:
        parser.print_help(sys.stderr)
        return EXIT_HELP

    if invocation.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    logging.debug(f"Writing {invocation.size} bytes to {invocation.path}: {invocation.policy.describe()}")

    try:
        written = create_dummy_file(invocation.path, invocation.size, invocation.policy)
    except FillIOError as e:
        logging.error(str(e))
        parser.print_usage(sys.stderr)
        return EXIT_FAILURE

    print(f"Created file with {format_count(written, config.thousands_separator)} bytes.")
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
