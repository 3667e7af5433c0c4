import argparse
import logging
import re
import shutil
import sys
import tomllib
from importlib.metadata import PackageNotFoundError, version as _pkg_version
from pathlib import Path

from coreapi import inspect_chars, inspect_codepoint, inspect_int

# intspector.py
# command line front end: one report block per argument

log = logging.getLogger(__name__)

U32_MAX = 0xFFFFFFFF
BITS_ARG = re.compile(r"\+?[0-9]+")
# "-5", "-5x": literals for the engine to judge, not options
NEG_LITERAL = re.compile(r"-[0-9]")
VALUED_OPTIONS = ("-b", "--bits")

DESCRIPTION = """\
Integer conversion utility. Accepts integer input in [b]inary, [o]ctal,
[d]ecimal, or he[x]adecimal base, then displays the number in all four bases.

Use a single letter prefix to declare the base of the input, e.g. b1010.
The base defaults to decimal if the prefix is omitted.

This utility:

- Accepts integer literals with a leading zero, e.g. 0x123.
- Accepts multiple arguments.
- Accepts input in the signed 64-bit integer range.
- Displays the two's complement value for negative integers.
"""

COMMANDS_HELP = """\
commands:
  l2cp, literal-to-codepoint    Convert character literals to code points.
  cp2l, codepoint-to-literal    Convert code points to character literals.

command help:
  help <command>                Print the specified command's help text.
"""

L2CP_DESCRIPTION = """\
Converts character literals to unicode code points, i.e. takes a list of
character literals as input and prints out the unicode code point for each
character in the list.
"""

CP2L_DESCRIPTION = """\
Converts unicode code points to character literals. Code points can be
specified in binary, octal, decimal, or hexadecimal base.
"""

COMMANDS = {
    "l2cp": "l2cp",
    "literal-to-codepoint": "l2cp",
    "cp2l": "cp2l",
    "codepoint-to-literal": "cp2l",
}


def _read_version_from_pyproject():
    pyproject_path = Path(__file__).parent / "pyproject.toml"
    if not pyproject_path.exists():
        return "unknown"
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)
    return data.get("project", {}).get("version", "unknown")


def get_version():
    # installed metadata first, then the source checkout
    try:
        return _pkg_version("intspector")
    except PackageNotFoundError:
        return _read_version_from_pyproject()


def build_parser():
    ap = argparse.ArgumentParser(
        prog="intspector",
        description=DESCRIPTION,
        epilog=COMMANDS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("integers", nargs="*", help="List of integers to convert.")
    ap.add_argument("-b", "--bits", metavar="N",
                    help="Number of binary digits to display. (Determines the "
                         "two's complement value for negative integers.)")
    ap.add_argument("-v", "--version", action="store_true",
                    help="Print the application's version number.")
    ap.add_argument("--trace", action="store_true",
                    help="Log each conversion to stderr.")
    return ap


def build_command_parser(name):
    if name == "l2cp":
        ap = argparse.ArgumentParser(
            prog="intspector l2cp|literal-to-codepoint",
            description=L2CP_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        ap.add_argument("characters", nargs="*", help="List of character literals.")
    else:
        ap = argparse.ArgumentParser(
            prog="intspector cp2l|codepoint-to-literal",
            description=CP2L_DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        ap.add_argument("integers", nargs="*", help="List of unicode code points.")
    ap.add_argument("--trace", action="store_true",
                    help="Log each conversion to stderr.")
    return ap


def setup_logging(trace):
    logging.basicConfig(
        level=logging.DEBUG if trace else logging.WARNING,
        format="%(name)s: %(message)s",
    )


def print_termline():
    # only draw the rule on a real terminal
    if not sys.stdout.isatty():
        return
    width = shutil.get_terminal_size().columns
    print(f"\x1b[90m{'─' * width}\x1b[0m")


def print_blocks(blocks):
    if blocks:
        print_termline()
    for block in blocks:
        print(block)
        print_termline()


def split_argv(argv, valued=()):
    """
    Move options ahead of a "--" and keep every literal after it, in order.

    Lets options follow literals ("5 -b 8 6") and keeps tokens such as
    "-5x" away from argparse, which would reject the whole command line.
    """
    opts, rest = [], []
    it = iter(argv)
    for arg in it:
        if arg == "--":
            rest.extend(it)
            break
        if len(arg) > 1 and arg.startswith("-") and not NEG_LITERAL.match(arg):
            opts.append(arg)
            value = next(it, None) if arg in valued else None
            if value is not None:
                opts.append(value)
        else:
            rest.append(arg)
    return opts + ["--"] + rest


def parse_bits(arg):
    """--bits value as an unsigned 32-bit int, or None."""
    if not BITS_ARG.fullmatch(arg):
        return None
    if len(arg.lstrip("+").lstrip("0")) > len(str(U32_MAX)):
        return None
    n = int(arg)
    return n if n <= U32_MAX else None


def default_action(args):
    user_bits = None
    if args.bits is not None:
        user_bits = parse_bits(args.bits)
        if user_bits is None:
            print(f"Error: cannot parse '{args.bits}' as a 32-bit unsigned integer.",
                  file=sys.stderr)
            return 1
    log.debug("converting %d argument(s), bits=%s", len(args.integers), user_bits)
    print_blocks([inspect_int(arg, user_bits) for arg in args.integers])
    return 0


def cmd_l2cp(args):
    print_blocks(inspect_chars(args.characters))
    return 0


def cmd_cp2l(args):
    print_blocks([inspect_codepoint(arg) for arg in args.integers])
    return 0


def cmd_help(names):
    if not names:
        build_parser().print_help()
        return 0
    name = COMMANDS.get(names[0])
    if name is None:
        print(f"Error: unknown command '{names[0]}'.", file=sys.stderr)
        return 1
    build_command_parser(name).print_help()
    return 0


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)

    if argv and argv[0] == "help":
        return cmd_help(argv[1:])

    if argv and argv[0] in COMMANDS:
        name = COMMANDS[argv[0]]
        args = build_command_parser(name).parse_args(split_argv(argv[1:]))
        setup_logging(args.trace)
        if name == "l2cp":
            return cmd_l2cp(args)
        return cmd_cp2l(args)

    args = build_parser().parse_args(split_argv(argv, VALUED_OPTIONS))
    setup_logging(args.trace)
    if args.version:
        print(f"intspector {get_version()}")
        return 0
    return default_action(args)


if __name__ == "__main__":
    sys.exit(main())
