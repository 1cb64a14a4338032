"""
Procargs entry points: compile, scan, and decide what a fault does.

What this module provides
- process_args(spec, tokens, failure=...): compile `spec`, scan `tokens`, return a ParseResult.
- process_argv(spec, failure=...): same, with the tokens taken from sys.argv[1:].
- Failure: the failure strategy.
  • Failure.THROW → faults propagate to the caller as ParseException subclasses.
  • Failure.EXIT  → faults are rendered with rich on standard output and the process
    exits with status 1. Warnings are printed instead of emitted.

Quick start
    from procargs import process_argv

    args = process_argv([
        "-nodisk", False,
        "-workers|-w=num", 0,
        "-dirs=[dir]", None,
    ])
    if args["nodisk"].value:
        ...

Design notes
- The core (specs/scanner/paths) never touches sys.argv, standard output or the exit
  status; only this module does.
- Every ParseException raised while compiling or scanning is caught here, once, and
  handed to trigger() together with the runtime options.
"""
import sys
from collections.abc import Iterable
from enum import StrEnum

from .faults import *
from .scanner import parse
from .specs import compile_spec


class Failure(StrEnum):
    """
    what happens to a fault raised while processing arguments.
    """
    THROW = "throw"
    EXIT  = "exit"


def process_args(spec, tokens, /, failure=Failure.EXIT, *, prefix="-", strict=False, fancy=False, colorful=True):
    """
    Parse explicit tokens against a flat specification.

    Parameters
    - spec: list | tuple
      Alternating declarations and defaults (see procargs.specs).
    - tokens: Iterable[str]
      Raw argument tokens; a single string is rejected.
    - failure: Failure | "throw" | "exit"
      Failure strategy (defaults to EXIT, like a command-line tool would want).
    - prefix: str (keyword-only)
      Option marker, "-" by default.
    - strict: bool (keyword-only)
      Reject repeated options instead of warning about them.
    - fancy / colorful: bool (keyword-only)
      Rendering options for EXIT mode (panel chrome, colors).

    Returns
    - ParseResult

    Raises
    - ParseException subclasses in THROW mode.
    - SystemExit(1) in EXIT mode, after printing the fault.
    - TypeError / ValueError for invalid call arguments (these are programming errors
      and are never rendered).
    """
    failure = Failure(failure)

    if isinstance(tokens, str) or not isinstance(tokens, Iterable):
        raise TypeError("process_args() second argument must be an iterable of strings")

    options = {
        "exit": failure is Failure.EXIT,
        "fancy": bool(fancy),
        "colorful": bool(colorful),
    }

    try:
        types, slots = compile_spec(spec, prefix=prefix)
        return parse(types, slots, tokens, prefix=prefix, strict=strict, **options)
    except ParseException as exception:
        trigger(exception, **options)

    raise RuntimeError("unreachable")


def process_argv(spec, /, failure=Failure.EXIT, **options):
    """
    Parse the current process's arguments (sys.argv without the script path).

    Accepts the same keyword options as process_args().
    """
    return process_args(spec, sys.argv[1:], failure, **options)


__all__ = (
    "Failure",
    "process_args",
    "process_argv",
)
