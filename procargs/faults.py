"""
Procargs faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue.
  Codes are grouped by domain (specification, scanning, paths, warnings).
- ParseException / ParseWarning: base types that carry message + options and
  know how to render themselves in a friendly, lowercased, and actionable way.
- trigger(): central entry point to surface any fault (raise, or render and exit).
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Position-first messages: every scanning message names the ordinal position of
  the offending token (“unknown option '-bogus' at second position”).
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.

Integration
- The compiler and the scanner raise faults directly; the outer process layer
  catches ParseException and calls trigger(fault, exit=..., fancy=..., colorful=...).
- With exit=False the fault is re-raised; with exit=True it is printed through rich
  on standard output and the process exits with status 1.
- Warnings are emitted with warnings.warn, or printed when exit=True.

Host customisation (all optional, read from __main__)
- __prog__: program name shown in the header.
- __styles__: mapping of style names to rich styles.
- __codes__: mapping of FaultCode to display labels.
- __docs__: mapping of FaultCode to short documentation strings.
"""
import copy
import inspect
import os.path
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console()


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping (by high-level domain)
    - specification (101xx)
      • MALFORMED_SPECIFICATION, UNKNOWN_TYPE, DUPLICATED_DECLARATION
    - scanning (102xx)
      • UNKNOWN_ARGUMENT, MISSING_VALUE, INVALID_NUMBER, INVALID_YESNO,
        INVALID_CHOICE, REPEATED_OPTION
    - paths (103xx)
      • PATH_NOT_FOUND, WRONG_PATH_KIND, PATH_ACCESS
    - warnings (2xxxx)
      • REPEATED_OPTION_WARNING
    """
    # --- specification errors (101xx) ---
    MALFORMED_SPECIFICATION     = 10101
    UNKNOWN_TYPE                = 10102
    DUPLICATED_DECLARATION      = 10103

    # --- scanning errors (102xx) ---
    UNKNOWN_ARGUMENT            = 10201
    MISSING_VALUE               = 10202
    INVALID_NUMBER              = 10203
    INVALID_YESNO               = 10204
    INVALID_CHOICE              = 10205
    REPEATED_OPTION             = 10206

    # --- path errors (103xx) ---
    PATH_NOT_FOUND              = 10301
    WRONG_PATH_KIND             = 10302
    PATH_ACCESS                 = 10303

    # --- warnings (2xxxx) ---
    REPEATED_OPTION_WARNING     = 20206

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _program():
    return getattr(__import__("__main__"), "__prog__", None) or os.path.basename(sys.argv[0]) or "procargs"


def _render(fault, defaults, kind):
    """
    shared rich layout for exceptions and warnings: header, message, hint.
    """
    styles = defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))
    colorful = fault.options.get("colorful", True)

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment if colorful else Text(fragment.plain)
        return Text(str(fragment), styles[style] if colorful else "")

    try:
        code = fault.options["code"].normalize()
    except KeyError:
        code = "?"

    header = Text.assemble(
        "[ ",
        text(_program(), "prog-name"),
        " — ",
        text(code, "code"),
        " | ",
        text(fault.options.get("title", kind).title(), kind + "-title"),
        " ]"
    )
    message = text(fault.message, kind + "-message")
    renders = [message]
    if hint := fault.options.get("hint"):
        renders.append(Text.assemble(text(" → ", "hint-arrow"), text(hint, "hint")))

    if fault.options.get("fancy", False):
        return Panel(Group(*renders), title=header, title_align="left")

    return Group(header, *renders)


class ParseException(Exception):
    """
    base type for every parsing fault.

    the message is the positional argument (so str(exception) reads naturally);
    everything else travels in a read-only options mapping: code, title, hint and
    whatever context the raiser had (token, index, input, path, ...).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        }, "error")

    def __trigger__(self) -> None:
        if not self.options.get("exit", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class SpecError(ParseException): ...
class StructuralError(SpecError): ...
class UnknownTypeError(StructuralError): ...
class DuplicatedDeclarationError(StructuralError): ...

class UnknownArgumentError(ParseException): ...
class MissingValueError(ParseException): ...
class InvalidNumberError(ParseException): ...
class InvalidYesNoError(ParseException): ...
class InvalidChoiceError(ParseException): ...
class RepeatedOptionError(ParseException): ...

class PathError(ParseException): ...
class PathNotFoundError(PathError): ...
class WrongPathKindError(PathError): ...
class PathAccessError(PathError): ...


class ParseWarning(Warning):
    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",
            "warning-title": "bold #FFC2E0",
            "warning-message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        }, "warning")

    def __trigger__(self) -> None:
        if not self.options.get("exit", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class RepeatedOptionWarning(ParseWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.
    - exit=True renders via the rich console (and exits for exceptions); otherwise
      exceptions are raised and warnings go through the warnings module.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    returns None when no entry exists.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "ParseException",
    "SpecError",
    "StructuralError",
    "UnknownTypeError",
    "DuplicatedDeclarationError",
    "UnknownArgumentError",
    "MissingValueError",
    "InvalidNumberError",
    "InvalidYesNoError",
    "InvalidChoiceError",
    "RepeatedOptionError",
    "PathError",
    "PathNotFoundError",
    "WrongPathKindError",
    "PathAccessError",
    "ParseWarning",
    "RepeatedOptionWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)
