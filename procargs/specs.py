"""
Procargs specification compiler.

Overview
- A specification is a flat, alternating sequence of declaration strings and
  default values:

      ["-nodisk", False,                          # flag (type omitted)
       "-workers|-w=num", 0,                      # numeric, with a synonym
       "-dirs=[dir]", None,                       # several existing directories
       "-files=list=normal,all,hidden", "normal"] # one of a fixed set

- Declaration grammar
      declaration      := nameSpec ["=" type ["=" allowedValueList]]
      nameSpec         := primaryName ["|" synonymName]
      allowedValueList := value ("," value)*     (list type only)

- compile_spec() produces two tables
  • types: lowercased, prefix-stripped name -> OptionSpec (shared by a name and its synonym).
  • slots: every accepted spelling (declared casing and lowercased, for the name and the
    synonym) -> one shared Slot seeded with the declared default.

Validation highlights
- The specification must be a list or tuple of even length.
- Unknown type tokens raise UnknownTypeError; allowed values are only legal on "list",
  and "list" requires them.
- Two declarations may not resolve to the same case-insensitive name.
"""
import collections
from collections.abc import Sequence
from enum import StrEnum

from .faults import *
from .results import Slot


class OptionType(StrEnum):
    """
    closed set of value types a declaration may name.
    """
    FLAG     = "flag"
    NUM      = "num"
    STR      = "str"
    YESNO    = "yesno"
    DIR      = "dir"
    FILE     = "file"
    FILEPATH = "filepath"
    DIRS     = "[dir]"
    FILES    = "[file]"
    STRS     = "[str]"
    LIST     = "list"


OptionSpec = collections.namedtuple("OptionSpec", ("name", "type", "allowed"))
OptionSpec.__doc__ = """
Static definition of one recognized option.

- name: lowercased, prefix-stripped primary name.
- type: OptionType.
- allowed: frozenset of lowercase strings for OptionType.LIST, otherwise None.
"""

CompiledSpec = collections.namedtuple("CompiledSpec", ("types", "slots"))


def trim(name, /, prefix="-"):
    """
    strip one leading prefix from an option name when present.
    """
    return name[len(prefix):] if name.startswith(prefix) else name


def _structural(message, hint, declaration=None, **options):
    return StructuralError(
        message,
        title="malformed specification",
        code=FaultCode.MALFORMED_SPECIFICATION,
        hint=hint,
        declaration=declaration,
        docs=getdoc(FaultCode.MALFORMED_SPECIFICATION),
        **options
    )


def _declare(declaration, position, prefix):
    """
    split one declaration string into (names, OptionType, allowed-values).
    """
    if not isinstance(declaration, str):
        raise _structural(
            "declaration at index %d must be a string, not %s" % (position, type(declaration).__name__),
            "declarations sit at even indexes and defaults at odd ones (e.g., [\"-name=str\", \"\"])",
            declaration,
        )

    # only the first two '=' delimit the type and the allowed values
    names, kind, allowed = (declaration.split("=", 2) + [None, None])[:3]

    names = names.split("|")
    if len(names) > 2:
        raise _structural(
            "declaration %r has more than one synonym" % declaration,
            "declare at most one synonym (e.g., -workers|-w=num)",
            declaration,
        )

    names = [trim(name, prefix) for name in names]
    if not all(names):
        raise _structural(
            "declaration %r has an empty option name" % declaration,
            "name the option after the prefix (e.g., %sname=str)" % prefix,
            declaration,
        )

    try:
        kind = OptionType(kind if kind is not None else "flag")
    except ValueError:
        raise UnknownTypeError(
            "unexpected type %r in declaration %r" % (kind, declaration),
            title="unknown type",
            code=FaultCode.UNKNOWN_TYPE,
            hint="use one of: %s" % " · ".join(OptionType),
            declaration=declaration,
            docs=getdoc(FaultCode.UNKNOWN_TYPE),
        ) from None

    if allowed is not None and kind is not OptionType.LIST:
        raise _structural(
            "declaration %r lists allowed values for a %r option" % (declaration, str(kind)),
            "only list options take allowed values (e.g., -mode=list=fast,slow)",
            declaration,
        )

    if kind is OptionType.LIST:
        # allowed values are comma-delimited with no spaces around the commas
        values = allowed.lower().split(",") if allowed else []
        if not values or not all(values):
            raise _structural(
                "declaration %r needs a non-empty allowed value list" % declaration,
                "list the choices after the type (e.g., -mode=list=fast,slow)",
                declaration,
            )
        allowed = frozenset(values)

    return names, kind, allowed


def compile_spec(data, /, *, prefix="-"):
    """
    Compile a flat specification into (types, slots) lookup tables.

    Parameters
    - data: list | tuple
      Alternating declaration strings and default values.
    - prefix: str (keyword-only)
      Option marker stripped from declared names (one occurrence).

    Returns
    - CompiledSpec(types, slots)
      • types: dict[str, OptionSpec] keyed by lowercased names and synonyms.
      • slots: dict[str, Slot] keyed by declared and lowercased names and synonyms;
        all spellings of one option hold the identical Slot.

    Raises
    - StructuralError: non-sequence input, odd length, malformed declaration,
      misplaced or missing allowed values.
    - UnknownTypeError: unrecognized type token.
    - DuplicatedDeclarationError: a name or synonym declared twice.
    """
    if not isinstance(prefix, str) or not prefix:
        raise TypeError("compile_spec() 'prefix' must be a non-empty string")

    if not isinstance(data, Sequence) or isinstance(data, str | bytes):
        raise _structural(
            "specification must be a list, not %s" % type(data).__name__,
            "pass alternating declarations and defaults (e.g., [\"-verbose\", False])",
        )

    if len(data) % 2:
        raise _structural(
            "specification has %d entries; declaration %r has no default" % (len(data), data[-1]),
            "follow every declaration with its default value",
            data[-1],
        )

    types = {}
    slots = {}

    for position in range(0, len(data), 2):
        names, kind, allowed = _declare(declaration := data[position], position, prefix)

        spec = OptionSpec(names[0].lower(), kind, allowed)
        slot = Slot(data[position + 1])

        for name in names:
            if (lowered := name.lower()) in types:
                raise DuplicatedDeclarationError(
                    "option name %r in declaration %r is already declared" % (name, declaration),
                    title="duplicated declaration",
                    code=FaultCode.DUPLICATED_DECLARATION,
                    hint="option names are case-insensitive; give each option a distinct name",
                    declaration=declaration,
                    docs=getdoc(FaultCode.DUPLICATED_DECLARATION),
                )
            types[lowered] = spec
            slots[name] = slots[lowered] = slot

    return CompiledSpec(types, slots)


__all__ = (
    "OptionType",
    "OptionSpec",
    "CompiledSpec",
    "compile_spec",
    "trim",
)
