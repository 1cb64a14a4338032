"""
Procargs argument scanner.

parse(types, slots, tokens) walks the tokens once, left to right:

- a token without the prefix is kept verbatim in `unnamed`;
- an option token is split at its first '=' into name and raw value, the name is
  matched case-insensitively against `types`, the raw value is coerced by type, and
  the option's shared slot is written and marked present.

Coercion by type
- flag      → True (a raw value, if any, is ignored)
- num       → int after dropping ',' and '_' separators ("1,000_000" → 1000000)
- str       → as-is
- [str]     → split on ';'
- yesno     → y/yes/1 → True, n/no/0 → False (case-insensitive)
- dir/file  → must exist with that kind; stored as an absolute path
- filepath  → containing directory must exist; stored as an absolute path
- [dir]/[file] → split on ';', every element validated, order kept
- list      → case-insensitive member of the declared values; stored as typed

Policy
- fail-fast: the first fault aborts the scan; no partial result is returned.
- repeated options: the last occurrence wins and, once its value is accepted, a
  RepeatedOptionWarning is surfaced;
  with strict=True the repeat is a RepeatedOptionError instead.
- once the last token is consumed every slot is sealed and a ParseResult is returned.
"""
import os.path
import re
from collections.abc import Iterable, Mapping

from .faults import *
from .paths import validate_path
from .results import ParseResult
from .specs import OptionType, trim
from .utils import ordinal

_YESNO = {
    "y": True,
    "yes": True,
    "1": True,
    "n": False,
    "no": False,
    "0": False,
}


def _number(raw, token, input, index):
    digits = re.sub(r"[,_]", "", raw)
    try:
        # ASCII digits only: str.isdigit() would let superscripts and other scripts through
        if re.search(r"[^0-9,_]", raw) or not digits:
            raise ValueError(raw)
        # int() also refuses strings past the interpreter's digit limit
        return int(digits, 10)
    except ValueError:
        raise InvalidNumberError(
            "expecting a number for option %r at %s position, got %r" % (input, ordinal(index), raw),
            title="invalid number",
            code=FaultCode.INVALID_NUMBER,
            hint="use digits, optionally grouped with ',' or '_' (for example: %s=1,000)" % input,
            input=input,
            token=token,
            index=index,
            docs=getdoc(FaultCode.INVALID_NUMBER),
        ) from None


def _yesno(raw, token, input, index):
    try:
        return _YESNO[raw.lower()]
    except KeyError:
        raise InvalidYesNoError(
            "expecting yes or no for option %r at %s position, got %r" % (input, ordinal(index), raw),
            title="invalid yes/no value",
            code=FaultCode.INVALID_YESNO,
            hint="use one of: y · yes · 1 · n · no · 0",
            input=input,
            token=token,
            index=index,
            docs=getdoc(FaultCode.INVALID_YESNO),
        ) from None


def _choice(raw, spec, token, input, index):
    if raw.lower() not in spec.allowed:
        raise InvalidChoiceError(
            "value %r for option %r at %s position is not a valid choice" % (raw, input, ordinal(index)),
            title="invalid choice",
            code=FaultCode.INVALID_CHOICE,
            hint="use one of: %s" % " · ".join(sorted(spec.allowed)),
            input=input,
            token=token,
            index=index,
            choices=spec.allowed,
            docs=getdoc(FaultCode.INVALID_CHOICE),
        )
    return raw


def _path(raw, kind, token, index):
    validate_path(raw, token, kind, index=index)
    return os.path.abspath(raw)


def _coerce(spec, raw, token, input, index):
    """
    turn a raw value into the typed value for `spec`, or raise the matching fault.
    """
    match spec.type:
        case OptionType.NUM:
            return _number(raw, token, input, index)
        case OptionType.STR:
            return raw
        case OptionType.STRS:
            return raw.split(";")
        case OptionType.YESNO:
            return _yesno(raw, token, input, index)
        case OptionType.DIR | OptionType.FILE | OptionType.FILEPATH:
            return _path(raw, spec.type, token, index)
        case OptionType.DIRS:
            return [_path(part, OptionType.DIR, token, index) for part in raw.split(";")]
        case OptionType.FILES:
            return [_path(part, OptionType.FILE, token, index) for part in raw.split(";")]
        case OptionType.LIST:
            return _choice(raw, spec, token, input, index)
        case _:
            raise RuntimeError("unreachable")


def parse(types, slots, tokens, /, *, prefix="-", strict=False, **options):
    """
    Scan `tokens` against compiled tables and fill the slots in place.

    Parameters
    - types: Mapping[str, OptionSpec]
      Lowercased, prefix-stripped names to option specs (see compile_spec()).
    - slots: Mapping[str, Slot]
      Every accepted spelling to its shared slot (see compile_spec()).
    - tokens: Iterable[str]
      Raw argument tokens, consumed strictly in order.
    - prefix: str (keyword-only)
      Marker that distinguishes option tokens from unnamed ones.
    - strict: bool (keyword-only)
      Treat a repeated option as an error instead of a warning.
    - **options:
      Rendering options forwarded to trigger() for warnings (exit, fancy, colorful).

    Returns
    - ParseResult over the same slots, sealed, plus the unnamed tokens.

    Raises
    - UnknownArgumentError, MissingValueError, InvalidNumberError, InvalidYesNoError,
      InvalidChoiceError, PathError subclasses, RepeatedOptionError (strict only).
    """
    if not isinstance(types, Mapping) or not isinstance(slots, Mapping):
        raise TypeError("parse() 'types' and 'slots' must be mappings")
    if not isinstance(prefix, str) or not prefix:
        raise TypeError("parse() 'prefix' must be a non-empty string")
    if isinstance(tokens, str) or not isinstance(tokens, Iterable):
        raise TypeError("parse() 'tokens' must be an iterable of strings")

    unnamed = []
    seen = set()

    for index, token in enumerate(tokens, start=1):
        if not isinstance(token, str):
            raise TypeError("parse() 'tokens' must be an iterable of strings")

        if not token.startswith(prefix):
            unnamed.append(token)
            continue

        # everything after the first '=' is the raw value, further '=' included
        input, _, raw = token.partition("=")
        name = trim(input, prefix).lower()

        try:
            spec = types[name]
        except KeyError:
            raise UnknownArgumentError(
                "unknown option %r at %s position" % (input, ordinal(index)),
                title="unknown option",
                code=FaultCode.UNKNOWN_ARGUMENT,
                hint="option names are matched case-insensitively; check the spelling of %r" % input,
                input=input,
                token=token,
                index=index,
                docs=getdoc(FaultCode.UNKNOWN_ARGUMENT),
            ) from None

        if spec.type == OptionType.FLAG:
            value = True
        elif not raw:
            raise MissingValueError(
                "expecting %s=value for option at %s position, got %r" % (input, ordinal(index), token),
                title="missing value",
                code=FaultCode.MISSING_VALUE,
                hint="add a value after '=' (for example: %s=<%s>)" % (input, spec.type),
                input=input,
                token=token,
                index=index,
                docs=getdoc(FaultCode.MISSING_VALUE),
            )
        else:
            value = _coerce(spec, raw, token, input, index)

        # a repeat is only reported once its value has been accepted
        if spec.name in seen:
            if strict:
                raise RepeatedOptionError(
                    "option %r at %s position was already given" % (input, ordinal(index)),
                    title="repeated option",
                    code=FaultCode.REPEATED_OPTION,
                    hint="pass %r only once" % input,
                    input=input,
                    token=token,
                    index=index,
                    docs=getdoc(FaultCode.REPEATED_OPTION),
                )
            trigger(RepeatedOptionWarning(
                "option %r at %s position was already given; this occurrence wins" % (input, ordinal(index)),
                title="repeated option",
                code=FaultCode.REPEATED_OPTION_WARNING,
                hint="pass %r only once to silence this warning" % input,
                input=input,
                token=token,
                index=index,
                docs=getdoc(FaultCode.REPEATED_OPTION_WARNING),
            ), **options)
        seen.add(spec.name)

        slots[spec.name]._assign(value)

    for slot in slots.values():
        slot._seal()

    return ParseResult(slots, unnamed)


__all__ = (
    "parse",
)
