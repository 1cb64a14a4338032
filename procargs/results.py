"""
Procargs results: the mutable slots a parse writes into and the read-only view it returns.

Overview
- Slot
  • One option's outcome: `value` (starts as the declared default) and `present`
    (whether the option was supplied). Several keys may hold the *same* slot, so a
    write through a synonym is visible through the canonical name.
  • Attributes are read-only from the outside; the scanner writes through
    `_assign()` and calls `_seal()` once the last token has been consumed.

- ParseResult
  • Read-only Mapping[str, Slot] keyed by every accepted spelling of every option,
    plus `unnamed`, the positional tokens in order of appearance.
  • Lookups fall back to the lowercased key: result["WORKERS"] is result["workers"].
  • todict() flattens to {name: value, ..., "unnamed": [...]}.
"""
from collections.abc import Mapping
from types import MappingProxyType

from .utils import mirror


class Slot:
    """
    Shared, sealable holder for one option's value and presence flag.
    """
    __slots__ = ("_value", "_present", "_sealed")

    value = mirror("value")
    present = mirror("present")

    def __init__(self, default=None, /):
        self._value = default
        self._present = False
        self._sealed = False

    def _assign(self, value, /):
        if self._sealed:
            raise TypeError("slot is sealed; results are read-only once parsing completes")
        self._value = value
        self._present = True

    def _seal(self):
        self._sealed = True

    def __rich_repr__(self):
        yield "value", self._value
        yield "present", self._present

    def __repr__(self):
        return "slot(value=%r, present=%r)" % (self._value, self._present)


class ParseResult(Mapping):
    """
    Outcome of one parse: slots by name plus the unnamed tokens.
    """

    def __init__(self, slots, unnamed=(), /):
        if not isinstance(slots, Mapping):
            raise TypeError("ParseResult() first argument must be a mapping")
        for name, slot in slots.items():
            if not isinstance(name, str) or not isinstance(slot, Slot):
                raise TypeError("ParseResult() first argument must map strings to slots")
        self._slots = MappingProxyType(dict(slots))
        self._unnamed = tuple(unnamed)

    @property
    def unnamed(self):
        return self._unnamed

    def __getitem__(self, name, /):
        try:
            return self._slots[name]
        except KeyError:
            if not isinstance(name, str):
                raise
            return self._slots[name.lower()]

    def __contains__(self, name, /):
        try:
            self[name]
        except KeyError:
            return False
        return True

    def __iter__(self):
        return iter(self._slots)

    def __len__(self):
        return len(self._slots)

    def todict(self):
        """
        Flatten to a plain dict of values (every spelling) plus "unnamed".
        """
        return {name: slot.value for name, slot in self._slots.items()} | {"unnamed": list(self._unnamed)}

    def __rich_repr__(self):
        yield "slots", dict(self._slots)
        yield "unnamed", self._unnamed

    def __repr__(self):
        return "parse-result(slots=%r, unnamed=%r)" % (dict(self._slots), self._unnamed)


__all__ = (
    "Slot",
    "ParseResult",
)
