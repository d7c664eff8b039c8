"""Unit formatters for the detail view.

The API reports height in decimeters and weight in hectograms. These helpers
turn them into feet/inches and pounds. All functions are pure.

Rounding is half-up on the exact binary value of the intermediate float, so
`0.984` feet becomes `0.98` and not `0.99`. Python's `round()` rounds half to
even and is not used here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Any

from core.domain.models import CreatureSummary, TypeSlot
from core.domain.view_models import ModalContent

FEET_PER_METER = 3.28
POUNDS_PER_KILOGRAM = 2.2

_UNITS = Decimal("1")
_TENTHS = Decimal("0.1")
_HUNDREDTHS = Decimal("0.01")


def _round_half_up(value: float | Decimal, exp: Decimal) -> Decimal:
    if not isinstance(value, Decimal):
        value = Decimal(value)
    return value.quantize(exp, rounding=ROUND_HALF_UP)


def convert_height(decimeters: int | float) -> str:
    """Decimeters to a `feet' inches"` string, e.g. `4 -> 1' 04"`.

    Inches never read 12: a rounded-up 12 carries into the next foot.
    """

    feet = _round_half_up(decimeters / 10 * FEET_PER_METER, _HUNDREDTHS)
    whole = int(feet.to_integral_value(rounding=ROUND_FLOOR))
    inches = int(_round_half_up((feet - whole) * 12, _UNITS))

    if inches == 12:
        return f"{whole + 1}' 00\""
    return f"{whole}' {inches:02d}\""


def convert_weight(hectograms: int | float) -> int | float:
    """Hectograms to pounds with at most one decimal digit.

    Whole values come back as `int` (`100 -> 22`), the rest as a one-decimal
    `float` (`60 -> 13.2`).
    """

    pounds = _round_half_up(hectograms / 10 * POUNDS_PER_KILOGRAM, _TENTHS)
    if pounds == pounds.to_integral_value():
        return int(pounds)
    return float(pounds)


def _type_name(entry: TypeSlot | Mapping[str, Any]) -> str:
    slot = entry if isinstance(entry, TypeSlot) else TypeSlot.model_validate(entry)
    return slot.type.name


def get_type_names(types: Sequence[TypeSlot | Mapping[str, Any]]) -> str:
    """`"Type: electric"` or `"Types: grass, poison"` (input order)."""

    names = [_type_name(entry) for entry in types]
    if not names:
        return "Type: unknown"
    if len(names) > 1:
        return "Types: " + ", ".join(names)
    return f"Type: {names[0]}"


def format_identifier(creature_id: int) -> str:
    return str(creature_id).zfill(3)


def build_modal_content(creature: CreatureSummary) -> ModalContent:
    """Format a creature whose details have been merged."""

    creature_id, height, weight = creature.id, creature.height, creature.weight
    if creature_id is None or height is None or weight is None:
        raise ValueError(f"details for {creature.name!r} have not been loaded")

    return ModalContent(
        name=creature.name,
        identifier=format_identifier(creature_id),
        artwork_url=creature.artwork_url,
        height=convert_height(height),
        weight=f"{convert_weight(weight)} lbs",
        type_names=get_type_names(creature.types),
    )
