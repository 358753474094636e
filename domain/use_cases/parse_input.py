from __future__ import annotations

import re
from typing import Optional, Tuple


_NUMBER_RE = re.compile(r"^\s*(\d+(?:[\.,]\d+)?)\s*$")
_WEIGHT_RE = re.compile(r"^\s*(\d+(?:[\.,]\d+)?)\s*([a-zA-Z]*)\s*$")

_KG_SUFFIXES = {"", "kg", "kgs", "kilo", "kilos", "kilogram", "kilograms"}
_LB_SUFFIXES = {"lb", "lbs", "pound", "pounds"}


def parse_number(text: str | None) -> Optional[float]:
    """Parse "80", "80.5" or "80,5"; anything else is None."""
    m = _NUMBER_RE.match(text or "")
    if not m:
        return None
    return float(m.group(1).replace(",", "."))


def parse_weight(text: str | None) -> Optional[Tuple[float, str]]:
    # forms: "80", "80kg", "80 kg", "176 lb", "176lbs"
    m = _WEIGHT_RE.match(text or "")
    if not m:
        return None
    value = float(m.group(1).replace(",", "."))
    suffix = m.group(2).lower()
    if suffix in _KG_SUFFIXES:
        return value, "kg"
    if suffix in _LB_SUFFIXES:
        return value, "lb"
    return None
