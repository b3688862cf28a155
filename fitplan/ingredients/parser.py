# -*- coding: utf-8 -*-
"""
Ingredient text parsing.

Turns free-text ingredient lines ("1½ cups of rolled oats", "250g chicken breast",
"Lean steak (8oz)", "2 large eggs") into a quantity, a canonical unit and a
cleaned name, and converts between units of the same measurement kind.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class MeasureKind(Enum):
    WEIGHT = "WEIGHT"
    VOLUME = "VOLUME"
    COUNT = "COUNT"


@dataclass
class ParsedIngredient:
    quantity: Optional[float]
    unit: Optional[str]
    name: str
    original: str

    @property
    def kind(self) -> MeasureKind:
        return measure_kind(self.unit)


UNICODE_FRACTIONS: Dict[str, str] = {
    "½": "1/2",
    "⅓": "1/3",
    "⅔": "2/3",
    "¼": "1/4",
    "¾": "3/4",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

UNIT_ALIASES: Dict[str, str] = {
    "g": "g", "gr": "g", "gram": "g", "grams": "g", "gramme": "g", "grammes": "g",
    "kg": "kg", "kgs": "kg", "kilo": "kg", "kilos": "kg", "kilogram": "kg", "kilograms": "kg",
    "oz": "oz", "ounce": "oz", "ounces": "oz",
    "lb": "lb", "lbs": "lb", "pound": "lb", "pounds": "lb",
    "ml": "ml", "millilitre": "ml", "millilitres": "ml", "milliliter": "ml", "milliliters": "ml",
    "l": "l", "litre": "l", "litres": "l", "liter": "l", "liters": "l",
    "cl": "cl", "centilitre": "cl", "centilitres": "cl",
    "floz": "fl oz", "fl oz": "fl oz", "fluid ounce": "fl oz", "fluid ounces": "fl oz",
    "cup": "cup", "cups": "cup",
    "pint": "pint", "pints": "pint", "pt": "pint",
    "quart": "quart", "quarts": "quart", "qt": "quart",
    "gallon": "gallon", "gallons": "gallon", "gal": "gallon",
    "tbsp": "tbsp", "tbs": "tbsp", "tbl": "tbsp", "tablespoon": "tbsp", "tablespoons": "tbsp",
    "tsp": "tsp", "teaspoon": "tsp", "teaspoons": "tsp",
    "piece": "piece", "pieces": "piece", "pc": "piece", "pcs": "piece",
    "slice": "slice", "slices": "slice",
    "serving": "serving", "servings": "serving",
    "scoop": "scoop", "scoops": "scoop",
    "clove": "clove", "cloves": "clove",
    "can": "can", "cans": "can", "tin": "can", "tins": "can",
    "jar": "jar", "jars": "jar",
    "pack": "pack", "packs": "pack", "package": "pack", "packages": "pack", "packet": "pack", "packets": "pack",
    "handful": "handful", "handfuls": "handful",
    "pinch": "pinch", "pinches": "pinch",
    "dash": "dash", "dashes": "dash",
    "item": "item", "items": "item", "each": "item", "ea": "item", "x": "item",
}

# Size words that say "count these" without being a unit themselves.
SIZE_WORDS = {"small", "medium", "large", "whole", "big", "jumbo", "extra-large"}

WEIGHT_UNITS = {"g": 1.0, "kg": 1000.0, "oz": 28.3495, "lb": 453.592}
VOLUME_UNITS = {
    "ml": 1.0,
    "l": 1000.0,
    "cl": 10.0,
    "fl oz": 29.5735,
    "cup": 236.588,
    "pint": 568.261,
    "quart": 1136.52,
    "gallon": 4546.09,
    "tbsp": 15.0,
    "tsp": 5.0,
}

QUALIFIERS = {
    "fresh", "freshly", "chopped", "diced", "sliced", "minced", "grated", "shredded",
    "crushed", "ground", "cooked", "uncooked", "raw", "boiled", "steamed", "roasted",
    "grilled", "baked", "frozen", "dried", "organic", "lean", "peeled", "finely",
    "roughly", "thinly", "low-fat", "reduced-fat", "skinless", "boneless", "ripe",
    "optional", "to", "taste", "small", "medium", "large", "whole", "extra",
}

_NUMBER = r"\d+\s+\d+/\d+|\d+/\d+|\d+(?:[.,]\d+)?"
_LEADING_RE = re.compile(
    rf"^(?P<qty>{_NUMBER})(?:\s*(?:-|–|to)\s*(?P<upper>{_NUMBER}))?\s*(?P<rest>.*)$"
)
_UNIT_RE = re.compile(r"^(?P<unit>fl\.?\s*oz|fluid\s+ounces?|[a-z]+)\.?(?=[\s,]|$)")
_PAREN_RE = re.compile(rf"\(\s*(?P<qty>{_NUMBER})\s*(?P<unit>fl\.?\s*oz|[a-z]+)?\.?\s*\)")
_TRAILING_RE = re.compile(rf"^(?P<name>.+?)\s*(?:[-:×]\s*|\s+)(?P<qty>{_NUMBER})\s*(?P<unit>[a-z]+)\.?$")
_WS_RE = re.compile(r"\s+")
_FLOZ_RE = re.compile(r"^fl\.?\s*oz$")


def _replace_unicode_fractions(text: str) -> str:
    out = []
    for ch in text:
        frac = UNICODE_FRACTIONS.get(ch)
        if frac:
            # "1½" becomes "1 1/2"; a bare "½" becomes "1/2".
            if out and out[-1].isdigit():
                out.append(" ")
            out.append(frac)
        else:
            out.append(ch)
    return "".join(out)


def parse_number(raw: str) -> Optional[float]:
    """Parse an integer, decimal, fraction or mixed number. Returns None when unusable."""
    s = _WS_RE.sub(" ", raw.strip()).replace(",", ".")
    if not s:
        return None
    total = 0.0
    for part in s.split(" "):
        if "/" in part:
            num, _, den = part.partition("/")
            try:
                numerator = float(num)
                denominator = float(den)
            except ValueError:
                return None
            if denominator == 0:
                return None
            total += numerator / denominator
        else:
            try:
                total += float(part)
            except ValueError:
                return None
    return total


def normalize_unit(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    key = _WS_RE.sub(" ", raw.strip().lower()).rstrip(".")
    key = _FLOZ_RE.sub("fl oz", key)
    return UNIT_ALIASES.get(key)


def measure_kind(unit: Optional[str]) -> MeasureKind:
    if unit in WEIGHT_UNITS:
        return MeasureKind.WEIGHT
    if unit in VOLUME_UNITS:
        return MeasureKind.VOLUME
    return MeasureKind.COUNT


def _clean_name(text: str) -> str:
    name = text.strip()
    name = re.sub(r"\([^)]*\)", " ", name)
    if "," in name:
        name = name.split(",", 1)[0]
    name = re.sub(r"^of\s+", "", name.strip(), flags=re.IGNORECASE)
    return _WS_RE.sub(" ", name).strip(" -:").lower()


def parse_ingredient(text: str) -> ParsedIngredient:
    """Parse one free-text ingredient line.

    Raises ValueError for empty or non-string input.
    """
    if not isinstance(text, str) or not text.strip():
        raise ValueError("ingredient text must be a non-empty string")

    original = text.strip()
    work = _WS_RE.sub(" ", _replace_unicode_fractions(original))
    lowered = work.lower()

    quantity: Optional[float] = None
    unit: Optional[str] = None
    name_part = lowered

    m = _LEADING_RE.match(lowered)
    if m:
        quantity = parse_number(m.group("upper") or m.group("qty"))
        rest = m.group("rest")
        um = _UNIT_RE.match(rest)
        if um:
            candidate = normalize_unit(um.group("unit"))
            if candidate:
                unit = candidate
                rest = rest[um.end():]
            elif um.group("unit") in SIZE_WORDS:
                unit = "item"
                rest = rest[um.end():]
        if unit is None and quantity is not None:
            unit = "item"
        name_part = rest
    else:
        pm = _PAREN_RE.search(lowered)
        tm = _TRAILING_RE.match(lowered)
        if pm:
            quantity = parse_number(pm.group("qty"))
            unit = normalize_unit(pm.group("unit")) if pm.group("unit") else None
            if quantity is not None and unit is None:
                unit = "item"
        elif tm and normalize_unit(tm.group("unit")):
            quantity = parse_number(tm.group("qty"))
            unit = normalize_unit(tm.group("unit"))
            name_part = tm.group("name")
        else:
            first, _, remainder = lowered.partition(" ")
            if first in SIZE_WORDS and remainder:
                quantity = 1.0
                unit = "item"
                name_part = remainder

    if quantity is None:
        unit = None

    name = _clean_name(name_part)
    if not name:
        name = _clean_name(lowered) or lowered
    return ParsedIngredient(quantity=quantity, unit=unit, name=name, original=original)


def singularize(word: str) -> str:
    if len(word) <= 3 or word.endswith("ss") or word.endswith("us"):
        return word
    if word.endswith("ies"):
        return word[:-3] + "y"
    if word.endswith("oes") or word.endswith("ches") or word.endswith("shes"):
        return word[:-2]
    if word.endswith("s"):
        return word[:-1]
    return word


def canonical_name(name: str) -> str:
    """Aggregation key: lower-case, qualifiers dropped, last word singular."""
    words = [w for w in re.split(r"[\s/&]+", name.lower().strip()) if w]
    kept = [w for w in words if w not in QUALIFIERS and w != "and"]
    if not kept:
        kept = words
    if not kept:
        return ""
    kept[-1] = singularize(kept[-1])
    return " ".join(kept)


def to_standard(quantity: float, unit: Optional[str]) -> Tuple[float, str]:
    """Convert to g (weight), ml (volume) or item (everything countable)."""
    if unit in WEIGHT_UNITS:
        return quantity * WEIGHT_UNITS[unit], "g"
    if unit in VOLUME_UNITS:
        return quantity * VOLUME_UNITS[unit], "ml"
    return quantity, "item"


def from_standard(value: float, standard_unit: str) -> Tuple[float, str]:
    """Pick a display unit for a standard-unit total."""
    if standard_unit == "g":
        return (round(value / 1000.0, 2), "kg") if value >= 1000 else (round(value, 1), "g")
    if standard_unit == "ml":
        return (round(value / 1000.0, 2), "l") if value >= 1000 else (round(value, 1), "ml")
    return round(value, 2), "item"
