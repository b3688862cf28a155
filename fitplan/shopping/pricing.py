# -*- coding: utf-8 -*-
"""Rough UK supermarket price estimates for aggregated shopping items."""

from __future__ import annotations

import math
from typing import Optional

from ..ingredients.lookup import IngredientInfo, find_ingredient

MIN_QUANTITY = 0.01
MAX_QUANTITY = 50.0

SPICE_FLAT_PRICE = 0.50
SPICE_THRESHOLD_G = 50.0
_SPICE_WORDS = (
    "spice", "herb", "salt", "pepper", "cinnamon", "paprika", "cumin", "oregano",
    "basil", "thyme", "rosemary", "chilli", "chili", "turmeric", "nutmeg", "seasoning",
)

# kg per piece when a per-item price has to be matched against a weight.
PIECE_WEIGHT_KG = {"onion": 0.15, "potato": 0.2, "garlic": 0.05}
DEFAULT_PIECE_WEIGHT_KG = 0.2

DEFAULT_PRICES = {"g": 5.00, "ml": 2.00, "item": 1.50}


def _is_spice(name: str, info: Optional[IngredientInfo]) -> bool:
    lowered = name.lower()
    if info and info.key in ("spice", "herb", "salt", "black pepper", "cinnamon"):
        return True
    return any(word in lowered for word in _SPICE_WORDS)


def _piece_weight_kg(key: str) -> float:
    for word, weight in PIECE_WEIGHT_KG.items():
        if word in key:
            return weight
    return DEFAULT_PIECE_WEIGHT_KG


def _clamp(value: float) -> float:
    return min(MAX_QUANTITY, max(MIN_QUANTITY, value))


def estimate_price(name: str, quantity: float, standard_unit: str) -> float:
    """
    Price in GBP for `quantity` of `standard_unit` (g, ml or item).

    Weights and volumes are priced per kg/litre, counts per item. Mismatches
    between how an ingredient is bought and how the recipe measures it are
    bridged with piece weights.
    """
    info = find_ingredient(name)
    if standard_unit == "item":
        amount = max(quantity, 0.0)
    else:
        amount = _clamp(quantity / 1000.0)

    if standard_unit == "g" and quantity < SPICE_THRESHOLD_G and _is_spice(name, info):
        return SPICE_FLAT_PRICE

    if info is None:
        return round(amount * DEFAULT_PRICES.get(standard_unit, DEFAULT_PRICES["item"]), 2)

    if info.price_basis == "COUNT":
        if standard_unit == "item":
            return round(amount * info.price, 2)
        pieces = math.ceil(amount / _piece_weight_kg(info.key))
        return round(pieces * info.price, 2)

    if standard_unit == "item":
        # Bought by weight or volume but counted in the recipe.
        per_item_g = info.unit_weight_g or 100.0
        amount = _clamp(amount * per_item_g / 1000.0)
    return round(amount * info.price, 2)
