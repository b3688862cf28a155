# -*- coding: utf-8 -*-
"""
Static ingredient table: shopping category, average UK price and nutrition.

Prices are in GBP. `price_basis` says what the price is per:
WEIGHT -> per kg, VOLUME -> per litre, COUNT -> per item.
Nutrition is per 100 g (or 100 ml for liquids).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .parser import canonical_name

CATEGORY_ORDER = [
    "Produce",
    "Meat & Seafood",
    "Dairy",
    "Grains & Bakery",
    "Pantry & Spices",
    "Snacks & Others",
    "Other",
]


@dataclass(frozen=True)
class IngredientInfo:
    key: str
    category: str
    price: float
    price_basis: str
    calories: float
    protein: float
    carbs: float
    fats: float
    unit_weight_g: Optional[float] = None


# name: (category, price, basis, kcal, protein, carbs, fats, grams per item)
_TABLE: Dict[str, Tuple[str, float, str, float, float, float, float, Optional[float]]] = {
    # Fruit
    "apple": ("Produce", 2.50, "COUNT", 52, 0.3, 14, 0.2, 180),
    "banana": ("Produce", 1.00, "COUNT", 89, 1.1, 22.8, 0.3, 120),
    "orange": ("Produce", 3.00, "COUNT", 47, 0.9, 11.8, 0.1, 150),
    "lemon": ("Produce", 0.50, "COUNT", 29, 1.1, 9.3, 0.3, 60),
    "lime": ("Produce", 0.40, "COUNT", 30, 0.7, 10.5, 0.2, 45),
    "strawberry": ("Produce", 8.00, "WEIGHT", 32, 0.7, 7.7, 0.3, 12),
    "raspberry": ("Produce", 12.00, "WEIGHT", 52, 1.2, 11.9, 0.7, 4),
    "blueberry": ("Produce", 14.00, "WEIGHT", 57, 0.7, 14.5, 0.3, 2),
    "berry": ("Produce", 10.00, "WEIGHT", 50, 0.9, 12, 0.4, 5),
    "grape": ("Produce", 4.00, "WEIGHT", 69, 0.7, 18, 0.2, 5),
    "pear": ("Produce", 3.00, "COUNT", 57, 0.4, 15, 0.1, 180),
    "peach": ("Produce", 1.20, "COUNT", 39, 0.9, 9.5, 0.3, 150),
    "pineapple": ("Produce", 2.50, "COUNT", 50, 0.5, 13, 0.1, 900),
    "mango": ("Produce", 1.80, "COUNT", 60, 0.8, 15, 0.4, 200),
    "kiwi": ("Produce", 0.50, "COUNT", 61, 1.1, 14.7, 0.5, 75),
    "avocado": ("Produce", 1.20, "COUNT", 160, 2, 8.5, 14.7, 150),
    # Vegetables
    "potato": ("Produce", 0.25, "COUNT", 77, 2, 17, 0.1, 200),
    "sweet potato": ("Produce", 2.00, "WEIGHT", 86, 1.6, 20, 0.1, 200),
    "onion": ("Produce", 0.30, "COUNT", 40, 1.1, 9.3, 0.1, 150),
    "red onion": ("Produce", 0.35, "COUNT", 40, 1.1, 9.3, 0.1, 150),
    "garlic": ("Produce", 0.50, "COUNT", 149, 6.4, 33, 0.5, 5),
    "ginger": ("Produce", 6.00, "WEIGHT", 80, 1.8, 18, 0.8, 20),
    "carrot": ("Produce", 0.80, "WEIGHT", 41, 0.9, 9.6, 0.2, 60),
    "bell pepper": ("Produce", 1.00, "COUNT", 31, 1, 6, 0.3, 160),
    "pepper": ("Produce", 1.00, "COUNT", 31, 1, 6, 0.3, 160),
    "lettuce": ("Produce", 0.90, "COUNT", 15, 1.4, 2.9, 0.2, 300),
    "mixed green": ("Produce", 1.50, "COUNT", 20, 1.8, 3.5, 0.3, 100),
    "tomato": ("Produce", 2.60, "WEIGHT", 18, 0.9, 3.9, 0.2, 120),
    "cherry tomato": ("Produce", 5.00, "WEIGHT", 18, 0.9, 3.9, 0.2, 15),
    "cucumber": ("Produce", 0.70, "COUNT", 15, 0.7, 3.6, 0.1, 300),
    "broccoli": ("Produce", 1.60, "COUNT", 34, 2.8, 7, 0.4, 350),
    "spinach": ("Produce", 1.50, "COUNT", 23, 2.9, 3.6, 0.4, 200),
    "kale": ("Produce", 1.50, "COUNT", 49, 4.3, 8.8, 0.9, 200),
    "mushroom": ("Produce", 3.00, "WEIGHT", 22, 3.1, 3.3, 0.3, 20),
    "courgette": ("Produce", 1.80, "WEIGHT", 17, 1.2, 3.1, 0.3, 200),
    "zucchini": ("Produce", 1.80, "WEIGHT", 17, 1.2, 3.1, 0.3, 200),
    "celery": ("Produce", 1.00, "COUNT", 16, 0.7, 3, 0.2, 40),
    "green bean": ("Produce", 4.00, "WEIGHT", 31, 1.8, 7, 0.2, 5),
    "asparagus": ("Produce", 2.00, "COUNT", 20, 2.2, 3.9, 0.1, 250),
    "cauliflower": ("Produce", 1.30, "COUNT", 25, 1.9, 5, 0.3, 600),
    "spring onion": ("Produce", 0.70, "COUNT", 32, 1.8, 7.3, 0.2, 15),
    "mixed vegetable": ("Produce", 2.50, "WEIGHT", 65, 2.6, 13, 0.3, None),
    # Meat & seafood
    "chicken breast": ("Meat & Seafood", 9.00, "WEIGHT", 165, 31, 0, 3.6, 170),
    "chicken thigh": ("Meat & Seafood", 5.50, "WEIGHT", 209, 26, 0, 10.9, 120),
    "chicken": ("Meat & Seafood", 6.00, "WEIGHT", 190, 27, 0, 8, 150),
    "turkey": ("Meat & Seafood", 7.00, "WEIGHT", 135, 30, 0, 1, 150),
    "beef mince": ("Meat & Seafood", 7.00, "WEIGHT", 250, 26, 0, 15, None),
    "beef": ("Meat & Seafood", 9.00, "WEIGHT", 250, 26, 0, 15, 200),
    "steak": ("Meat & Seafood", 16.00, "WEIGHT", 271, 25, 0, 19, 225),
    "pork": ("Meat & Seafood", 7.00, "WEIGHT", 242, 27, 0, 14, 150),
    "bacon": ("Meat & Seafood", 8.00, "WEIGHT", 541, 37, 1.4, 42, 25),
    "ham": ("Meat & Seafood", 10.00, "WEIGHT", 145, 21, 1.5, 6, 25),
    "salmon": ("Meat & Seafood", 14.00, "WEIGHT", 208, 20, 0, 13, 140),
    "tuna": ("Meat & Seafood", 12.00, "WEIGHT", 132, 28, 0, 1.3, 120),
    "cod": ("Meat & Seafood", 12.00, "WEIGHT", 82, 18, 0, 0.7, 150),
    "prawn": ("Meat & Seafood", 15.00, "WEIGHT", 99, 24, 0.2, 0.3, 10),
    "shrimp": ("Meat & Seafood", 15.00, "WEIGHT", 99, 24, 0.2, 0.3, 10),
    # Dairy & eggs
    "egg": ("Dairy", 0.25, "COUNT", 155, 13, 1.1, 11, 50),
    "egg white": ("Dairy", 0.25, "COUNT", 52, 11, 0.7, 0.2, 33),
    "milk": ("Dairy", 1.20, "VOLUME", 64, 3.4, 4.8, 3.6, None),
    "almond milk": ("Dairy", 1.80, "VOLUME", 15, 0.6, 0.6, 1.1, None),
    "greek yogurt": ("Dairy", 4.00, "WEIGHT", 97, 9, 3.9, 5, 170),
    "yogurt": ("Dairy", 1.50, "COUNT", 61, 3.5, 4.7, 3.3, 150),
    "cheese": ("Dairy", 8.00, "WEIGHT", 402, 25, 1.3, 33, 30),
    "cheddar": ("Dairy", 9.00, "WEIGHT", 403, 25, 1.3, 33, 30),
    "feta cheese": ("Dairy", 10.00, "WEIGHT", 264, 14, 4.1, 21, 30),
    "feta": ("Dairy", 10.00, "WEIGHT", 264, 14, 4.1, 21, 30),
    "mozzarella": ("Dairy", 7.50, "WEIGHT", 280, 28, 3.1, 17, 125),
    "parmesan": ("Dairy", 16.00, "WEIGHT", 431, 38, 4.1, 29, 10),
    "cottage cheese": ("Dairy", 4.50, "WEIGHT", 98, 11, 3.4, 4.3, None),
    "butter": ("Dairy", 7.50, "WEIGHT", 717, 0.9, 0.1, 81, 10),
    "cream": ("Dairy", 2.00, "VOLUME", 340, 2.1, 2.8, 36, None),
    # Grains & bakery
    "rice": ("Grains & Bakery", 2.00, "WEIGHT", 130, 2.7, 28, 0.3, None),
    "brown rice": ("Grains & Bakery", 2.40, "WEIGHT", 112, 2.6, 23, 0.9, None),
    "quinoa": ("Grains & Bakery", 6.00, "WEIGHT", 120, 4.4, 21, 1.9, None),
    "oat": ("Grains & Bakery", 1.50, "WEIGHT", 389, 16.9, 66, 6.9, None),
    "pasta": ("Grains & Bakery", 1.80, "WEIGHT", 131, 5, 25, 1.1, None),
    "whole wheat pasta": ("Grains & Bakery", 2.20, "WEIGHT", 124, 5.3, 26.5, 0.5, None),
    "noodle": ("Grains & Bakery", 2.20, "WEIGHT", 138, 4.5, 25, 2.1, None),
    "bread": ("Grains & Bakery", 1.10, "COUNT", 265, 9, 49, 3.2, 40),
    "whole grain bread": ("Grains & Bakery", 1.40, "COUNT", 247, 13, 41, 3.4, 40),
    "tortilla": ("Grains & Bakery", 1.50, "COUNT", 310, 8, 52, 8, 60),
    "wrap": ("Grains & Bakery", 1.50, "COUNT", 310, 8, 52, 8, 60),
    "bagel": ("Grains & Bakery", 0.60, "COUNT", 257, 10, 50, 1.7, 100),
    "english muffin": ("Grains & Bakery", 0.50, "COUNT", 227, 8.9, 44, 1.7, 60),
    "bun": ("Grains & Bakery", 0.40, "COUNT", 270, 9, 48, 4, 60),
    "granola": ("Grains & Bakery", 5.00, "WEIGHT", 471, 10, 64, 20, None),
    "flour": ("Grains & Bakery", 1.00, "WEIGHT", 364, 10, 76, 1, None),
    # Pantry & spices
    "olive oil": ("Pantry & Spices", 8.00, "VOLUME", 884, 0, 0, 100, None),
    "coconut oil": ("Pantry & Spices", 10.00, "VOLUME", 862, 0, 0, 100, None),
    "vegetable oil": ("Pantry & Spices", 2.00, "VOLUME", 884, 0, 0, 100, None),
    "oil": ("Pantry & Spices", 3.50, "VOLUME", 884, 0, 0, 100, None),
    "black bean": ("Pantry & Spices", 1.00, "COUNT", 132, 8.9, 23.7, 0.5, 240),
    "chickpea": ("Pantry & Spices", 0.90, "COUNT", 164, 8.9, 27.4, 2.6, 240),
    "lentil": ("Pantry & Spices", 3.00, "WEIGHT", 116, 9, 20, 0.4, None),
    "bean": ("Pantry & Spices", 1.00, "COUNT", 127, 8.7, 22.8, 0.5, 240),
    "tofu": ("Pantry & Spices", 5.00, "WEIGHT", 76, 8, 1.9, 4.8, None),
    "peanut butter": ("Pantry & Spices", 2.50, "COUNT", 588, 25, 20, 50, 340),
    "almond butter": ("Pantry & Spices", 5.00, "COUNT", 614, 21, 19, 56, 170),
    "honey": ("Pantry & Spices", 4.00, "COUNT", 304, 0.3, 82, 0, 340),
    "maple syrup": ("Pantry & Spices", 12.00, "VOLUME", 260, 0, 67, 0.1, None),
    "soy sauce": ("Pantry & Spices", 3.50, "VOLUME", 53, 8, 4.9, 0.6, None),
    "tomato sauce": ("Pantry & Spices", 1.20, "COUNT", 29, 1.3, 6.7, 0.2, 400),
    "salsa": ("Pantry & Spices", 2.00, "COUNT", 36, 1.5, 7, 0.2, 300),
    "mustard": ("Pantry & Spices", 1.50, "COUNT", 66, 4.4, 5.8, 4, 200),
    "mayonnaise": ("Pantry & Spices", 2.50, "COUNT", 680, 1, 0.6, 75, 400),
    "mayo": ("Pantry & Spices", 2.50, "COUNT", 680, 1, 0.6, 75, 400),
    "vinegar": ("Pantry & Spices", 2.50, "VOLUME", 18, 0, 0.04, 0, None),
    "stock": ("Pantry & Spices", 1.50, "VOLUME", 7, 1, 0.5, 0.2, None),
    "broth": ("Pantry & Spices", 1.50, "VOLUME", 7, 1, 0.5, 0.2, None),
    "protein powder": ("Pantry & Spices", 25.00, "WEIGHT", 400, 80, 8, 6, 30),
    "chia seed": ("Pantry & Spices", 8.00, "WEIGHT", 486, 17, 42, 31, None),
    "salt": ("Pantry & Spices", 1.00, "WEIGHT", 0, 0, 0, 0, 1),
    "black pepper": ("Pantry & Spices", 2.50, "COUNT", 251, 10, 64, 3.3, 1),
    "cinnamon": ("Pantry & Spices", 2.00, "COUNT", 247, 4, 81, 1.2, 3),
    "herb": ("Pantry & Spices", 1.50, "COUNT", 40, 3, 7, 0.8, 5),
    "spice": ("Pantry & Spices", 2.50, "COUNT", 250, 10, 50, 10, 3),
    "sugar": ("Pantry & Spices", 1.00, "WEIGHT", 387, 0, 100, 0, 4),
    # Snacks & others
    "almond": ("Snacks & Others", 12.00, "WEIGHT", 579, 21, 22, 50, 1.2),
    "walnut": ("Snacks & Others", 14.00, "WEIGHT", 654, 15, 14, 65, 4),
    "nut": ("Snacks & Others", 10.00, "WEIGHT", 607, 20, 21, 54, 1.5),
    "seed": ("Snacks & Others", 8.00, "WEIGHT", 560, 20, 25, 45, None),
    "hummus": ("Snacks & Others", 6.00, "WEIGHT", 166, 7.9, 14, 9.6, None),
    "dark chocolate": ("Snacks & Others", 10.00, "WEIGHT", 546, 4.9, 61, 31, 10),
    "dried fruit": ("Snacks & Others", 8.00, "WEIGHT", 300, 2.5, 75, 0.5, None),
    "olive": ("Snacks & Others", 8.00, "WEIGHT", 115, 0.8, 6, 11, 4),
    "coffee": ("Snacks & Others", 5.00, "COUNT", 2, 0.3, 0, 0, 240),
    "juice": ("Snacks & Others", 1.80, "VOLUME", 45, 0.7, 10.4, 0.2, None),
    "water": ("Snacks & Others", 0.80, "VOLUME", 0, 0, 0, 0, None),
}

INGREDIENTS: Dict[str, IngredientInfo] = {
    key: IngredientInfo(key, *values) for key, values in _TABLE.items()
}

_CATEGORY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "Produce": (
        "lettuce", "salad", "green", "vegetable", "fruit", "berry", "herb", "basil",
        "parsley", "coriander", "cilantro", "mint", "rocket", "cabbage", "leek",
    ),
    "Meat & Seafood": ("chicken", "beef", "pork", "lamb", "fish", "turkey", "sausage", "meat", "seafood"),
    "Dairy": ("cheese", "milk", "yogurt", "yoghurt", "cream", "egg"),
    "Grains & Bakery": ("bread", "rice", "oat", "cereal", "pasta", "grain", "muffin", "bun", "roll", "cracker"),
    "Pantry & Spices": (
        "sauce", "oil", "vinegar", "spice", "seasoning", "powder", "stock", "dressing",
        "salt", "pepper", "paprika", "cumin", "syrup", "bean",
    ),
    "Snacks & Others": ("bar", "chip", "crisp", "snack", "nut", "seed", "chocolate", "shake", "drink", "tea"),
}


def _similarity(key: str, name: str) -> float:
    return len(key) / max(len(key), len(name))


def find_ingredient(name: str) -> Optional[IngredientInfo]:
    """Exact canonical match first, then the closest containing/contained key."""
    canonical = canonical_name(name)
    if not canonical:
        return None
    exact = INGREDIENTS.get(canonical)
    if exact:
        return exact

    best: Optional[IngredientInfo] = None
    best_score = 0.0
    for key, info in INGREDIENTS.items():
        if key in canonical or canonical in key:
            score = _similarity(key, canonical)
            if score > best_score:
                best, best_score = info, score
    if best is not None and best_score > 0.5:
        return best
    return None


def category_for(name: str) -> str:
    info = find_ingredient(name)
    if info:
        return info.category
    lowered = name.lower()
    for category, keywords in _CATEGORY_KEYWORDS.items():
        if any(k in lowered for k in keywords):
            return category
    return "Other"
