# -*- coding: utf-8 -*-
"""Food item table: nutrition per base quantity."""

from __future__ import annotations

from typing import Any, Dict, List

# (id, name, category, base_quantity, base_unit, kcal, protein, carbs, fats, gluten free, vegan, popularity,
#  alternate names, search tags)
_ROWS = [
    ("food-chicken-breast", "Chicken Breast", "protein", 100, "g", 165, 31, 0, 3.6, True, False, 95,
     ["chicken fillet"], ["poultry", "lean"]),
    ("food-salmon", "Salmon Fillet", "protein", 100, "g", 208, 20, 0, 13, True, False, 80,
     ["atlantic salmon"], ["fish", "omega-3"]),
    ("food-egg", "Egg", "protein", 1, "piece", 72, 6.3, 0.4, 4.8, True, False, 90,
     ["hen egg"], ["breakfast"]),
    ("food-tofu", "Firm Tofu", "protein", 100, "g", 144, 15.7, 3.5, 8.7, True, True, 55,
     ["bean curd"], ["soy", "plant protein"]),
    ("food-lean-beef-mince", "Lean Beef Mince", "protein", 100, "g", 176, 20, 0, 10, True, False, 70,
     ["ground beef", "minced beef"], ["red meat"]),
    ("food-tuna", "Tuna in Spring Water", "protein", 100, "g", 109, 25, 0, 1, True, False, 65,
     ["canned tuna"], ["fish", "tinned"]),
    ("food-greek-yogurt", "Greek Yogurt (0%)", "dairy", 100, "g", 59, 10, 3.6, 0.4, True, False, 85,
     ["greek yoghurt"], ["high protein"]),
    ("food-milk", "Semi-Skimmed Milk", "beverages", 100, "ml", 46, 3.4, 4.7, 1.7, True, False, 75,
     ["milk"], ["dairy"]),
    ("food-cheddar", "Cheddar Cheese", "dairy", 100, "g", 403, 25, 1.3, 33, True, False, 60,
     ["cheddar"], ["cheese"]),
    ("food-cottage-cheese", "Cottage Cheese", "dairy", 100, "g", 98, 11, 3.4, 4.3, True, False, 45,
     [], ["cheese", "high protein"]),
    ("food-rolled-oats", "Rolled Oats", "grains", 100, "g", 389, 16.9, 66, 6.9, False, True, 88,
     ["porridge oats", "oatmeal"], ["breakfast", "fiber"]),
    ("food-brown-rice", "Brown Rice (cooked)", "grains", 100, "g", 123, 2.7, 25.6, 1, True, True, 70,
     [], ["wholegrain"]),
    ("food-quinoa", "Quinoa (cooked)", "grains", 100, "g", 120, 4.4, 21.3, 1.9, True, True, 50,
     [], ["wholegrain", "plant protein"]),
    ("food-wholegrain-bread", "Wholegrain Bread", "baked-goods", 1, "piece", 80, 4, 13.8, 1.1, False, True, 78,
     ["wholemeal bread", "brown bread"], ["toast", "slice"]),
    ("food-sweet-potato", "Sweet Potato", "vegetables", 100, "g", 86, 1.6, 20, 0.1, True, True, 60,
     ["yam"], ["carbs"]),
    ("food-broccoli", "Broccoli", "vegetables", 100, "g", 34, 2.8, 7, 0.4, True, True, 72,
     [], ["greens"]),
    ("food-spinach", "Spinach", "vegetables", 100, "g", 23, 2.9, 3.6, 0.4, True, True, 58,
     ["baby spinach"], ["greens", "iron"]),
    ("food-banana", "Banana", "fruits", 1, "piece", 105, 1.3, 27, 0.4, True, True, 92,
     [], ["fruit", "potassium"]),
    ("food-apple", "Apple", "fruits", 1, "piece", 95, 0.5, 25, 0.3, True, True, 86,
     [], ["fruit"]),
    ("food-blueberries", "Blueberries", "fruits", 100, "g", 57, 0.7, 14.5, 0.3, True, True, 64,
     ["blueberry"], ["berries", "antioxidant"]),
    ("food-avocado", "Avocado", "fruits", 1, "piece", 240, 3, 12.8, 22, True, True, 68,
     [], ["healthy fats"]),
    ("food-almonds", "Almonds", "nuts-seeds", 30, "g", 174, 6.3, 6.5, 15, True, True, 62,
     ["almond"], ["nuts", "snack"]),
    ("food-peanut-butter", "Peanut Butter", "nuts-seeds", 1, "tbsp", 94, 4, 3.2, 8, True, True, 74,
     ["pb"], ["nut butter", "spread"]),
    ("food-chia-seeds", "Chia Seeds", "nuts-seeds", 1, "tbsp", 58, 2, 5, 3.7, True, True, 40,
     [], ["seeds", "omega-3"]),
    ("food-olive-oil", "Extra Virgin Olive Oil", "oils-fats", 1, "tbsp", 119, 0, 0, 13.5, True, True, 77,
     ["olive oil", "evoo"], ["oil", "cooking"]),
    ("food-hummus", "Hummus", "condiments", 100, "g", 166, 7.9, 14.3, 9.6, True, True, 57,
     ["houmous"], ["dip", "chickpea"]),
    ("food-whey-protein", "Whey Protein Powder", "supplements", 30, "g", 120, 24, 3, 1.5, True, False, 66,
     ["protein powder"], ["shake", "supplement"]),
    ("food-protein-bar", "Protein Bar", "snacks", 1, "piece", 210, 20, 22, 7, False, False, 52,
     [], ["bar", "snack"]),
    ("food-dark-chocolate", "Dark Chocolate (70%)", "desserts", 20, "g", 120, 1.6, 9, 8.6, True, True, 48,
     [], ["chocolate", "treat"]),
    ("food-burrito", "Chicken Burrito", "fast-food", 1, "serving", 720, 38, 80, 26, False, False, 35,
     [], ["takeaway", "mexican"]),
]


def _food(row: tuple) -> Dict[str, Any]:
    (food_id, name, category, base_quantity, base_unit, calories, protein, carbs, fats,
     gluten_free, vegan, popularity, alternate_names, search_tags) = row
    return {
        "id": food_id,
        "name": name,
        "category": category,
        "base_quantity": base_quantity,
        "base_unit": base_unit,
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fats": fats,
        "is_gluten_free": gluten_free,
        "is_vegan": vegan,
        "is_vegetarian": vegan or category in ("dairy",) or food_id == "food-egg",
        "popularity": popularity,
        "alternate_names": alternate_names,
        "search_tags": search_tags,
    }


FOOD_ITEMS: List[Dict[str, Any]] = [_food(row) for row in _ROWS]
