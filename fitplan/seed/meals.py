# -*- coding: utf-8 -*-
"""Meal catalog used by the diet plans, meal swaps and generated plans."""

from __future__ import annotations

from typing import Any, Dict, List


def _meal(
    meal_id: str,
    name: str,
    timing: str,
    macros: tuple,
    ingredients: List[str],
    *,
    category: str = "home",
    dietary: tuple = (),
    nutritional: tuple = (),
    suitable: tuple = (),
    contains: tuple = (),
    prep: tuple = (15, "beginner", False),
    budget: str = "moderate",
    cuisine: str = "american",
) -> Dict[str, Any]:
    calories, protein, carbs, fats = macros
    minutes, difficulty, meal_prep = prep
    return {
        "id": meal_id,
        "name": name,
        "timing": timing,
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fats": fats,
        "category": category,
        "ingredients": ingredients,
        "dietary_tags": list(dietary),
        "nutritional_tags": list(nutritional),
        "suitable_for": list(suitable),
        "contains": list(contains),
        "preparation": {"time": minutes, "difficulty": difficulty, "meal_prep_friendly": meal_prep},
        "budget_tier": budget,
        "cuisine": cuisine,
    }


MEALS: List[Dict[str, Any]] = [
    # Breakfast
    _meal("meal-overnight-oats", "Overnight Oats with Berries", "Breakfast", (420, 20, 58, 12),
          ["1 cup rolled oats", "200ml milk", "100g mixed berries", "1 tbsp chia seeds", "1 tsp honey"],
          dietary=("vegetarian",), suitable=("heart-healthy", "low-cholesterol"), contains=("dairy", "gluten"),
          prep=(10, "beginner", True), budget="budget"),
    _meal("meal-veggie-omelette", "Spinach & Pepper Omelette", "Breakfast", (350, 26, 8, 24),
          ["3 large eggs", "Handful of spinach", "1/2 red bell pepper", "30g cheddar cheese", "1 tsp olive oil"],
          dietary=("vegetarian", "gluten-free"), nutritional=("low-carb",), suitable=("diabetes-friendly", "b12-rich"),
          contains=("eggs", "dairy"), prep=(15, "beginner", False), budget="budget", cuisine="french"),
    _meal("meal-greek-yogurt-bowl", "Greek Yogurt Protein Bowl", "Breakfast", (380, 32, 40, 10),
          ["250g Greek yogurt", "1 banana", "30g granola", "1 tbsp honey"],
          dietary=("vegetarian",), suitable=("calcium-rich",), contains=("dairy", "gluten"),
          prep=(5, "beginner", True), budget="moderate", cuisine="mediterranean"),
    _meal("meal-avocado-toast", "Avocado & Egg Toast", "Breakfast", (450, 20, 38, 24),
          ["2 slices wholegrain bread", "1 avocado", "2 eggs", "Salt & pepper"],
          dietary=("vegetarian",), suitable=("heart-healthy",), contains=("eggs", "gluten"),
          prep=(10, "beginner", False), budget="moderate"),
    _meal("meal-tofu-scramble", "Turmeric Tofu Scramble", "Breakfast", (330, 22, 14, 20),
          ["200g firm tofu", "1/2 onion", "1 tsp turmeric", "Handful of spinach", "1 tbsp olive oil"],
          dietary=("vegan", "vegetarian", "gluten-free", "dairy-free"), nutritional=("low-carb",),
          suitable=("anti-inflammatory", "iron-rich"), contains=("soy",), prep=(15, "beginner", False),
          budget="budget", cuisine="asian"),
    _meal("meal-protein-pancakes", "Protein Pancakes", "Breakfast", (480, 35, 55, 12),
          ["1 scoop protein powder", "1 banana", "2 eggs", "40g oats", "1 tbsp maple syrup"],
          dietary=("vegetarian",), contains=("eggs", "dairy", "gluten"), prep=(20, "intermediate", False),
          budget="moderate"),
    _meal("meal-smoked-salmon-bagel", "Smoked Salmon Bagel", "Breakfast", (460, 28, 48, 16),
          ["1 wholemeal bagel", "60g smoked salmon", "30g cream cheese", "Capers"],
          dietary=("pescatarian",), suitable=("vitamin-d-rich", "b12-rich"), contains=("dairy", "gluten"),
          prep=(5, "beginner", False), budget="premium", cuisine="american"),
    # Lunch
    _meal("meal-chicken-quinoa-bowl", "Chicken Quinoa Power Bowl", "Lunch", (560, 45, 52, 16),
          ["150g chicken breast", "80g quinoa", "1/2 avocado", "Cherry tomatoes", "Mixed greens", "1 tbsp olive oil"],
          dietary=("gluten-free", "dairy-free"), suitable=("heart-healthy",), prep=(25, "beginner", True),
          budget="moderate", cuisine="mediterranean"),
    _meal("meal-tuna-salad-wrap", "Tuna Salad Wrap", "Lunch", (470, 36, 42, 16),
          ["1 can tuna", "1 wholewheat wrap", "1 tbsp light mayo", "Lettuce", "1/2 cucumber"],
          dietary=("pescatarian",), contains=("eggs", "gluten"), prep=(10, "beginner", True), budget="budget"),
    _meal("meal-lentil-soup", "Red Lentil & Carrot Soup", "Lunch", (420, 22, 62, 8),
          ["150g red lentils", "2 carrots", "1 onion", "2 cloves garlic", "500ml vegetable stock", "1 tsp cumin"],
          dietary=("vegan", "vegetarian", "gluten-free", "dairy-free"), nutritional=("high-fiber",),
          suitable=("heart-healthy", "iron-rich", "low-cholesterol", "diabetes-friendly"),
          prep=(30, "beginner", True), budget="budget", cuisine="indian"),
    _meal("meal-greek-salad", "Greek Salad with Feta", "Lunch", (380, 15, 20, 25),
          ["Mixed greens", "Cucumber", "Tomato", "Red onion", "Feta cheese", "Kalamata olives", "Olive oil"],
          dietary=("vegetarian", "gluten-free"), nutritional=("low-carb",), suitable=("heart-healthy",),
          contains=("dairy", "nightshades"), prep=(10, "beginner", False), budget="moderate",
          cuisine="mediterranean"),
    _meal("meal-turkey-sandwich", "Turkey & Hummus Sandwich", "Lunch", (510, 38, 50, 16),
          ["2 slices wholegrain bread", "100g sliced turkey", "2 tbsp hummus", "Spinach", "1 tomato"],
          dietary=("dairy-free",), contains=("gluten",), prep=(5, "beginner", True), budget="budget"),
    _meal("meal-chickpea-buddha-bowl", "Chickpea Buddha Bowl", "Lunch", (540, 20, 70, 20),
          ["1 can chickpeas", "1 sweet potato", "Handful of kale", "2 tbsp tahini", "1/2 lemon"],
          dietary=("vegan", "vegetarian", "gluten-free", "dairy-free"), suitable=("anti-inflammatory", "iron-rich"),
          prep=(35, "intermediate", True), budget="budget", cuisine="middle_eastern"),
    _meal("meal-prawn-noodles", "Prawn & Vegetable Noodles", "Lunch", (520, 32, 60, 14),
          ["150g prawns", "100g rice noodles", "1 pak choi", "1 carrot", "2 tbsp soy sauce", "1 tsp sesame oil"],
          dietary=("pescatarian", "dairy-free"), contains=("shellfish", "soy"), prep=(20, "intermediate", False),
          budget="premium", cuisine="thai"),
    # Dinner
    _meal("meal-salmon-sweet-potato", "Baked Salmon with Sweet Potato", "Dinner", (610, 40, 45, 28),
          ["180g salmon fillet", "1 sweet potato", "150g broccoli", "1 tbsp olive oil", "1/2 lemon"],
          dietary=("pescatarian", "gluten-free", "dairy-free"), nutritional=("paleo-friendly",),
          suitable=("heart-healthy", "anti-inflammatory", "vitamin-d-rich", "low-triglycerides"),
          prep=(30, "beginner", False), budget="premium", cuisine="american"),
    _meal("meal-chicken-stir-fry", "Chicken & Broccoli Stir Fry", "Dinner", (580, 45, 55, 16),
          ["150g chicken breast", "150g broccoli", "1 red bell pepper", "75g brown rice", "2 tbsp soy sauce",
           "1 tsp ginger"],
          dietary=("dairy-free",), contains=("soy",), prep=(25, "beginner", True), budget="budget", cuisine="asian"),
    _meal("meal-steak-potatoes", "Lean Steak & Vegetables", "Dinner", (650, 48, 40, 30),
          ["Lean steak (8oz)", "Small potato", "Asparagus", "Mixed greens", "Salt & pepper"],
          dietary=("gluten-free", "dairy-free"), nutritional=("paleo-friendly",), suitable=("iron-rich", "zinc-rich"),
          contains=("beef",), prep=(30, "intermediate", False), budget="premium"),
    _meal("meal-veggie-chilli", "Three Bean Veggie Chilli", "Dinner", (540, 26, 78, 10),
          ["1 can kidney beans", "1 can black beans", "1 can chopped tomatoes", "1 onion", "1 red bell pepper",
           "1 tsp chilli powder", "75g brown rice"],
          dietary=("vegan", "vegetarian", "gluten-free", "dairy-free"), nutritional=("high-fiber",),
          suitable=("heart-healthy", "low-cholesterol", "diabetes-friendly"), contains=("nightshades",),
          prep=(40, "beginner", True), budget="budget", cuisine="mexican"),
    _meal("meal-turkey-meatballs", "Turkey Meatballs with Courgetti", "Dinner", (520, 44, 24, 26),
          ["250g turkey mince", "2 courgettes", "200g tomato sauce", "1 egg", "20g parmesan"],
          dietary=("gluten-free",), nutritional=("low-carb",), contains=("eggs", "dairy", "nightshades"),
          prep=(35, "intermediate", True), budget="moderate", cuisine="italian"),
    _meal("meal-tofu-curry", "Tofu & Spinach Curry", "Dinner", (560, 26, 50, 28),
          ["200g firm tofu", "200ml coconut milk", "Handful of spinach", "1 onion", "2 tbsp curry paste",
           "75g basmati rice"],
          dietary=("vegan", "vegetarian", "gluten-free", "dairy-free"), suitable=("anti-inflammatory", "calcium-rich"),
          contains=("soy",), prep=(30, "intermediate", True), budget="moderate", cuisine="indian"),
    _meal("meal-cod-traybake", "Mediterranean Cod Traybake", "Dinner", (470, 38, 36, 18),
          ["180g cod fillet", "200g cherry tomatoes", "1 courgette", "1 red onion", "1 tbsp olive oil",
           "Fresh basil"],
          dietary=("pescatarian", "gluten-free", "dairy-free"), nutritional=("paleo-friendly",),
          suitable=("heart-healthy", "low-cholesterol"), contains=("nightshades",), prep=(30, "beginner", False),
          budget="moderate", cuisine="mediterranean"),
    _meal("meal-beef-burrito-bowl", "Beef Burrito Bowl", "Dinner", (680, 42, 70, 24),
          ["150g lean beef mince", "75g rice", "1/2 can black beans", "50g sweetcorn", "2 tbsp salsa",
           "30g cheddar cheese"],
          contains=("beef", "dairy", "nightshades"), prep=(25, "beginner", True), budget="moderate",
          cuisine="mexican"),
    # Snacks
    _meal("meal-apple-peanut-butter", "Apple with Peanut Butter", "Snack", (260, 7, 28, 16),
          ["1 apple", "2 tbsp peanut butter"],
          dietary=("vegan", "vegetarian", "gluten-free", "dairy-free"), contains=("nuts",),
          prep=(2, "beginner", False), budget="budget"),
    _meal("meal-protein-shake", "Banana Protein Shake", "Snack", (300, 30, 35, 5),
          ["1 scoop protein powder", "1 banana", "250ml milk"],
          dietary=("vegetarian", "gluten-free"), contains=("dairy",), prep=(3, "beginner", True), budget="moderate"),
    _meal("meal-hummus-veg", "Hummus & Veggie Sticks", "Snack", (220, 8, 22, 12),
          ["4 tbsp hummus", "1 carrot", "1/2 cucumber", "1/2 red bell pepper"],
          dietary=("vegan", "vegetarian", "gluten-free", "dairy-free"), suitable=("heart-healthy",),
          prep=(5, "beginner", True), budget="budget", cuisine="middle_eastern"),
    _meal("meal-trail-mix", "Almond & Dark Chocolate Trail Mix", "Snack", (280, 8, 18, 20),
          ["30g almonds", "15g dark chocolate", "15g dried fruit"],
          dietary=("vegan", "vegetarian", "gluten-free", "dairy-free"), contains=("nuts",),
          prep=(1, "beginner", True), budget="moderate"),
    _meal("meal-cottage-cheese-berries", "Cottage Cheese with Berries", "Snack", (200, 22, 16, 5),
          ["200g cottage cheese", "80g blueberries"],
          dietary=("vegetarian", "gluten-free"), suitable=("calcium-rich", "diabetes-friendly"), contains=("dairy",),
          prep=(2, "beginner", False), budget="budget"),
    # Eating out
    _meal("meal-restaurant-chicken-sandwich", "Restaurant Grilled Chicken Sandwich", "Lunch", (550, 35, 50, 20),
          ["Grilled chicken breast", "Whole wheat bun", "Lettuce", "Tomato", "Onion", "Low-fat mayo", "Mustard"],
          category="restaurant", contains=("gluten", "eggs"), prep=(0, "beginner", False), budget="moderate"),
    _meal("meal-fast-food-burrito", "Fast Food Chicken Burrito", "Dinner", (720, 38, 80, 26),
          ["Flour tortilla", "Grilled chicken", "Rice", "Black beans", "Salsa", "Cheese", "Sour cream"],
          category="fast-food", contains=("gluten", "dairy"), prep=(0, "beginner", False), budget="budget",
          cuisine="mexican"),
]
