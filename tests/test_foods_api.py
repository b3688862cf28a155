# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient


class TestFoodItemsApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="fitplan-test-"))
        data_root = cls._tmp / "data"
        os.environ["FITPLAN_DATA_ROOT"] = str(data_root)
        os.environ["FITPLAN_DB_PATH"] = str(data_root / "fitplan.db")
        os.environ["FITPLAN_JWT_SECRET"] = "test-secret"

        for name in list(sys.modules.keys()):
            if name.startswith("fitplan."):
                sys.modules.pop(name, None)

        from fitplan.api import app  # noqa: WPS433 (import inside test for env control)
        from fitplan.foods import storage  # noqa: WPS433

        cls.storage = storage

        cls.client = TestClient(app)
        resp = cls.client.post(
            "/api/auth/register",
            json={"name": "Foodie", "email": "foodie@example.com", "password": "password123"},
        )
        cls.headers = {"Authorization": f"Bearer {resp.json()['token']}"}

    @classmethod
    def tearDownClass(cls) -> None:
        try:
            cls.client.close()
        except Exception:
            pass
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _search(self, params: str = "") -> dict:
        resp = self.client.get(f"/api/food-items/search?{params}", headers=self.headers)
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def test_search_by_name_alias_and_tag(self) -> None:
        for query in ("chicken", "fillet", "poultry"):
            with self.subTest(query=query):
                ids = [f["id"] for f in self._search(f"query={query}")["items"]]
                self.assertIn("food-chicken-breast", ids)

    def test_search_filters(self) -> None:
        grains = self._search("category=grains&limit=100")["items"]
        self.assertTrue(grains)
        self.assertTrue(all(f["category"] == "grains" for f in grains))

        vegan = self._search("is_vegan=true&limit=100")["items"]
        self.assertTrue(all(f["is_vegan"] for f in vegan))
        self.assertNotIn("food-chicken-breast", [f["id"] for f in vegan])

        gluten_free = [f["id"] for f in self._search("is_gluten_free=true&limit=100")["items"]]
        self.assertNotIn("food-rolled-oats", gluten_free)

    def test_sort_and_pagination(self) -> None:
        by_calories = [f["calories"] for f in self._search("sort=calories_asc&limit=100")["items"]]
        self.assertEqual(by_calories, sorted(by_calories))
        by_protein = [f["protein"] for f in self._search("sort=protein_desc&limit=100")["items"]]
        self.assertEqual(by_protein, sorted(by_protein, reverse=True))

        first = self._search("limit=5&page=1")
        second = self._search("limit=5&page=2")
        self.assertEqual(len(first["items"]), 5)
        self.assertEqual(first["pagination"]["pages"], -(-first["pagination"]["total"] // 5))
        self.assertEqual(second["pagination"]["page"], 2)
        self.assertFalse({f["id"] for f in first["items"]} & {f["id"] for f in second["items"]})

        resp = self.client.get("/api/food-items/search?sort=tastiest", headers=self.headers)
        self.assertEqual(resp.status_code, 422)

    def test_get_food_item(self) -> None:
        resp = self.client.get("/api/food-items/food-chicken-breast", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        food = resp.json()
        self.assertEqual(food["calories"], 165)
        self.assertEqual(food["search_tags"], ["poultry", "lean"])
        self.assertEqual(self.client.get("/api/food-items/food-nope", headers=self.headers).status_code, 404)

    def test_calculate_nutrition(self) -> None:
        resp = self.client.post(
            "/api/food-items/calculate-nutrition",
            headers=self.headers,
            json={"food_item_id": "food-chicken-breast", "quantity": 200},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["unit"], "g")
        self.assertEqual(body["nutrition"], {"calories": 330, "protein": 62.0, "carbs": 0.0, "fats": 7.2})

        resp = self.client.post(
            "/api/food-items/calculate-nutrition",
            headers=self.headers,
            json={"food_item_id": "food-egg", "quantity": 2},
        )
        self.assertEqual(resp.json()["nutrition"]["calories"], 144)

        resp = self.client.post(
            "/api/food-items/calculate-nutrition",
            headers=self.headers,
            json={"food_item_id": "food-chicken-breast", "quantity": 1, "unit": "kg"},
        )
        self.assertEqual(resp.json()["nutrition"]["calories"], 1650)

        resp = self.client.post(
            "/api/food-items/calculate-nutrition", headers=self.headers, json={"food_item_id": "food-egg"}
        )
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post(
            "/api/food-items/calculate-nutrition",
            headers=self.headers,
            json={"food_item_id": "food-nope", "quantity": 1},
        )
        self.assertEqual(resp.status_code, 404)

    def test_create_update_delete(self) -> None:
        payload = {
            "name": "Protein Flapjack",
            "category": "snacks",
            "base_quantity": 1,
            "base_unit": "piece",
            "calories": 230,
            "protein": 15,
            "carbs": 24,
            "fats": 8,
            "brand": "Gym Bakery",
            "fiber": 3,
            "search_tags": ["bar"],
        }
        resp = self.client.post("/api/food-items", headers=self.headers, json=payload)
        self.assertEqual(resp.status_code, 201, resp.text)
        created = resp.json()
        food_id = created["id"]
        self.assertEqual(created["fiber"], 3)
        self.assertEqual(created["brand"], "Gym Bakery")
        self.assertFalse(created["is_vegan"])

        ids = [f["id"] for f in self._search("query=Gym Bakery")["items"]]
        self.assertEqual(ids, [food_id])

        resp = self.client.put(
            f"/api/food-items/{food_id}",
            headers=self.headers,
            json={"calories": 210, "is_vegan": True},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        updated = resp.json()
        self.assertEqual(updated["calories"], 210)
        self.assertTrue(updated["is_vegan"])
        self.assertEqual(updated["fiber"], 3)
        self.assertEqual(updated["name"], "Protein Flapjack")

        resp = self.client.delete(f"/api/food-items/{food_id}", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Food item deleted successfully")
        self.assertEqual(self.client.get(f"/api/food-items/{food_id}", headers=self.headers).status_code, 404)
        self.assertEqual(self.client.delete(f"/api/food-items/{food_id}", headers=self.headers).status_code, 404)
        self.assertEqual(
            self.client.put(f"/api/food-items/{food_id}", headers=self.headers, json={"calories": 1}).status_code,
            404,
        )

    def test_row_missing_after_write(self) -> None:
        payload = {"name": "Ghost Bar", "category": "snacks", "calories": 100, "protein": 1, "carbs": 1, "fats": 1}
        with patch.object(self.storage, "get_food_item", return_value=None):
            resp = self.client.post("/api/food-items", headers=self.headers, json=payload)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["detail"], "Failed to create food item")

        current = self.storage.get_food_item("food-egg")
        with patch.object(self.storage, "get_food_item", side_effect=[current, None]):
            resp = self.client.put("/api/food-items/food-egg", headers=self.headers, json={"calories": 72})
        self.assertEqual(resp.status_code, 404)

    def test_create_validation(self) -> None:
        base = {"name": "Mystery", "category": "snacks", "calories": 100, "protein": 1, "carbs": 1, "fats": 1}
        for bad in (
            dict(base, category="space-food"),
            dict(base, calories=-1),
            {k: v for k, v in base.items() if k != "protein"},
        ):
            with self.subTest(body=bad):
                resp = self.client.post("/api/food-items", headers=self.headers, json=bad)
                self.assertEqual(resp.status_code, 422)


if __name__ == "__main__":
    unittest.main()
