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


class TestAuthAndProfile(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="fitplan-test-"))
        data_root = cls._tmp / "data"
        os.environ["FITPLAN_DATA_ROOT"] = str(data_root)
        os.environ["FITPLAN_DB_PATH"] = str(data_root / "fitplan.db")
        os.environ["FITPLAN_JWT_SECRET"] = "test-secret"

        # Ensure settings/app reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name.startswith("fitplan."):
                sys.modules.pop(name, None)

        from fitplan.api import app  # noqa: WPS433 (import inside test for env control)
        from fitplan.auth import security  # noqa: WPS433

        cls.security = security

        cls.app = app
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        try:
            cls.client.close()
        except Exception:
            pass
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _register(self, email: str, password: str = "password123", **extra) -> dict:
        resp = self.client.post(
            "/api/auth/register",
            json={"name": "Sam", "email": email, "password": password, **extra},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def test_health_is_public(self) -> None:
        unauth = TestClient(self.app)
        resp = unauth.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")
        unauth.close()

    def test_auth_required(self) -> None:
        unauth = TestClient(self.app)
        for path in ("/api/auth/me", "/api/users/profile", "/api/plans/today", "/api/progress"):
            with self.subTest(path=path):
                self.assertEqual(unauth.get(path).status_code, 401)
        resp = unauth.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
        self.assertEqual(resp.status_code, 401)
        unauth.close()

    def test_register_and_login(self) -> None:
        payload = self._register("Sam@Example.com", age=30, height=180, weight=80)
        self.assertEqual(payload["user"]["email"], "sam@example.com")
        self.assertEqual(payload["user"]["weight"], 80)
        self.assertTrue(payload["token"])

        resp = self.client.post(
            "/api/auth/register",
            json={"name": "Sam", "email": "sam@example.com", "password": "password123"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "Email already registered")

        resp = self.client.post(
            "/api/auth/register",
            json={"name": "Sam", "email": "not-an-email", "password": "password123"},
        )
        self.assertEqual(resp.status_code, 400)

        resp = self.client.post("/api/auth/login", json={"email": "sam@example.com", "password": "wrong-pass"})
        self.assertEqual(resp.status_code, 401)

        resp = self.client.post("/api/auth/login", json={"email": "SAM@example.com", "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        token = resp.json()["token"]

        fresh = TestClient(self.app)
        resp = fresh.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["email"], "sam@example.com")
        fresh.close()

    def test_cookie_session_and_logout(self) -> None:
        client = TestClient(self.app)
        resp = client.post(
            "/api/auth/register",
            json={"name": "Cookie", "email": "cookie@example.com", "password": "password123"},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(client.get("/api/auth/me").status_code, 200)

        self.assertEqual(client.post("/api/auth/logout").status_code, 200)
        client.cookies.clear()
        self.assertEqual(client.get("/api/auth/me").status_code, 401)
        client.close()

    def test_session_token_and_cookie(self) -> None:
        client = TestClient(self.app)
        resp = client.post(
            "/api/auth/register",
            json={"name": "Tok", "email": "tok@example.com", "password": "password123"},
        )
        self.assertEqual(resp.status_code, 200)
        cookie = resp.headers["set-cookie"].lower()
        client.close()
        for part in ("fitplan_token=", "httponly", "max-age=604800", "path=/", "samesite=lax"):
            self.assertIn(part, cookie)

        body = resp.json()
        claims = self.security.decode_token(body["token"])
        self.assertEqual(claims["iss"], "fitplan")
        self.assertEqual(claims["sub"], body["user"]["id"])
        self.assertEqual((claims["email"], claims["name"]), ("tok@example.com", "Tok"))

        def me(token: str):
            return self.client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        with patch.object(self.security, "TOKEN_ISSUER", "elsewhere"):
            foreign = self.security.create_access_token(user_id=body["user"]["id"], email="tok@example.com")
        self.assertEqual(me(foreign).json()["detail"], "Invalid token")

        header, payload, signature = body["token"].split(".")
        self.assertEqual(me(f"{header}.{payload}x.{signature}").status_code, 401)

        with patch.object(self.security.settings, "token_ttl_days", -1):
            expired = self.security.create_access_token(user_id=body["user"]["id"], email="tok@example.com")
        resp = me(expired)
        self.assertEqual((resp.status_code, resp.json()["detail"]), (401, "Token expired"))

    def test_password_hash_format(self) -> None:
        stored = self.security.hash_password("s3cret-pass")
        self.assertTrue(stored.startswith("pbkdf2_sha256$200000$"))
        self.assertTrue(self.security.verify_password("s3cret-pass", stored))
        self.assertFalse(self.security.verify_password("wrong", stored))
        self.assertFalse(self.security.verify_password("s3cret-pass", "md5$abc"))
        self.assertFalse(self.security.verify_password("s3cret-pass", "pbkdf2_sha256$many$abc$def"))

    def test_profile_update_merges_settings(self) -> None:
        token = self._register("profile@example.com")["token"]
        headers = {"Authorization": f"Bearer {token}"}

        resp = self.client.get("/api/users/profile", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["settings"]["theme"], "light")

        resp = self.client.put(
            "/api/users/profile",
            headers=headers,
            json={"weight": 78.5, "settings": {"notifications": {"meal_reminders": False}, "theme": "dark"}},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        profile = resp.json()
        self.assertEqual(profile["weight"], 78.5)
        self.assertEqual(profile["name"], "Sam")
        self.assertEqual(profile["settings"]["theme"], "dark")
        self.assertFalse(profile["settings"]["notifications"]["meal_reminders"])
        self.assertTrue(profile["settings"]["notifications"]["enabled"])

        resp = self.client.put("/api/users/profile", headers=headers, json={"settings": {"theme": "blue"}})
        self.assertEqual(resp.status_code, 422)

    def test_delete_account(self) -> None:
        token = self._register("delete@example.com")["token"]
        headers = {"Authorization": f"Bearer {token}"}
        resp = self.client.post("/api/plans/select", headers=headers, json={"diet_plan_id": "lean-cut"})
        self.assertEqual(resp.status_code, 200)

        resp = self.client.delete("/api/users/profile", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Account deleted successfully")

        fresh = TestClient(self.app)
        resp = fresh.get("/api/auth/me", headers=headers)
        self.assertEqual(resp.status_code, 401)
        fresh.close()


if __name__ == "__main__":
    unittest.main()
