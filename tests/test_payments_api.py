# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import os
import shutil
import sys
import tempfile
import time
import unittest
from pathlib import Path
from unittest.mock import patch
from uuid import uuid4

from fastapi.testclient import TestClient

WEBHOOK_SECRET = "whsec_test"
_STRIPE_ENV = ("STRIPE_SECRET_KEY", "STRIPE_WEBHOOK_SECRET", "STRIPE_PRICE_BUNDLE", "STRIPE_PRICE_DIET_ONLY")


class TestPaymentsApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="fitplan-test-"))
        data_root = cls._tmp / "data"
        os.environ["FITPLAN_DATA_ROOT"] = str(data_root)
        os.environ["FITPLAN_DB_PATH"] = str(data_root / "fitplan.db")
        os.environ["FITPLAN_JWT_SECRET"] = "test-secret"
        os.environ["STRIPE_SECRET_KEY"] = "sk_test_dummy"
        os.environ["STRIPE_WEBHOOK_SECRET"] = WEBHOOK_SECRET
        os.environ["STRIPE_PRICE_BUNDLE"] = "price_bundle"
        os.environ.pop("STRIPE_PRICE_DIET_ONLY", None)

        for name in list(sys.modules.keys()):
            if name.startswith("fitplan."):
                sys.modules.pop(name, None)

        from fitplan.api import app  # noqa: WPS433 (import inside test for env control)
        from fitplan.config import settings  # noqa: WPS433
        from fitplan.payments import gateway, storage  # noqa: WPS433

        cls.app = app
        cls.settings = settings
        cls.gateway = gateway
        cls.storage = storage
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        try:
            cls.client.close()
        except Exception:
            pass
        for key in _STRIPE_ENV:
            os.environ.pop(key, None)
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _headers(self) -> dict:
        resp = self.client.post(
            "/api/auth/register",
            json={"name": "Payer", "email": f"{uuid4().hex[:10]}@example.com", "password": "password123"},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    def _webhook(self, event: dict, secret: str = WEBHOOK_SECRET):
        payload = json.dumps(event).encode("utf-8")
        timestamp = int(time.time())
        signature = self.gateway.sign_payload(payload, secret, timestamp)
        unauth = TestClient(self.app)
        try:
            return unauth.post(
                "/api/payments/webhook",
                content=payload,
                headers={"stripe-signature": f"t={timestamp},v1={signature}", "content-type": "application/json"},
            )
        finally:
            unauth.close()

    def _subscribe(self, headers: dict, customer: str, subscription: str):
        with patch.object(self.gateway, "create_customer", return_value={"id": customer}) as create_customer, \
                patch.object(
                    self.gateway,
                    "create_subscription",
                    return_value={
                        "id": subscription,
                        "status": "incomplete",
                        "current_period_end": 1_800_000_000,
                        "latest_invoice": {"payment_intent": {"client_secret": "pi_secret_123"}},
                    },
                ) as create_subscription:
            resp = self.client.post(
                "/api/payments/create-subscription",
                headers=headers,
                json={"plan_type": "bundle", "payment_method_id": "pm_card_visa"},
            )
        return resp, create_customer, create_subscription

    def test_pricing(self) -> None:
        resp = self.client.get("/api/payments/pricing", headers=self._headers())
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {"currency": "gbp", "plans": {"bundle": 499, "diet_only": 299, "workout_only": 249}, "upgrade": 299},
        )

    def test_payment_intent(self) -> None:
        headers = self._headers()
        resp = self.client.post("/api/payments/create-payment-intent", headers=headers, json={})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "Invalid plan type")
        resp = self.client.post("/api/payments/create-payment-intent", headers=headers, json={"plan_type": "gold"})
        self.assertEqual(resp.status_code, 422)

        intent = {"id": "pi_1", "client_secret": "pi_1_secret"}
        with patch.object(self.gateway, "create_payment_intent", return_value=intent) as create:
            resp = self.client.post(
                "/api/payments/create-payment-intent", headers=headers, json={"plan_type": "diet_only"}
            )
            self.assertEqual(resp.status_code, 200, resp.text)
            self.assertEqual(resp.json(), {"client_secret": "pi_1_secret", "amount": 299, "currency": "gbp"})
            self.assertEqual(create.call_args.kwargs["amount"], 299)

            resp = self.client.post(
                "/api/payments/create-payment-intent", headers=headers, json={"is_upgrade": True}
            )
            self.assertEqual(resp.json()["amount"], 299)
            self.assertEqual(create.call_args.kwargs["metadata"]["plan_type"], "upgrade")

    def test_gateway_errors(self) -> None:
        headers = self._headers()
        with patch.object(self.settings, "stripe_secret_key", None):
            resp = self.client.post(
                "/api/payments/create-payment-intent", headers=headers, json={"plan_type": "bundle"}
            )
        self.assertEqual(resp.status_code, 503)

        failing = self.gateway.PaymentGatewayError("card_declined")
        with patch.object(self.gateway, "create_payment_intent", side_effect=failing):
            resp = self.client.post(
                "/api/payments/create-payment-intent", headers=headers, json={"plan_type": "bundle"}
            )
        self.assertEqual(resp.status_code, 502)
        self.assertIn("card_declined", resp.json()["detail"])

        resp = self.client.post(
            "/api/payments/create-subscription",
            headers=headers,
            json={"plan_type": "diet_only", "payment_method_id": "pm_1"},
        )
        self.assertEqual(resp.status_code, 503)

    def test_subscription_lifecycle(self) -> None:
        headers = self._headers()
        self.assertEqual(self.client.get("/api/payments/subscription-status", headers=headers).json(), {"active": False})
        self.assertEqual(self.client.post("/api/payments/cancel-subscription", headers=headers).status_code, 404)
        resp = self.client.post(
            "/api/payments/update-payment-method", headers=headers, json={"payment_method_id": "pm_2"}
        )
        self.assertEqual(resp.status_code, 404)

        customer, subscription = f"cus_{uuid4().hex[:8]}", f"sub_{uuid4().hex[:8]}"
        resp, create_customer, create_subscription = self._subscribe(headers, customer, subscription)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"subscription_id": subscription, "client_secret": "pi_secret_123"})
        self.assertEqual(create_customer.call_args.kwargs["payment_method_id"], "pm_card_visa")
        self.assertEqual(
            create_subscription.call_args.kwargs, {"customer_id": customer, "price_id": "price_bundle"}
        )

        status = self.client.get("/api/payments/subscription-status", headers=headers).json()
        self.assertFalse(status["active"])
        self.assertEqual(status["status"], "incomplete")
        self.assertEqual(status["plan_type"], "bundle")
        self.assertTrue(status["current_period_end"].startswith("2027-01-15"))

        resp = self._webhook({"type": "invoice.payment_succeeded", "data": {"object": {"customer": customer}}})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"received": True})
        self.assertTrue(self.client.get("/api/payments/subscription-status", headers=headers).json()["active"])

        with patch.object(self.gateway, "attach_payment_method", return_value={}) as attach, \
                patch.object(self.gateway, "set_default_payment_method", return_value={}) as set_default:
            resp = self.client.post(
                "/api/payments/update-payment-method", headers=headers, json={"payment_method_id": "pm_2"}
            )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Payment method updated successfully")
        self.assertEqual(attach.call_args.kwargs, {"payment_method_id": "pm_2", "customer_id": customer})
        self.assertEqual(set_default.call_args.kwargs["customer_id"], customer)

        resp = self._webhook({"type": "customer.subscription.deleted", "data": {"object": {"id": subscription}}})
        self.assertEqual(resp.status_code, 200)
        status = self.client.get("/api/payments/subscription-status", headers=headers).json()
        self.assertEqual((status["active"], status["status"]), (False, "canceled"))

    def test_resubscribe_reuses_customer_and_cancel(self) -> None:
        headers = self._headers()
        customer = f"cus_{uuid4().hex[:8]}"
        self._subscribe(headers, customer, f"sub_{uuid4().hex[:8]}")
        subscription = f"sub_{uuid4().hex[:8]}"
        resp, create_customer, create_subscription = self._subscribe(headers, "cus_unused", subscription)
        self.assertEqual(resp.status_code, 200)
        create_customer.assert_not_called()
        self.assertEqual(create_subscription.call_args.kwargs["customer_id"], customer)

        with patch.object(self.gateway, "cancel_subscription", return_value={"status": "canceled"}) as cancel:
            resp = self.client.post("/api/payments/cancel-subscription", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Subscription cancelled successfully")
        self.assertEqual(cancel.call_args.kwargs, {"subscription_id": subscription})
        self.assertEqual(self.client.get("/api/payments/subscription-status", headers=headers).json()["status"], "canceled")

    def test_subscription_row_missing_after_save(self) -> None:
        headers = self._headers()
        with patch.object(self.storage, "get_subscription", return_value=None):
            resp, _, _ = self._subscribe(headers, f"cus_{uuid4().hex[:8]}", f"sub_{uuid4().hex[:8]}")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["detail"], "Failed to save subscription")

    def test_webhook_signature_checks(self) -> None:
        event = {"type": "invoice.payment_failed", "data": {"object": {"customer": "cus_nobody"}}}
        self.assertEqual(self._webhook(event).status_code, 200)

        resp = self._webhook(event, secret="whsec_other")
        self.assertEqual(resp.status_code, 400)
        self.assertTrue(resp.json()["detail"].startswith("Webhook Error:"))

        unauth = TestClient(self.app)
        resp = unauth.post("/api/payments/webhook", content=b"{}")
        unauth.close()
        self.assertEqual(resp.status_code, 400)

        with patch.object(self.settings, "stripe_webhook_secret", None):
            self.assertEqual(self._webhook(event).status_code, 503)


if __name__ == "__main__":
    unittest.main()
