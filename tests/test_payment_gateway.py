# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import unittest

from fitplan.payments.gateway import WebhookSignatureError, _flatten, construct_event, sign_payload

SECRET = "whsec_test"
TIMESTAMP = 1_700_000_000


def _event(event_type: str = "invoice.payment_succeeded") -> bytes:
    return json.dumps({"type": event_type, "data": {"object": {"customer": "cus_1"}}}).encode("utf-8")


class TestWebhookSignature(unittest.TestCase):
    def _header(self, payload: bytes, timestamp: int = TIMESTAMP, secret: str = SECRET) -> str:
        return f"t={timestamp},v1={sign_payload(payload, secret, timestamp)}"

    def test_valid_event(self) -> None:
        payload = _event()
        event = construct_event(payload, self._header(payload), SECRET, now=TIMESTAMP + 10)
        self.assertEqual(event["type"], "invoice.payment_succeeded")
        self.assertEqual(event["data"]["object"]["customer"], "cus_1")

    def test_any_matching_v1_signature_is_accepted(self) -> None:
        payload = _event()
        header = f"t={TIMESTAMP},v1=deadbeef,v1={sign_payload(payload, SECRET, TIMESTAMP)}"
        self.assertEqual(construct_event(payload, header, SECRET, now=TIMESTAMP)["type"], "invoice.payment_succeeded")

    def test_wrong_secret(self) -> None:
        payload = _event()
        with self.assertRaises(WebhookSignatureError):
            construct_event(payload, self._header(payload, secret="other"), SECRET, now=TIMESTAMP)

    def test_tampered_payload(self) -> None:
        header = self._header(_event())
        with self.assertRaises(WebhookSignatureError):
            construct_event(_event("customer.subscription.deleted"), header, SECRET, now=TIMESTAMP)

    def test_stale_timestamp(self) -> None:
        payload = _event()
        with self.assertRaises(WebhookSignatureError):
            construct_event(payload, self._header(payload), SECRET, tolerance=300, now=TIMESTAMP + 1000)

    def test_missing_or_malformed_header(self) -> None:
        payload = _event()
        for header in (None, "", "v1=abc", "t=notanumber,v1=abc", f"t={TIMESTAMP}"):
            with self.subTest(header=header):
                with self.assertRaises(WebhookSignatureError):
                    construct_event(payload, header, SECRET, now=TIMESTAMP)

    def test_payload_must_be_an_event(self) -> None:
        payload = b'{"id": "evt_1"}'
        with self.assertRaises(WebhookSignatureError):
            construct_event(payload, self._header(payload), SECRET, now=TIMESTAMP)


class TestFormEncoding(unittest.TestCase):
    def test_nested_keys(self) -> None:
        form = _flatten(
            {
                "customer": "cus_1",
                "items": [{"price": "price_1"}],
                "expand": ["latest_invoice.payment_intent"],
                "automatic_payment_methods": {"enabled": True},
                "skip": None,
            }
        )
        self.assertEqual(
            form,
            [
                ("customer", "cus_1"),
                ("items[0][price]", "price_1"),
                ("expand[0]", "latest_invoice.payment_intent"),
                ("automatic_payment_methods[enabled]", "true"),
            ],
        )


if __name__ == "__main__":
    unittest.main()
