import hashlib
import hmac
import json

from paystack_gateway.configuration import configure
from paystack_gateway.webhooks import WebhookResponse, parse_webhook, signature, valid_ip, valid_webhook

BODY = json.dumps({"event": "charge.success", "data": {"reference": "ref_1", "amount": 5000}})


def sign(body, secret="sk_test_secret"):
    return hmac.new(secret.encode(), body.encode(), hashlib.sha512).hexdigest()


class TestValidWebhook:
    def test_valid_signature(self):
        assert valid_webhook({"X-Paystack-Signature": sign(BODY)}, BODY)

    def test_header_lookup_is_case_insensitive(self):
        assert valid_webhook({"x-paystack-signature": sign(BODY)}, BODY)

    def test_bytes_body(self):
        assert valid_webhook({"X-Paystack-Signature": sign(BODY)}, BODY.encode())

    def test_explicit_secret(self):
        assert valid_webhook({"X-Paystack-Signature": sign(BODY, "sk_live_other")}, BODY, secret_key="sk_live_other")

    def test_tampered_body(self):
        assert not valid_webhook({"X-Paystack-Signature": sign(BODY)}, BODY.replace("5000", "1"))

    def test_signature_not_normalized(self):
        assert not valid_webhook({"X-Paystack-Signature": sign(BODY).upper()}, BODY)

    def test_truncated_or_extended_signature_rejected(self):
        assert not valid_webhook({"X-Paystack-Signature": sign(BODY)[:-1]}, BODY)
        assert not valid_webhook({"X-Paystack-Signature": sign(BODY) + "0"}, BODY)

    def test_missing_or_empty_header(self):
        assert not valid_webhook({}, BODY)
        assert not valid_webhook({"X-Paystack-Signature": ""}, BODY)

    def test_missing_secret(self):
        configure(secret_key=None)
        assert not valid_webhook({"X-Paystack-Signature": sign(BODY)}, BODY)

    def test_signature_helper(self):
        assert signature(BODY, "sk_test_secret") == sign(BODY)


class TestValidIp:
    def test_paystack_ips(self):
        assert valid_ip("52.31.139.75")
        assert valid_ip("52.49.173.169")
        assert valid_ip("52.214.14.220")

    def test_other_ips(self):
        assert not valid_ip("127.0.0.1")
        assert not valid_ip("52.31.139.76")

    def test_unparseable(self):
        assert not valid_ip("not-an-ip")
        assert not valid_ip("")


class TestParseWebhook:
    def test_from_string(self):
        webhook = parse_webhook(BODY)
        assert isinstance(webhook, WebhookResponse)
        assert webhook.event == "charge.success"
        assert webhook.data.reference == "ref_1"

    def test_from_mapping(self):
        assert parse_webhook({"event": "transfer.success", "data": {}}).event == "transfer.success"
