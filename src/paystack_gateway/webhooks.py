"""Webhook verification and parsing.

https://paystack.com/docs/payments/webhooks/
"""

import hashlib
import hmac
import ipaddress
import json
from typing import Any, Mapping

from paystack_gateway.configuration import get_config
from paystack_gateway.response import Response

# https://paystack.com/docs/payments/webhooks/#ip-whitelisting
WEBHOOK_IPS = ("52.31.139.75", "52.49.173.169", "52.214.14.220")
WEBHOOK_IP_ADDRESSES = tuple(ipaddress.ip_address(addr) for addr in WEBHOOK_IPS)

SIGNATURE_HEADER = "X-Paystack-Signature"


class WebhookResponse(Response):
    """Wrapper for webhook payloads sent by Paystack."""

    event: str | None = None


def parse_webhook(body: str | bytes | Mapping[str, Any]) -> WebhookResponse:
    if isinstance(body, (str, bytes)):
        body = json.loads(body)
    return WebhookResponse.model_validate(dict(body))


def signature(body: str | bytes, secret_key: str) -> str:
    """HMAC-SHA512 hex digest of the raw request body."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    return hmac.new(secret_key.encode("utf-8"), body, hashlib.sha512).hexdigest()


# https://paystack.com/docs/payments/webhooks/#signature-validation
def valid_webhook(
    request_headers: Mapping[str, str],
    request_body: str | bytes,
    secret_key: str | None = None,
) -> bool:
    request_signature = _header(request_headers, SIGNATURE_HEADER)
    if not request_signature:
        return False

    secret_key = secret_key or get_config().secret_key
    if not secret_key:
        return False

    return hmac.compare_digest(request_signature.encode("utf-8"), signature(request_body, secret_key).encode("utf-8"))


def valid_ip(request_ip: str) -> bool:
    try:
        address = ipaddress.ip_address(request_ip)
    except ValueError:
        return False
    return address in WEBHOOK_IP_ADDRESSES


def _header(headers: Mapping[str, str], name: str) -> str | None:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None
