"""Paystack API client: generated endpoint modules on a shared request runtime."""

from paystack_gateway.api_error import ApiError
from paystack_gateway.cache import CacheOptions
from paystack_gateway.configuration import Configuration, configure, get_config, reset_config, set_config
from paystack_gateway.request import RequestModule, api_modules
from paystack_gateway.response import Response

# Webhooks
from paystack_gateway.webhooks import parse_webhook, valid_ip, valid_webhook

# API Modules
# Rewritten by paystack-codegen generate.
from paystack_gateway import customer
from paystack_gateway import miscellaneous
from paystack_gateway import transaction
from paystack_gateway import verification

# Extensions
from paystack_gateway.extensions import customer_extensions
from paystack_gateway.extensions import miscellaneous_extensions
from paystack_gateway.extensions import transaction_extensions
from paystack_gateway.extensions import verification_extensions
