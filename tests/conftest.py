import pytest

from paystack_gateway.configuration import configure, reset_config


@pytest.fixture(autouse=True)
def paystack_config(tmp_path):
    config = reset_config()
    configure(secret_key="sk_test_secret", cache_dir=tmp_path / "cache")
    yield config
    reset_config()
