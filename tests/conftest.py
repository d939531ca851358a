from pathlib import Path

import pytest


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)


@pytest.fixture(autouse=True)
def run_around_tests(monkeypatch):
    """Isolate every test from ambient mailer configuration and singletons."""
    for name in [
        "SHOPCART_MAILER_BACKEND",
        "SHOPCART_MAILER_HOST",
        "SHOPCART_MAILER_PORT",
        "SHOPCART_MAILER_USERNAME",
        "SHOPCART_MAILER_PASSWORD",
        "SHOPCART_MAILER_MANAGER_RECIPIENTS",
        "SHOPCART_MAILER_STORE_NAME",
    ]:
        monkeypatch.delenv(name, raising=False)

    from notifications.channel import reset_mailer
    from notifications.config import get_mailer_settings

    reset_mailer()
    get_mailer_settings.cache_clear()

    yield

    reset_mailer()
    get_mailer_settings.cache_clear()
