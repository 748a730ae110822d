"""Unit tests for settings and bank client wiring"""

from payment_gateway.api import dependencies
from payment_gateway.config import Settings


def test_bank_simulator_url_default(monkeypatch):
    monkeypatch.delenv("BANK_SIMULATOR_URL", raising=False)

    assert Settings(_env_file=None).bank_simulator_url == "http://localhost:8080"


def test_bank_simulator_url_from_environment(monkeypatch):
    monkeypatch.setenv("BANK_SIMULATOR_URL", "http://bank.example:9")

    assert Settings(_env_file=None).bank_simulator_url == "http://bank.example:9"


def test_http_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")

    assert Settings(_env_file=None).http_timeout_seconds == 2.5


def test_get_bank_client_uses_settings(monkeypatch):
    monkeypatch.setattr(
        dependencies,
        "settings",
        Settings(_env_file=None, bank_simulator_url="http://bank.example:9/", http_timeout_seconds=1.5),
    )

    client = dependencies.get_bank_client()

    assert client.base_url == "http://bank.example:9"
    assert client.timeout == 1.5
