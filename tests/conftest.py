"""
Shared fixtures.

Provides decoded gateway payloads loaded from tests/fixtures.
"""

import json
from pathlib import Path

import pytest


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_payload(name: str) -> dict:
    """Load a decoded gateway response body from the fixtures directory."""
    with open(FIXTURES_DIR / f"{name}.json") as f:
        return json.load(f)


@pytest.fixture
def sale_payload() -> dict:
    """Body of a successful sale response."""
    return load_payload("transaction_sale")


@pytest.fixture
def api_error_payload() -> dict:
    """Body of a structured gateway error response."""
    return load_payload("api_error_response")
