"""Shared fixtures for the client-side tests."""

import pytest

from modeldex.models import ModelRecord


def _record(name, pricing, function="Translation"):
    return {
        "name": name,
        "description": f"{name} in one sentence.",
        "longDescription": f"{name} described at length.",
        "primaryFunction": function,
        "websiteUrl": f"https://{name.lower()}.example",
        "pricingModel": pricing,
    }


@pytest.fixture
def make_payload():
    """Factory for one wire-format record."""
    return _record


@pytest.fixture
def translation_payload():
    return [_record("T1", "Free"), _record("T2", "Freemium")]


@pytest.fixture
def translation_records(translation_payload):
    return [ModelRecord.model_validate(p) for p in translation_payload]


@pytest.fixture
def mixed_records():
    """Six records with mixed pricing labels and casing."""
    payload = [
        _record("A", "Free"),
        _record("B", "Subscription"),
        _record("C", "free"),
        _record("D", "Freemium"),
        _record("E", "FREE"),
        _record("F", "One-time Purchase"),
    ]
    return [ModelRecord.model_validate(p) for p in payload]
