import json
import logging

import pytest

from fixtures_seed import auth
from storage_api.api.endpoints import manager_storage_listings as endpoints
from storage_api.core.errors import GENERIC_ERROR_MESSAGE, DataAccessError, error_response
from storage_api.main import create_app


def test_error_response_shows_message_outside_production(caplog):
    with caplog.at_level(logging.ERROR):
        resp = error_response(RuntimeError("disk on fire"), is_production=False)

    assert resp.status_code == 500
    assert json.loads(resp.body) == {"error": "disk on fire"}
    assert "disk on fire" in caplog.text


def test_error_response_hides_message_in_production():
    resp = error_response(RuntimeError("disk on fire"), 502, is_production=True)
    assert resp.status_code == 502
    assert json.loads(resp.body) == {"error": GENERIC_ERROR_MESSAGE}


async def _failing_lookup(*args, **kwargs):
    raise DataAccessError("Failed to get storage listings")


@pytest.mark.asyncio
async def test_repository_failure_is_500_with_message(client, seed_world, monkeypatch):
    monkeypatch.setattr(endpoints, "get_storage_listings_by_kitchen", _failing_lookup)

    r = await client.get("/api/manager/kitchens/12/storage-listings", headers=auth(seed_world["manager"]))
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to get storage listings"}


@pytest.mark.asyncio
async def test_repository_failure_is_generic_in_production(client_for, seed_world, monkeypatch):
    monkeypatch.setattr(endpoints, "get_storage_listings_by_kitchen", _failing_lookup)

    async with client_for(create_app(is_production=True)) as ac:
        r = await ac.get("/api/manager/kitchens/12/storage-listings", headers=auth(seed_world["manager"]))

    assert r.status_code == 500
    assert r.json() == {"error": GENERIC_ERROR_MESSAGE}


@pytest.mark.asyncio
async def test_malformed_body_uses_error_envelope(client, seed_world):
    r = await client.post(
        "/api/manager/storage-listings",
        json={"kitchenId": 12, "name": "x", "storageType": "dry", "pricingModel": "daily", "basePrice": "lots"},
        headers=auth(seed_world["manager"]),
    )
    assert r.status_code == 400
    assert set(r.json()) == {"error"}


@pytest.mark.asyncio
async def test_openapi_documents_error_envelope(client):
    r = await client.get("/openapi.json")
    assert r.status_code == 200

    doc = r.json()
    assert doc["components"]["schemas"]["ErrorResponse"]["required"] == ["error"]

    responses = doc["paths"]["/api/manager/storage-listings/{listing_id}"]["get"]["responses"]
    for code in ("400", "401", "403", "404"):
        schema = responses[code]["content"]["application/json"]["schema"]
        assert schema == {"$ref": "#/components/schemas/ErrorResponse"}
