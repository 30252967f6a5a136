import pytest

from fixtures_seed import auth


@pytest.mark.asyncio
async def test_me_returns_actor(client, seed_world):
    r = await client.get("/api/me", headers=auth(seed_world["manager"]))
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["userId"] == 7
    assert body["role"] == "manager"
    assert body["apiKeyId"] == seed_world["manager"]["api_key_id"]


@pytest.mark.asyncio
async def test_missing_api_key_is_401(client, seed_world):
    r = await client.get("/api/manager/kitchens/12/storage-listings")
    assert r.status_code == 401
    assert r.json() == {"error": "Missing X-API-Key"}


@pytest.mark.asyncio
async def test_unknown_api_key_is_401(client, seed_world):
    r = await client.get("/api/me", headers={"X-API-Key": "sk_nope_nope"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid API key"}


@pytest.mark.asyncio
async def test_chef_cannot_use_manager_routes(client, seed_world):
    r = await client.get("/api/manager/kitchens/12/storage-listings", headers=auth(seed_world["chef"]))
    assert r.status_code == 403
    assert r.json() == {"error": "Manager access required"}


@pytest.mark.asyncio
async def test_manager_cannot_use_chef_routes(client, seed_world):
    r = await client.get("/api/chef/kitchens/12/storage-listings", headers=auth(seed_world["manager"]))
    assert r.status_code == 403
    assert r.json() == {"error": "Chef access required"}
