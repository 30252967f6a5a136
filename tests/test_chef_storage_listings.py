import pytest

from fixtures_seed import auth, create_user_with_key
from storage_api.api.endpoints import chef_storage_listings as endpoints


@pytest.mark.asyncio
async def test_chef_sees_only_approved_or_active_and_enabled(client, seed_world):
    r = await client.get("/api/chef/kitchens/12/storage-listings", headers=auth(seed_world["chef"]))
    assert r.status_code == 200, r.text

    rows = r.json()
    assert {row["name"] for row in rows} == {"Dry Shelf A", "Cold Room"}
    for row in rows:
        assert row["status"] in ("approved", "active")
        assert row["isActive"] is True


@pytest.mark.asyncio
async def test_chef_is_not_scoped_to_a_location(client, seed_world):
    r = await client.get("/api/chef/kitchens/13/storage-listings", headers=auth(seed_world["chef"]))
    assert r.status_code == 200
    assert [row["name"] for row in r.json()] == ["Pastry Fridge"]


@pytest.mark.asyncio
async def test_chef_gets_empty_list_for_kitchen_without_listings(client, seed_world):
    r = await client.get("/api/chef/kitchens/999/storage-listings", headers=auth(seed_world["chef"]))
    assert r.status_code == 200
    assert r.json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_id", ["abc", "0", "-1"])
async def test_chef_malformed_kitchen_id(client, seed_world, monkeypatch, raw_id):
    async def _boom(*args, **kwargs):
        raise AssertionError("repository should not be called")

    monkeypatch.setattr(endpoints, "get_storage_listings_by_kitchen", _boom)

    r = await client.get(f"/api/chef/kitchens/{raw_id}/storage-listings", headers=auth(seed_world["chef"]))
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid kitchen ID"}


@pytest.mark.asyncio
async def test_scenario_manager_owner_other_manager_and_chef(client, seed_world):
    url = "/api/{role}/kitchens/12/storage-listings"

    r = await client.get(url.format(role="manager"), headers=auth(seed_world["manager"]))
    assert r.status_code == 200
    assert len(r.json()) == 5

    r = await client.get(url.format(role="manager"), headers=auth(seed_world["other_manager"]))
    assert r.status_code == 403

    r = await client.get(url.format(role="chef"), headers=auth(seed_world["chef"]))
    assert r.status_code == 200
    assert len(r.json()) == 2


@pytest.mark.asyncio
async def test_admin_can_browse_chef_listings(client, db_session, seed_world):
    admin = await create_user_with_key(db_session, user_id=30, username="admin-30", role="admin")
    await db_session.commit()

    r = await client.get("/api/chef/kitchens/12/storage-listings", headers=auth(admin))
    assert r.status_code == 200, r.text
    assert {row["name"] for row in r.json()} == {"Dry Shelf A", "Cold Room"}
