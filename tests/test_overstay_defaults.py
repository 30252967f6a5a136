import pytest

from storage_api.models.platform_setting import PlatformSetting
from storage_api.services.overstay_defaults import (
    OVERSTAY_DEFAULTS,
    OverstayLocationDefaults,
    get_effective_penalty_config,
    get_overstay_location_defaults,
    get_overstay_platform_defaults,
    resolve_listing_overstay_fields,
)


def test_resolve_uses_location_then_literal_fallbacks():
    resolved = resolve_listing_overstay_fields({}, OverstayLocationDefaults(grace_period_days=5))
    assert resolved == {
        "overstay_grace_period_days": 5,
        "overstay_penalty_rate": 0.10,
        "overstay_max_penalty_days": 30,
        "overstay_policy_text": None,
    }


def test_resolve_never_overwrites_supplied_values():
    location = OverstayLocationDefaults(grace_period_days=5, penalty_rate=0.3, max_penalty_days=10, policy_text="loc")
    supplied = {
        "overstay_grace_period_days": 0,
        "overstay_penalty_rate": 0.0,
        "overstay_max_penalty_days": 60,
        "overstay_policy_text": "mine",
    }
    assert resolve_listing_overstay_fields(supplied, location) == supplied


def test_resolve_takes_policy_text_from_location():
    resolved = resolve_listing_overstay_fields({}, OverstayLocationDefaults(policy_text="Fees apply"))
    assert resolved["overstay_policy_text"] == "Fees apply"


@pytest.mark.asyncio
async def test_platform_defaults_fall_back_to_literals(db_session):
    assert await get_overstay_platform_defaults(db_session) == OVERSTAY_DEFAULTS


@pytest.mark.asyncio
async def test_platform_defaults_read_settings_and_skip_malformed(db_session):
    db_session.add_all([
        PlatformSetting(key="overstay_grace_period_days", value="2"),
        PlatformSetting(key="overstay_penalty_rate", value="not-a-number"),
        PlatformSetting(key="overstay_max_penalty_days", value="45"),
    ])
    await db_session.commit()

    defaults = await get_overstay_platform_defaults(db_session)
    assert defaults.grace_period_days == 2
    assert defaults.penalty_rate == OVERSTAY_DEFAULTS.penalty_rate
    assert defaults.max_penalty_days == 45


@pytest.mark.asyncio
async def test_location_defaults(db_session, seed_world):
    defaults = await get_overstay_location_defaults(db_session, 5)
    assert defaults.grace_period_days == 5
    assert defaults.penalty_rate is None
    assert defaults.is_using_defaults is False

    missing = await get_overstay_location_defaults(db_session, 999)
    assert missing == OverstayLocationDefaults()
    assert missing.is_using_defaults is True


@pytest.mark.asyncio
async def test_effective_config_layers_listing_over_location_over_platform(db_session, seed_world):
    config = await get_effective_penalty_config(
        db_session,
        listing_grace_period_days=None,
        listing_penalty_rate="0.15",
        listing_max_penalty_days=None,
        location_id=5,
    )
    assert config.grace_period_days == 5
    assert config.penalty_rate == pytest.approx(0.15)
    assert config.max_penalty_days == 30
    assert config.policy_text is None

    config = await get_effective_penalty_config(
        db_session,
        listing_grace_period_days=1,
        listing_penalty_rate=None,
        listing_max_penalty_days=None,
    )
    assert config.grace_period_days == 1
    assert config.penalty_rate == pytest.approx(0.10)
