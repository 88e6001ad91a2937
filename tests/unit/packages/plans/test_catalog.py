"""Unit tests for the static plan catalog."""

import math

import pytest
from pydantic import ValidationError

from packages.plans.catalog import (
    FLASH_LITE_MODEL_ID,
    FLASH_MODEL_ID,
    MAINTENANCE_MODEL_ID,
    MODEL_TIER_PRIORITY,
    MODEL_TIER_TO_CANONICAL_PLAN,
    PLAN_CATALOG,
    get_model_tier_priority,
    get_plan_config,
    model_tier_to_canonical_plan,
)
from packages.plans.models.domain.enums import CanonicalPlan, OrganizationModelTier


class TestPlanCatalogContents:
    """Test catalog coverage and values."""

    def test_every_canonical_plan_has_an_entry(self):
        """Test that the catalog covers exactly the canonical plans."""
        assert set(PLAN_CATALOG) == set(CanonicalPlan)

    def test_maintenance_model_is_shared(self):
        """Test that every plan uses the same maintenance model."""
        for config in PLAN_CATALOG.values():
            assert config.model_routing.maintenance == MAINTENANCE_MODEL_ID

    def test_basic_plus_entry(self):
        """Test the BASIC_PLUS entry end to end."""
        config = get_plan_config(CanonicalPlan.BASIC_PLUS)
        assert config.model_tier == OrganizationModelTier.BASIC_PLUS
        assert config.limits.max_input_tokens_per_day == 800_000
        assert config.limits.max_context_messages == 30
        assert config.attachment_retention_days == 60
        assert config.model_routing.orchestrator == FLASH_MODEL_ID
        assert config.model_routing.sub_agent == FLASH_MODEL_ID
        assert config.voice.max_per_window == 20

    def test_whole_number_limits_are_integers(self):
        """Test that catalog counters keep their integer type on the wire."""
        config = get_plan_config(CanonicalPlan.BASIC)
        assert isinstance(config.limits.max_requests_per_day, int)
        assert isinstance(config.voice.max_per_window, int)
        payload = config.model_dump_json(by_alias=True)
        assert '"maxRequestsPerDay":50,' in payload
        assert '"maxPerWindow":10' in payload

    def test_guest_runs_on_trial_tier_without_voice(self):
        """Test that guests share the TRIAL tier but never get voice."""
        config = get_plan_config(CanonicalPlan.GUEST)
        assert config.model_tier == OrganizationModelTier.TRIAL
        assert config.voice.enabled is False
        assert config.attachment_retention_days == 1

    def test_admin_limits_are_unbounded(self):
        """Test that admin daily counters are infinite but context is bounded."""
        limits = get_plan_config(CanonicalPlan.ADMIN).limits
        assert math.isinf(limits.max_requests_per_day)
        assert math.isinf(limits.max_input_tokens_per_day)
        assert math.isinf(limits.max_output_tokens_per_day)
        assert math.isinf(limits.max_cost_per_day)
        assert limits.max_context_messages == 100
        assert get_plan_config(CanonicalPlan.ADMIN).attachment_retention_days == 3650

    def test_voice_windows_in_milliseconds(self):
        """Test voice window durations."""
        assert PLAN_CATALOG[CanonicalPlan.TRIAL].voice.cap_window_ms == 6 * 3_600_000
        assert PLAN_CATALOG[CanonicalPlan.BASIC].voice.cap_window_ms == 12 * 3_600_000
        assert PLAN_CATALOG[CanonicalPlan.PRO].voice.cap_window_ms == 36 * 3_600_000

    def test_pro_routes_to_flash_lite(self):
        """Test PRO routing identifiers."""
        routing = PLAN_CATALOG[CanonicalPlan.PRO].model_routing
        assert routing.orchestrator == FLASH_LITE_MODEL_ID
        assert routing.sub_agent == FLASH_LITE_MODEL_ID


class TestModelTierTables:
    """Test tier priority and tier-to-plan mapping."""

    def test_priority_is_strictly_ascending(self):
        """Test TRIAL < BASIC < BASIC_PLUS < PRO < ENTERPRISE < ADMIN."""
        ordered = [
            OrganizationModelTier.TRIAL,
            OrganizationModelTier.BASIC,
            OrganizationModelTier.BASIC_PLUS,
            OrganizationModelTier.PRO,
            OrganizationModelTier.ENTERPRISE,
            OrganizationModelTier.ADMIN,
        ]
        ranks = [get_model_tier_priority(tier) for tier in ordered]
        assert ranks == sorted(ranks)
        assert len(set(ranks)) == len(ranks)

    def test_enterprise_maps_to_pro(self):
        """Test that ENTERPRISE borrows PRO's catalog entry."""
        assert (
            model_tier_to_canonical_plan(OrganizationModelTier.ENTERPRISE)
            == CanonicalPlan.PRO
        )

    def test_other_tiers_map_to_themselves(self):
        """Test identity mapping for tiers that are also plans."""
        for tier in OrganizationModelTier:
            if tier == OrganizationModelTier.ENTERPRISE:
                continue
            assert MODEL_TIER_TO_CANONICAL_PLAN[tier].value == tier.value


class TestCatalogImmutability:
    """Test that the shared tables cannot be modified."""

    def test_catalog_mapping_is_read_only(self):
        """Test that entries cannot be replaced."""
        with pytest.raises(TypeError):
            PLAN_CATALOG[CanonicalPlan.TRIAL] = PLAN_CATALOG[CanonicalPlan.PRO]

    def test_priority_mapping_is_read_only(self):
        """Test that tier ranks cannot be changed."""
        with pytest.raises(TypeError):
            MODEL_TIER_PRIORITY[OrganizationModelTier.TRIAL] = 99

    def test_catalog_entries_are_frozen(self):
        """Test that nested limits cannot be mutated."""
        with pytest.raises(ValidationError):
            PLAN_CATALOG[CanonicalPlan.TRIAL].limits.max_requests_per_day = 1000
