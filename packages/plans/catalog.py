"""Static plan catalog: limits, retention, model routing and voice policy per plan."""

from types import MappingProxyType
from typing import Mapping

from packages.plans.models.domain.entitlements import EntitlementLimits
from packages.plans.models.domain.enums import CanonicalPlan, OrganizationModelTier
from packages.plans.models.domain.plans import (
    ModelRouting,
    PlanCatalogEntry,
    VoicePlanConfig,
)

UNLIMITED = float("inf")

HOUR_MS = 60 * 60 * 1000

FLASH_MODEL_ID = "google/gemini-2.0-flash-001"
FLASH_LITE_MODEL_ID = "google/gemini-2.0-flash-lite-001"
MAINTENANCE_MODEL_ID = FLASH_LITE_MODEL_ID


PLAN_CATALOG: Mapping[CanonicalPlan, PlanCatalogEntry] = MappingProxyType(
    {
        CanonicalPlan.GUEST: PlanCatalogEntry(
            model_tier=OrganizationModelTier.TRIAL,
            limits=EntitlementLimits(
                max_requests_per_day=10,
                max_input_tokens_per_day=20_000,
                max_output_tokens_per_day=10_000,
                max_cost_per_day=0.05,
                max_context_messages=5,
            ),
            attachment_retention_days=1,
            model_routing=ModelRouting(
                orchestrator=FLASH_LITE_MODEL_ID,
                sub_agent=FLASH_LITE_MODEL_ID,
                maintenance=MAINTENANCE_MODEL_ID,
            ),
            voice=VoicePlanConfig(
                enabled=False,
                base_probability=0,
                decay_factor=0,
                cap_window_ms=0,
                max_per_window=0,
            ),
        ),
        CanonicalPlan.TRIAL: PlanCatalogEntry(
            model_tier=OrganizationModelTier.TRIAL,
            limits=EntitlementLimits(
                max_requests_per_day=3,
                max_input_tokens_per_day=100_000,
                max_output_tokens_per_day=50_000,
                max_cost_per_day=0.5,
                max_context_messages=10,
            ),
            attachment_retention_days=7,
            model_routing=ModelRouting(
                orchestrator=FLASH_LITE_MODEL_ID,
                sub_agent=FLASH_LITE_MODEL_ID,
                maintenance=MAINTENANCE_MODEL_ID,
            ),
            voice=VoicePlanConfig(
                enabled=False,
                base_probability=0.3,
                decay_factor=0.7,
                cap_window_ms=6 * HOUR_MS,
                max_per_window=3,
            ),
        ),
        CanonicalPlan.BASIC: PlanCatalogEntry(
            model_tier=OrganizationModelTier.BASIC,
            limits=EntitlementLimits(
                max_requests_per_day=50,
                max_input_tokens_per_day=500_000,
                max_output_tokens_per_day=250_000,
                max_cost_per_day=3,
                max_context_messages=15,
            ),
            attachment_retention_days=30,
            model_routing=ModelRouting(
                orchestrator=FLASH_MODEL_ID,
                sub_agent=FLASH_LITE_MODEL_ID,
                maintenance=MAINTENANCE_MODEL_ID,
            ),
            voice=VoicePlanConfig(
                enabled=True,
                base_probability=0.5,
                decay_factor=0.8,
                cap_window_ms=12 * HOUR_MS,
                max_per_window=10,
            ),
        ),
        CanonicalPlan.BASIC_PLUS: PlanCatalogEntry(
            model_tier=OrganizationModelTier.BASIC_PLUS,
            limits=EntitlementLimits(
                max_requests_per_day=50,
                max_input_tokens_per_day=800_000,
                max_output_tokens_per_day=400_000,
                max_cost_per_day=5,
                max_context_messages=30,
            ),
            attachment_retention_days=60,
            model_routing=ModelRouting(
                orchestrator=FLASH_MODEL_ID,
                sub_agent=FLASH_MODEL_ID,
                maintenance=MAINTENANCE_MODEL_ID,
            ),
            voice=VoicePlanConfig(
                enabled=True,
                base_probability=0.6,
                decay_factor=0.85,
                cap_window_ms=12 * HOUR_MS,
                max_per_window=20,
            ),
        ),
        CanonicalPlan.PRO: PlanCatalogEntry(
            model_tier=OrganizationModelTier.PRO,
            limits=EntitlementLimits(
                max_requests_per_day=100,
                max_input_tokens_per_day=2_000_000,
                max_output_tokens_per_day=1_000_000,
                max_cost_per_day=15,
                max_context_messages=100,
            ),
            attachment_retention_days=180,
            model_routing=ModelRouting(
                orchestrator=FLASH_LITE_MODEL_ID,
                sub_agent=FLASH_LITE_MODEL_ID,
                maintenance=MAINTENANCE_MODEL_ID,
            ),
            voice=VoicePlanConfig(
                enabled=True,
                base_probability=0.8,
                decay_factor=0.9,
                cap_window_ms=36 * HOUR_MS,
                max_per_window=50,
            ),
        ),
        CanonicalPlan.ADMIN: PlanCatalogEntry(
            model_tier=OrganizationModelTier.ADMIN,
            limits=EntitlementLimits(
                max_requests_per_day=UNLIMITED,
                max_input_tokens_per_day=UNLIMITED,
                max_output_tokens_per_day=UNLIMITED,
                max_cost_per_day=UNLIMITED,
                max_context_messages=100,
            ),
            attachment_retention_days=365 * 10,
            model_routing=ModelRouting(
                orchestrator=FLASH_LITE_MODEL_ID,
                sub_agent=FLASH_LITE_MODEL_ID,
                maintenance=MAINTENANCE_MODEL_ID,
            ),
            voice=VoicePlanConfig(
                enabled=True,
                base_probability=1,
                decay_factor=1,
                cap_window_ms=36 * HOUR_MS,
                max_per_window=UNLIMITED,
            ),
        ),
    }
)

# Ascending: a higher rank always beats a lower one, whatever the limits
MODEL_TIER_PRIORITY: Mapping[OrganizationModelTier, int] = MappingProxyType(
    {
        OrganizationModelTier.TRIAL: 0,
        OrganizationModelTier.BASIC: 1,
        OrganizationModelTier.BASIC_PLUS: 2,
        OrganizationModelTier.PRO: 3,
        OrganizationModelTier.ENTERPRISE: 4,
        OrganizationModelTier.ADMIN: 5,
    }
)

# ENTERPRISE borrows PRO's catalog entry for routing; it never borrows PRO's limits
MODEL_TIER_TO_CANONICAL_PLAN: Mapping[OrganizationModelTier, CanonicalPlan] = (
    MappingProxyType(
        {
            OrganizationModelTier.TRIAL: CanonicalPlan.TRIAL,
            OrganizationModelTier.BASIC: CanonicalPlan.BASIC,
            OrganizationModelTier.BASIC_PLUS: CanonicalPlan.BASIC_PLUS,
            OrganizationModelTier.PRO: CanonicalPlan.PRO,
            OrganizationModelTier.ENTERPRISE: CanonicalPlan.PRO,
            OrganizationModelTier.ADMIN: CanonicalPlan.ADMIN,
        }
    )
)


def get_plan_config(plan: CanonicalPlan) -> PlanCatalogEntry:
    """Get the catalog entry for a canonical plan."""
    return PLAN_CATALOG[plan]


def get_model_tier_priority(model_tier: OrganizationModelTier) -> int:
    """Get the routing priority rank of a model tier."""
    return MODEL_TIER_PRIORITY[model_tier]


def model_tier_to_canonical_plan(model_tier: OrganizationModelTier) -> CanonicalPlan:
    """Map a model tier onto the canonical plan whose catalog entry it uses."""
    return MODEL_TIER_TO_CANONICAL_PLAN[model_tier]
