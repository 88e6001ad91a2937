"""
Effective entitlement resolution.

Picks the single entitlement vector that governs a request: the personal
subscription, a direct model-tier override, or the best organization grant.
"""

from typing import List, Union

from common.core.otel_axiom_exporter import get_logger
from packages.plans.catalog import (
    MODEL_TIER_PRIORITY,
    MODEL_TIER_TO_CANONICAL_PLAN,
    PLAN_CATALOG,
)
from packages.plans.models.domain.entitlements import (
    OrganizationEntitlementSource,
    ResolvedEntitlements,
)
from packages.plans.models.domain.enums import (
    CanonicalPlan,
    EntitlementSourceType,
    OrganizationModelTier,
)
from packages.plans.models.domain.plans import PlanCatalogEntry, PlanResolutionInput
from packages.plans.services.personal_plan_resolver import resolve_personal_plan

logger = get_logger(__name__)

PERSONAL_ADMIN_SOURCE_ID = "personal-admin"
PERSONAL_SUBSCRIPTION_SOURCE_ID = "personal-subscription"
MODEL_TIER_OVERRIDE_SOURCE_ID = "model-tier-override"

# Compared in this order once model tiers are equal
LIMIT_COMPARISON_FIELDS = (
    "max_requests_per_day",
    "max_input_tokens_per_day",
    "max_output_tokens_per_day",
    "max_cost_per_day",
    "max_context_messages",
)

EntitlementVector = Union[
    ResolvedEntitlements, OrganizationEntitlementSource, PlanCatalogEntry
]


def build_personal_entitlements(resolution_input: PlanResolutionInput) -> ResolvedEntitlements:
    """Build the entitlement granted by the user's own plan."""
    plan = resolve_personal_plan(resolution_input)
    config = PLAN_CATALOG[plan]

    if plan == CanonicalPlan.ADMIN:
        return ResolvedEntitlements(
            source_type=EntitlementSourceType.PERSONAL,
            source_id=PERSONAL_ADMIN_SOURCE_ID,
            source_label="Admin role",
            plan=plan,
            model_tier=config.model_tier,
            limits=config.limits,
        )

    return ResolvedEntitlements(
        source_type=EntitlementSourceType.PERSONAL,
        source_id=PERSONAL_SUBSCRIPTION_SOURCE_ID,
        source_label="Guest" if plan == CanonicalPlan.GUEST else f"Personal {plan.value}",
        plan=plan,
        model_tier=config.model_tier,
        limits=config.limits,
    )


def build_model_tier_override(model_tier: OrganizationModelTier) -> ResolvedEntitlements:
    """Build the synthetic entitlement for a caller-supplied model tier."""
    plan = MODEL_TIER_TO_CANONICAL_PLAN[model_tier]
    config = PLAN_CATALOG[plan]

    return ResolvedEntitlements(
        source_type=EntitlementSourceType.ORGANIZATION,
        source_id=MODEL_TIER_OVERRIDE_SOURCE_ID,
        source_label=f"model-tier:{model_tier.value}",
        plan=plan,
        model_tier=model_tier,
        limits=config.limits,
    )


def map_organization_source(
    source: OrganizationEntitlementSource,
) -> ResolvedEntitlements:
    """Convert an organization grant into a candidate entitlement, limits untouched."""
    return ResolvedEntitlements(
        source_type=EntitlementSourceType.ORGANIZATION,
        source_id=source.source_id,
        source_label=source.source_label,
        plan=source.plan or MODEL_TIER_TO_CANONICAL_PLAN[source.model_tier],
        model_tier=source.model_tier,
        limits=source.limits,
    )


def compare_entitlement_vectors(a: EntitlementVector, b: EntitlementVector) -> float:
    """
    Compare two entitlement vectors.

    Returns a positive number when ``a`` is better, negative when ``b`` is
    better and zero when they are equal. Model tier decides first; limits are
    only consulted between equal tiers.
    """
    tier_diff = MODEL_TIER_PRIORITY[a.model_tier] - MODEL_TIER_PRIORITY[b.model_tier]
    if tier_diff != 0:
        return tier_diff

    for field_name in LIMIT_COMPARISON_FIELDS:
        a_value = getattr(a.limits, field_name)
        b_value = getattr(b.limits, field_name)
        if a_value != b_value:
            return a_value - b_value

    return 0


def compare_model_tiers(a: OrganizationModelTier, b: OrganizationModelTier) -> int:
    """Compare two model tiers by priority alone."""
    return MODEL_TIER_PRIORITY[a] - MODEL_TIER_PRIORITY[b]


def pick_best_entitlements(
    candidates: List[ResolvedEntitlements],
) -> ResolvedEntitlements:
    """
    Pick the strongest candidate.

    Full ties go to the smaller source_id by plain code-point comparison, so
    the winner does not depend on candidate order or locale.
    """
    if not candidates:
        raise ValueError("pick_best_entitlements requires at least one candidate")

    best = candidates[0]
    for candidate in candidates[1:]:
        vector_diff = compare_entitlement_vectors(candidate, best)
        if vector_diff > 0:
            best = candidate
        elif vector_diff == 0 and candidate.source_id < best.source_id:
            best = candidate

    return best


def resolve_effective_entitlements(resolution_input: PlanResolutionInput) -> ResolvedEntitlements:
    """
    Resolve the entitlement that governs this request.

    Guests and admins always keep their personal entitlement. A model-tier
    override wins over organization sources; otherwise the personal
    entitlement competes with every organization source.
    """
    personal = build_personal_entitlements(resolution_input)

    if resolution_input.is_guest or personal.plan == CanonicalPlan.ADMIN:
        return personal

    if resolution_input.model_tier is not None:
        return build_model_tier_override(resolution_input.model_tier)

    organization_sources = [
        map_organization_source(source) for source in resolution_input.organization_sources
    ]
    if not organization_sources:
        return personal

    best = pick_best_entitlements([personal, *organization_sources])
    logger.debug(
        f"Selected entitlement source {best.source_id} for user {resolution_input.user_id}",
        extra={
            "user_id": resolution_input.user_id,
            "source_id": best.source_id,
            "model_tier": best.model_tier.value,
            "candidate_count": len(organization_sources) + 1,
        },
    )
    return best
