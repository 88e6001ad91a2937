"""Derive routing, retention and voice policy from a plan or a resolved entitlement."""

from packages.plans.catalog import MODEL_TIER_TO_CANONICAL_PLAN, PLAN_CATALOG
from packages.plans.models.domain.entitlements import ResolvedEntitlements
from packages.plans.models.domain.enums import CanonicalPlan
from packages.plans.models.domain.plans import ResolvedPlanPolicies


def resolve_policies_for_plan(plan: CanonicalPlan) -> ResolvedPlanPolicies:
    """Get the policies of a canonical plan."""
    config = PLAN_CATALOG[plan]

    return ResolvedPlanPolicies(
        model_routing=config.model_routing,
        attachment_retention_days=config.attachment_retention_days,
        voice=config.voice,
    )


def resolve_policies_for_entitlements(
    entitlements: ResolvedEntitlements,
) -> ResolvedPlanPolicies:
    """
    Get the policies for a resolved entitlement.

    Routing follows the model tier (ENTERPRISE routes like PRO); retention and
    voice follow the entitlement's declared plan.
    """
    routing_config = PLAN_CATALOG[MODEL_TIER_TO_CANONICAL_PLAN[entitlements.model_tier]]
    plan_config = PLAN_CATALOG[entitlements.plan]

    return ResolvedPlanPolicies(
        model_routing=routing_config.model_routing,
        attachment_retention_days=plan_config.attachment_retention_days,
        voice=plan_config.voice,
    )
