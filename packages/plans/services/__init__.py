"""Plan resolution services."""

from packages.plans.services.personal_plan_resolver import (
    is_admin_role,
    parse_canonical_plan_from_plan_id,
    resolve_personal_plan,
)
from packages.plans.services.entitlement_resolver import (
    compare_entitlement_vectors,
    compare_model_tiers,
    pick_best_entitlements,
    resolve_effective_entitlements,
)
from packages.plans.services.policy_engine import (
    resolve_policies_for_entitlements,
    resolve_policies_for_plan,
)
from packages.plans.services.snapshot_service import (
    PlanResolutionService,
    resolve_plan_snapshot,
)

__all__ = [
    "is_admin_role",
    "parse_canonical_plan_from_plan_id",
    "resolve_personal_plan",
    "compare_entitlement_vectors",
    "compare_model_tiers",
    "pick_best_entitlements",
    "resolve_effective_entitlements",
    "resolve_policies_for_entitlements",
    "resolve_policies_for_plan",
    "PlanResolutionService",
    "resolve_plan_snapshot",
]
