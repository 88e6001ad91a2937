"""Domain models for plans."""

from packages.plans.models.domain.enums import (
    CanonicalPlan,
    OrganizationModelTier,
    EntitlementSourceType,
    PlanResolutionErrorReason,
)
from packages.plans.models.domain.entitlements import (
    EntitlementLimits,
    OrganizationEntitlementSource,
    ResolvedEntitlements,
)
from packages.plans.models.domain.plans import (
    ModelRouting,
    VoicePlanConfig,
    PlanCatalogEntry,
    PlanResolutionInput,
    ResolvedPlanPolicies,
    ResolvedPlanSnapshot,
)

__all__ = [
    # Enums
    "CanonicalPlan",
    "OrganizationModelTier",
    "EntitlementSourceType",
    "PlanResolutionErrorReason",
    # Entitlements
    "EntitlementLimits",
    "OrganizationEntitlementSource",
    "ResolvedEntitlements",
    # Plans
    "ModelRouting",
    "VoicePlanConfig",
    "PlanCatalogEntry",
    "PlanResolutionInput",
    "ResolvedPlanPolicies",
    "ResolvedPlanSnapshot",
]
