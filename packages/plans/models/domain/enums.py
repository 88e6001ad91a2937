"""
Plan enums - strongly typed enumerations for plans, model tiers and entitlement sources.
"""

from enum import Enum


class CanonicalPlan(str, Enum):
    """
    Closed set of plans the resolution engine reasons about.

    Every plan has exactly one entry in the plan catalog.
    """

    GUEST = "GUEST"  # Unauthenticated visitor
    TRIAL = "TRIAL"  # Signed up, no active subscription
    BASIC = "BASIC"
    BASIC_PLUS = "BASIC_PLUS"
    PRO = "PRO"
    ADMIN = "ADMIN"  # Staff accounts, never plan-gated


class OrganizationModelTier(str, Enum):
    """
    Model tiers used for routing and priority.

    Superset of CanonicalPlan: ENTERPRISE has no plan of its own and is
    mapped to PRO for catalog lookups only.
    """

    TRIAL = "TRIAL"
    BASIC = "BASIC"
    BASIC_PLUS = "BASIC_PLUS"
    PRO = "PRO"
    ENTERPRISE = "ENTERPRISE"
    ADMIN = "ADMIN"


class EntitlementSourceType(str, Enum):
    """Where a resolved entitlement came from."""

    PERSONAL = "personal"
    ORGANIZATION = "organization"


class PlanResolutionErrorReason(str, Enum):
    """Reasons plan resolution refuses to produce a plan."""

    ACTIVE_WITH_INVALID_PLAN_ID = "ACTIVE_WITH_INVALID_PLAN_ID"
