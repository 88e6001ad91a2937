"""
Personal plan resolution.

Derives the user's own canonical plan from role, guest flag and the mirrored
subscription record. Fails closed when a paying subscription carries a plan
identifier nobody recognizes.
"""

from typing import Optional

from common.core.otel_axiom_exporter import get_logger
from packages.plans.exceptions import PlanResolutionError
from packages.plans.models.domain.enums import CanonicalPlan, PlanResolutionErrorReason
from packages.plans.models.domain.plans import PlanResolutionInput

logger = get_logger(__name__)

ADMIN_ROLES = frozenset({"ADMIN", "SUPER_ADMIN"})
ACTIVE_SUBSCRIPTION_STATUS = "ACTIVE"

# Checked in order; "pro" must win over "basic_plus"/"basic" when both appear
PLAN_ID_TOKENS = (
    ("pro", CanonicalPlan.PRO),
    ("basic_plus", CanonicalPlan.BASIC_PLUS),
    ("basic", CanonicalPlan.BASIC),
)


def is_admin_role(role: Optional[str]) -> bool:
    """Check whether a user role bypasses plan gating."""
    return role in ADMIN_ROLES


def parse_canonical_plan_from_plan_id(
    plan_id: Optional[str],
) -> Optional[CanonicalPlan]:
    """Interpret a raw billing plan identifier, or None when it names no known plan."""
    if not plan_id:
        return None

    normalized_plan_id = plan_id.lower()
    for token, plan in PLAN_ID_TOKENS:
        if token in normalized_plan_id:
            return plan

    return None


def resolve_personal_plan(resolution_input: PlanResolutionInput) -> CanonicalPlan:
    """
    Resolve the user's personal canonical plan.

    Admin role beats guest, guest beats subscription state, and an active
    subscription must carry a recognizable plan id.

    Raises:
        PlanResolutionError: ACTIVE_WITH_INVALID_PLAN_ID when the subscription
            is active but the plan id cannot be parsed.
    """
    if is_admin_role(resolution_input.user_role):
        return CanonicalPlan.ADMIN

    if resolution_input.is_guest:
        return CanonicalPlan.GUEST

    if resolution_input.subscription_status == ACTIVE_SUBSCRIPTION_STATUS:
        parsed = parse_canonical_plan_from_plan_id(resolution_input.plan_id)
        if parsed is None:
            logger.warning(
                f"Active subscription for user {resolution_input.user_id} has unrecognized plan id",
                extra={"user_id": resolution_input.user_id, "plan_id": resolution_input.plan_id},
            )
            raise PlanResolutionError(
                PlanResolutionErrorReason.ACTIVE_WITH_INVALID_PLAN_ID,
                "Active subscription requires a recognized planId",
            )
        return parsed

    return CanonicalPlan.TRIAL
