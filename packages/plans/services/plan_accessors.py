"""Shortcuts for downstream consumers that need a single field of the snapshot."""

from types import MappingProxyType
from typing import Mapping, Optional

from packages.plans.catalog import PLAN_CATALOG
from packages.plans.models.domain.entitlements import EntitlementLimits
from packages.plans.models.domain.enums import CanonicalPlan, OrganizationModelTier
from packages.plans.models.domain.plans import (
    PlanResolutionInput,
    ResolvedPlanSnapshot,
    VoicePlanConfig,
)
from packages.plans.services.snapshot_service import resolve_plan_snapshot

ATTACHMENT_RETENTION_DAYS: Mapping[CanonicalPlan, int] = MappingProxyType(
    {plan: config.attachment_retention_days for plan, config in PLAN_CATALOG.items()}
)


def _resolve_snapshot(
    subscription_status: Optional[str] = None,
    user_role: Optional[str] = None,
    plan_id: Optional[str] = None,
    is_guest: bool = False,
    model_tier: Optional[OrganizationModelTier] = None,
) -> ResolvedPlanSnapshot:
    return resolve_plan_snapshot(
        PlanResolutionInput(
            subscription_status=subscription_status,
            user_role=user_role,
            plan_id=plan_id,
            is_guest=is_guest,
            model_tier=model_tier,
        )
    )


def get_rate_limits_for_user(
    subscription_status: Optional[str] = None,
    user_role: Optional[str] = None,
    plan_id: Optional[str] = None,
    is_guest: bool = False,
) -> EntitlementLimits:
    """Get the effective daily limits the rate limiter should enforce."""
    return _resolve_snapshot(
        subscription_status, user_role, plan_id, is_guest
    ).effective.limits


def get_attachment_retention_days(
    subscription_status: Optional[str] = None,
    user_role: Optional[str] = None,
    plan_id: Optional[str] = None,
    is_guest: bool = False,
) -> int:
    """Get how long uploaded attachments are kept for this user."""
    return _resolve_snapshot(
        subscription_status, user_role, plan_id, is_guest
    ).policies.attachment_retention_days


def get_effective_plan_id(
    subscription_status: Optional[str] = None,
    user_role: Optional[str] = None,
    plan_id: Optional[str] = None,
    is_guest: bool = False,
) -> CanonicalPlan:
    """Get the user's personal plan, used to pick upgrade suggestions."""
    return _resolve_snapshot(
        subscription_status, user_role, plan_id, is_guest
    ).personal_plan


def get_voice_plan_config(
    subscription_status: Optional[str] = None,
    user_role: Optional[str] = None,
    plan_id: Optional[str] = None,
    is_guest: bool = False,
    model_tier: Optional[OrganizationModelTier] = None,
) -> VoicePlanConfig:
    """Get the voice generation policy for this user."""
    return _resolve_snapshot(
        subscription_status, user_role, plan_id, is_guest, model_tier
    ).policies.voice
