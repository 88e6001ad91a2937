"""
Plan snapshot assembly.

This is the entry point most callers should use: one call returns the
personal plan, the governing entitlement and the derived policies.
"""

from typing import Any, Mapping

from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.plans.models.domain.entitlements import ResolvedEntitlements
from packages.plans.models.domain.enums import CanonicalPlan
from packages.plans.models.domain.plans import (
    PlanResolutionInput,
    ResolvedPlanSnapshot,
)
from packages.plans.services.entitlement_resolver import resolve_effective_entitlements
from packages.plans.services.personal_plan_resolver import resolve_personal_plan
from packages.plans.services.policy_engine import resolve_policies_for_entitlements

logger = get_logger(__name__)


@trace_span
def resolve_plan_snapshot(resolution_input: PlanResolutionInput) -> ResolvedPlanSnapshot:
    """Resolve personal plan, effective entitlement and policies in one pass."""
    personal_plan = resolve_personal_plan(resolution_input)
    effective = resolve_effective_entitlements(resolution_input)

    return ResolvedPlanSnapshot(
        personal_plan=personal_plan,
        effective=effective,
        policies=resolve_policies_for_entitlements(effective),
    )


class PlanResolutionService:
    """Service facade over plan resolution for request handlers."""

    @trace_span
    def resolve_snapshot(self, resolution_input: PlanResolutionInput) -> ResolvedPlanSnapshot:
        """Resolve a full snapshot and log which source won."""
        snapshot = resolve_plan_snapshot(resolution_input)
        logger.debug(
            f"Resolved plan snapshot for user {resolution_input.user_id}",
            extra={
                "user_id": resolution_input.user_id,
                "personal_plan": snapshot.personal_plan.value,
                "source_id": snapshot.effective.source_id,
                "model_tier": snapshot.effective.model_tier.value,
            },
        )
        return snapshot

    @trace_span
    def resolve_snapshot_from_payload(
        self, payload: Mapping[str, Any]
    ) -> ResolvedPlanSnapshot:
        """
        Validate a raw payload and resolve it.

        Accepts snake_case or camelCase keys. Raises pydantic.ValidationError
        for malformed payloads before any resolution happens.
        """
        return self.resolve_snapshot(PlanResolutionInput.model_validate(payload))

    @trace_span
    def resolve_personal_plan(self, resolution_input: PlanResolutionInput) -> CanonicalPlan:
        return resolve_personal_plan(resolution_input)

    @trace_span
    def resolve_effective_entitlements(
        self, resolution_input: PlanResolutionInput
    ) -> ResolvedEntitlements:
        return resolve_effective_entitlements(resolution_input)
