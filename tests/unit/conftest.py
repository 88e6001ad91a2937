import pytest

from packages.plans.catalog import PLAN_CATALOG
from packages.plans.models.domain.entitlements import (
    EntitlementLimits,
    OrganizationEntitlementSource,
)
from packages.plans.models.domain.enums import CanonicalPlan, OrganizationModelTier
from packages.plans.models.domain.plans import PlanResolutionInput


@pytest.fixture
def enterprise_limits():
    """Contract limits deliberately below BASIC's catalog limits."""
    return EntitlementLimits(
        max_requests_per_day=7,
        max_input_tokens_per_day=7000,
        max_output_tokens_per_day=3500,
        max_cost_per_day=0.7,
        max_context_messages=7,
    )


@pytest.fixture
def enterprise_source(enterprise_limits):
    """Organization source on the ENTERPRISE tier without a declared plan."""
    return OrganizationEntitlementSource(
        source_id="org-enterprise",
        source_label="organization:Ent:ENTERPRISE",
        model_tier=OrganizationModelTier.ENTERPRISE,
        limits=enterprise_limits,
    )


@pytest.fixture
def make_pro_source():
    """Factory for PRO-tier organization sources with PRO catalog limits."""

    def _make(source_id: str, **overrides) -> OrganizationEntitlementSource:
        fields = {
            "source_id": source_id,
            "source_label": f"organization:{source_id}:PRO",
            "model_tier": OrganizationModelTier.PRO,
            "limits": PLAN_CATALOG[CanonicalPlan.PRO].limits,
        }
        fields.update(overrides)
        return OrganizationEntitlementSource(**fields)

    return _make


@pytest.fixture
def active_basic_input():
    """Active, non-admin user on the basic plan."""
    return PlanResolutionInput(
        user_id="user-1",
        subscription_status="ACTIVE",
        user_role="USER",
        plan_id="my-basic-plan",
    )
