"""Domain models for plan catalog entries, policies and resolution snapshots."""

from typing import List, Optional, Union
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    field_validator,
)
from pydantic.alias_generators import to_camel

from packages.plans.models.domain.entitlements import (
    EntitlementLimits,
    OrganizationEntitlementSource,
    ResolvedEntitlements,
)
from packages.plans.models.domain.enums import CanonicalPlan, OrganizationModelTier


class ModelRouting(BaseModel):
    """Model identifiers used by the AI orchestrator."""

    orchestrator: str
    sub_agent: str
    maintenance: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class VoicePlanConfig(BaseModel):
    """
    Voice generation policy.

    The voice gate applies P = base_probability * decay_factor ** N, where N is
    the number of voice messages already sent inside the rolling window.
    """

    enabled: bool
    base_probability: float = Field(ge=0, le=1)
    decay_factor: float = Field(ge=0, le=1)
    cap_window_ms: int = Field(ge=0)
    max_per_window: Union[NonNegativeInt, NonNegativeFloat]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )


class PlanCatalogEntry(BaseModel):
    """Static configuration of a canonical plan."""

    model_tier: OrganizationModelTier
    limits: EntitlementLimits
    attachment_retention_days: int = Field(ge=0)
    model_routing: ModelRouting
    voice: VoicePlanConfig

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )


class PlanResolutionInput(BaseModel):
    """
    Everything the engine needs to resolve a user's plan for one request.

    Subscription fields come from the local billing mirror; organization
    sources come from the membership/contract lookup.
    """

    user_id: Optional[str] = None
    subscription_status: Optional[str] = None
    user_role: Optional[str] = None
    plan_id: Optional[str] = None
    is_guest: bool = False
    model_tier: Optional[OrganizationModelTier] = None
    organization_sources: List[OrganizationEntitlementSource] = Field(
        default_factory=list
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )

    @field_validator("is_guest", mode="before")
    @classmethod
    def _null_is_guest(cls, value):
        # Payloads send null for anonymous lookups that never set the flag
        return False if value is None else value

    @field_validator("organization_sources", mode="before")
    @classmethod
    def _null_organization_sources(cls, value):
        return [] if value is None else value


class ResolvedPlanPolicies(BaseModel):
    """Operational policy derived from a resolved entitlement."""

    model_routing: ModelRouting
    attachment_retention_days: int
    voice: VoicePlanConfig

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )


class ResolvedPlanSnapshot(BaseModel):
    """Result of a full resolution: personal plan, winning entitlement, policies."""

    personal_plan: CanonicalPlan
    effective: ResolvedEntitlements
    policies: ResolvedPlanPolicies

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )
