"""Domain models for entitlement limits and entitlement sources."""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt
from pydantic.alias_generators import to_camel

from packages.plans.models.domain.enums import (
    CanonicalPlan,
    EntitlementSourceType,
    OrganizationModelTier,
)


class EntitlementLimits(BaseModel):
    """
    Daily usage ceilings for a user.

    Admin entitlements use float("inf") for the four daily counters; integer
    limits stay integers.
    """

    max_requests_per_day: Union[NonNegativeInt, NonNegativeFloat]
    max_input_tokens_per_day: Union[NonNegativeInt, NonNegativeFloat]
    max_output_tokens_per_day: Union[NonNegativeInt, NonNegativeFloat]
    max_cost_per_day: Union[NonNegativeInt, NonNegativeFloat]  # currency units
    max_context_messages: int = Field(ge=0)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )


class OrganizationEntitlementSource(BaseModel):
    """One organization's contractual grant to a user, already normalized upstream."""

    source_id: str
    source_label: str
    plan: Optional[CanonicalPlan] = None
    model_tier: OrganizationModelTier
    limits: EntitlementLimits

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )


class ResolvedEntitlements(BaseModel):
    """The single entitlement vector that governs a request."""

    source_type: EntitlementSourceType
    source_id: str
    source_label: str
    plan: CanonicalPlan
    model_tier: OrganizationModelTier
    limits: EntitlementLimits

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        ser_json_inf_nan="constants",
    )
