from typing import Optional

from common.core.exceptions import AppException
from packages.plans.models.domain.enums import PlanResolutionErrorReason


class PlanResolutionError(AppException):
    """
    Plan resolution refused to produce a plan.

    Callers branch on ``reason``; the message is for humans only.
    """

    code = "PLAN_RESOLUTION_ERROR"

    def __init__(
        self, reason: PlanResolutionErrorReason, message: Optional[str] = None
    ):
        super().__init__(message or reason.value)
        self.reason = reason
        self.message = message or reason.value

    def __repr__(self) -> str:
        return f"PlanResolutionError(reason={self.reason.value!r}, message={self.message!r})"
