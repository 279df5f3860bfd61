"""
PURPOSE: Validated deal parameter record consumed by the simulation engine.

Input acquisition (forms, files, flags) happens elsewhere; this module only
guarantees that whatever reaches the engine is well formed.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from artist_deal.monte_carlo.config import MAX_ITERATIONS, NUM_RUNS


class DealInputs(BaseModel):
    """Deal parameters for one simulation request.

    Attributes:
        social_followers: Current follower count across platforms.
        prev_streams: Streams accumulated by previous releases.
        advance: Advance paid to the artist.
        marketing: Marketing budget.
        content_budget: Recording/video budget.
        iterations: Number of Monte Carlo trials.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    social_followers: float = Field(..., ge=0)
    prev_streams: float = Field(..., ge=0)
    advance: float = Field(..., ge=0)
    marketing: float = Field(..., ge=0)
    content_budget: float = Field(..., ge=0)
    iterations: int = Field(NUM_RUNS, gt=0, le=MAX_ITERATIONS)

    @model_validator(mode="after")
    def check_total_investment(self) -> "DealInputs":
        # ROI is profit / total investment, undefined for a free deal
        if self.total_investment <= 0:
            raise ValueError(
                "total investment (advance + marketing + content_budget) must be positive"
            )
        return self

    @property
    def total_investment(self) -> float:
        return self.advance + self.marketing + self.content_budget
