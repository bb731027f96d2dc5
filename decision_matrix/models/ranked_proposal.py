"""Ranking output models."""

from typing import Optional

from pydantic import BaseModel, Field

from .proposal_metrics import ProposalMetrics
from .quote import QuoteProposal


class Candidate(BaseModel):
    """A proposal entering a scoring run."""

    id: str
    name: str
    metrics: ProposalMetrics
    proposal: Optional[QuoteProposal] = None


class DimensionScores(BaseModel):
    """Normalized (0-100) value of each metric dimension for one proposal."""

    price: float
    delivery_time: float
    shipping_cost: float
    sla: float
    warranty: float
    reputation: float


class RankedProposal(BaseModel):
    """A scored proposal at its position in the ranking."""

    position: int = Field(..., ge=1, description="1-based rank")
    id: str
    name: str
    score: float = Field(..., description="Composite score, one decimal place")
    metrics: ProposalMetrics
    breakdown: DimensionScores
    proposal: Optional[QuoteProposal] = None

    @property
    def is_winner(self) -> bool:
        return self.position == 1
