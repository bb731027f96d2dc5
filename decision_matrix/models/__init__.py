"""Shared Pydantic models for the decision matrix."""

from .proposal_metrics import ProposalMetrics
from .weights import WeightConfig
from .quote import QuoteProposal, QuoteItem
from .ranked_proposal import Candidate, DimensionScores, RankedProposal
from .report import DecisionMatrixReport

__all__ = [
    "ProposalMetrics",
    "WeightConfig",
    "QuoteProposal",
    "QuoteItem",
    "Candidate",
    "DimensionScores",
    "RankedProposal",
    "DecisionMatrixReport",
]
