"""Proposal aggregation: stored proposal records to scoring candidates."""

from .builder import build_candidates, to_metrics, to_quote_proposal

__all__ = ["build_candidates", "to_metrics", "to_quote_proposal"]
