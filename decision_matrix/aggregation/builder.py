"""Build scoring candidates from stored proposal records."""

import logging
from typing import Any, Iterable, List, Mapping, Union

from ..models import Candidate, ProposalMetrics, QuoteProposal

logger = logging.getLogger(__name__)

ProposalRecord = Union[QuoteProposal, Mapping[str, Any]]

NEUTRAL_DELIVERY_SCORE = 50.0


def to_quote_proposal(record: ProposalRecord) -> QuoteProposal:
    """Coerce a raw record into a QuoteProposal.

    Records coming straight from the database may carry ``price`` instead of
    ``total_price`` and ``null`` for optional metrics; those fall back to the
    model defaults.
    """

    if isinstance(record, QuoteProposal):
        return record

    data = {key: value for key, value in record.items() if value is not None}
    if "total_price" not in data and "totalPrice" not in data and "price" in data:
        data["total_price"] = data.pop("price")
    return QuoteProposal(**data)


def to_metrics(proposal: QuoteProposal) -> ProposalMetrics:
    """Map a proposal onto the six scoring dimensions.

    The delivery score (on-time history) stands in for the SLA dimension;
    a score of 0 means no history yet and is read as neutral.
    """

    return ProposalMetrics(
        price=proposal.total_price,
        delivery_time=proposal.delivery_time,
        shipping_cost=proposal.shipping_cost,
        sla=proposal.delivery_score or NEUTRAL_DELIVERY_SCORE,
        warranty=proposal.warranty_months,
        reputation=proposal.reputation,
    )


def build_candidates(records: Iterable[ProposalRecord]) -> List[Candidate]:
    """Convert proposal records into candidates, preserving input order."""
    candidates = []
    for record in records:
        proposal = to_quote_proposal(record)
        candidates.append(Candidate(
            id=proposal.id,
            name=proposal.supplier_name,
            metrics=to_metrics(proposal),
            proposal=proposal,
        ))

    logger.info("Built %d scoring candidates", len(candidates))
    return candidates
