"""Rank a cohort of proposals and derive the actions offered for each."""

import logging
from typing import List, Sequence

from pydantic import BaseModel

from ..models.ranked_proposal import Candidate, RankedProposal
from ..models.weights import WeightConfig
from .engine import breakdown_from_ranges, cohort_ranges, round_score, weighted_total

logger = logging.getLogger(__name__)

VIABLE_SCORE = 70.0
VIABLE_GAP = 15.0
NEGOTIATE_TOP_N = 3


class ProposalAction(BaseModel):
    """Buttons offered next to a ranked proposal."""

    proposal_id: str
    position: int
    points_behind: float
    show_approve: bool
    show_negotiate: bool
    approve_label: str
    negotiate_label: str


def rank_proposals(candidates: Sequence[Candidate], weights: WeightConfig) -> List[RankedProposal]:
    """Score every candidate against the same cohort and sort best first.

    The sort is stable: proposals with equal scores keep their input order.

    Raises:
        InvalidCohortError: If ``candidates`` is empty
    """

    ranges = cohort_ranges([c.metrics for c in candidates])

    scored = []
    for candidate in candidates:
        breakdown = breakdown_from_ranges(candidate.metrics, ranges)
        scored.append((candidate, breakdown, weighted_total(breakdown, weights)))

    scored.sort(key=lambda entry: entry[2], reverse=True)

    ranked = [
        RankedProposal(
            position=index + 1,
            id=candidate.id,
            name=candidate.name,
            score=score,
            metrics=candidate.metrics,
            breakdown=breakdown,
            proposal=candidate.proposal,
        )
        for index, (candidate, breakdown, score) in enumerate(scored)
    ]

    leader = ranked[0]
    logger.info(
        "Ranked %d proposals: leader=%s score=%.1f",
        len(ranked), leader.name, leader.score
    )
    return ranked


def recommend_actions(ranked: Sequence[RankedProposal]) -> List[ProposalAction]:
    """Decide which actions to offer for each proposal of a ranking.

    Approval is always offered. Negotiation is offered to non-leaders in the
    top three, or to any proposal scoring at least 70 that is no more than
    15 points behind the leader.
    """

    if not ranked:
        return []

    top_score = ranked[0].score
    actions = []

    for index, proposal in enumerate(ranked):
        is_winner = index == 0
        points_behind = round_score(top_score - proposal.score)
        is_viable = proposal.score >= VIABLE_SCORE and points_behind <= VIABLE_GAP

        if index == 1:
            negotiate_label = f"Tentar Negociar ({points_behind:.1f} pts do líder)"
        else:
            negotiate_label = "Negociar com IA"

        actions.append(ProposalAction(
            proposal_id=proposal.id,
            position=proposal.position,
            points_behind=points_behind,
            show_approve=True,
            show_negotiate=not is_winner and (index < NEGOTIATE_TOP_N or is_viable),
            approve_label="Aprovar Melhor Proposta" if is_winner else "Aprovar Proposta",
            negotiate_label=negotiate_label,
        ))

    return actions
