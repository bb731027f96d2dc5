"""Weighted decision-matrix scoring engine for competing proposals.

Each metric dimension is min-max normalized onto a 0-100 scale across the
current cohort, inverted for cost-like metrics, and combined linearly with
the configured percentage weights.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Sequence, Tuple

from ..models.proposal_metrics import ProposalMetrics
from ..models.ranked_proposal import DimensionScores
from ..models.weights import WeightConfig
from .errors import InvalidCohortError

# (field name, inverse) - inverse dimensions score higher when the raw value is lower
METRIC_DIMENSIONS: Tuple[Tuple[str, bool], ...] = (
    ("price", True),
    ("delivery_time", True),
    ("shipping_cost", True),
    ("sla", False),
    ("warranty", False),
    ("reputation", False),
)

NEUTRAL_SCORE = 50.0

CohortRanges = Dict[str, Tuple[float, float]]


def normalize(value: float, minimum: float, maximum: float, inverse: bool) -> float:
    """Map ``value`` onto 0-100 relative to the cohort range.

    A zero-width range carries no information, so it maps to the neutral
    50 in both directions. Values outside the range are not clamped.

    Args:
        value: Raw metric value
        minimum: Lowest value of the metric in the cohort
        maximum: Highest value of the metric in the cohort
        inverse: True when lower raw values are better

    Returns:
        Normalized score
    """

    if maximum == minimum:
        return NEUTRAL_SCORE

    result = ((value - minimum) / (maximum - minimum)) * 100
    return 100 - result if inverse else result


def cohort_ranges(all_proposals: Sequence[ProposalMetrics]) -> CohortRanges:
    """Return ``{dimension: (min, max)}`` across the cohort.

    Raises:
        InvalidCohortError: If the cohort is empty
    """

    if not all_proposals:
        raise InvalidCohortError("Cannot score against an empty cohort of proposals")

    ranges = {}
    for name, _ in METRIC_DIMENSIONS:
        values = [getattr(p, name) for p in all_proposals]
        ranges[name] = (min(values), max(values))
    return ranges


def breakdown_from_ranges(proposal: ProposalMetrics, ranges: CohortRanges) -> DimensionScores:
    scores = {}
    for name, inverse in METRIC_DIMENSIONS:
        minimum, maximum = ranges[name]
        scores[name] = normalize(getattr(proposal, name), minimum, maximum, inverse)
    return DimensionScores(**scores)


def weighted_total(breakdown: DimensionScores, weights: WeightConfig) -> float:
    """Sum each normalized dimension times its weight fraction, rounded."""
    total = 0.0
    for name, _ in METRIC_DIMENSIONS:
        total += getattr(breakdown, name) * (getattr(weights, name) / 100)
    return round_score(total)


def round_score(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def score_breakdown(
    proposal: ProposalMetrics,
    all_proposals: Sequence[ProposalMetrics]
) -> DimensionScores:
    """Normalized value of every dimension of ``proposal`` within the cohort."""
    return breakdown_from_ranges(proposal, cohort_ranges(all_proposals))


def calculate_weighted_score(
    proposal: ProposalMetrics,
    all_proposals: Sequence[ProposalMetrics],
    weights: WeightConfig
) -> float:
    """Composite 0-100 score of ``proposal`` against its cohort.

    Dimensions:
    1. Price, delivery time, shipping cost: lower is better (inverted)
    2. SLA, warranty, reputation: higher is better

    With weights summing to 100 the result lies in [0, 100]; other weight
    totals scale it proportionally.

    Args:
        proposal: Proposal being scored
        all_proposals: Full cohort, used for each dimension's min and max
        weights: Weight configuration to apply

    Returns:
        Score rounded to one decimal place

    Raises:
        InvalidCohortError: If ``all_proposals`` is empty
    """

    return weighted_total(score_breakdown(proposal, all_proposals), weights)
