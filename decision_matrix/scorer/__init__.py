"""Weighted decision-matrix scoring engine for supplier proposals."""

from .engine import normalize, calculate_weighted_score, score_breakdown, METRIC_DIMENSIONS
from .weights import (
    WEIGHT_TEMPLATES,
    TEMPLATE_LABELS,
    DEFAULT_TEMPLATE,
    WeightTemplate,
    validate_weights,
    get_template,
    load_weights,
    save_weights,
    load_templates,
    save_templates,
)
from .ranking import ProposalAction, rank_proposals, recommend_actions
from .errors import (
    DecisionMatrixError,
    InvalidCohortError,
    UnknownTemplateError,
    UnbalancedWeightsError,
)

__all__ = [
    "normalize",
    "calculate_weighted_score",
    "score_breakdown",
    "METRIC_DIMENSIONS",
    "WEIGHT_TEMPLATES",
    "TEMPLATE_LABELS",
    "DEFAULT_TEMPLATE",
    "WeightTemplate",
    "validate_weights",
    "get_template",
    "load_weights",
    "save_weights",
    "load_templates",
    "save_templates",
    "ProposalAction",
    "rank_proposals",
    "recommend_actions",
    "DecisionMatrixError",
    "InvalidCohortError",
    "UnknownTemplateError",
    "UnbalancedWeightsError",
]
