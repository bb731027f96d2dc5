"""Exceptions raised by the decision matrix."""


class DecisionMatrixError(Exception):
    """Base class for decision matrix errors."""


class InvalidCohortError(DecisionMatrixError, ValueError):
    """Raised when a scoring cohort has no proposals."""


class UnknownTemplateError(DecisionMatrixError, KeyError):
    """Raised when a weight template name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnbalancedWeightsError(DecisionMatrixError, ValueError):
    """Raised when weights that must sum to 100 do not."""
