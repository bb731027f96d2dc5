"""WeightConfig - relative importance of each metric dimension."""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class WeightConfig(BaseModel):
    """Six percentage weights, ideally summing to 100.

    The sum is not enforced here: callers may score with unbalanced weights
    and check ``is_balanced`` (or ``validate_weights``) themselves.
    """

    price: float = 0.0
    delivery_time: float = 0.0
    shipping_cost: float = 0.0
    sla: float = 0.0
    warranty: float = 0.0
    reputation: float = 0.0

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_validator("price", "delivery_time", "shipping_cost", "sla", "warranty", "reputation")
    @classmethod
    def weight_range(cls, v: float) -> float:
        """Ensure weights are between 0 and 100."""
        if not 0 <= v <= 100:
            raise ValueError(f"Weight must be between 0 and 100, got {v}")
        return v

    @property
    def total(self) -> float:
        return (
            self.price +
            self.delivery_time +
            self.shipping_cost +
            self.sla +
            self.warranty +
            self.reputation
        )

    @property
    def is_balanced(self) -> bool:
        """True when the weights sum to 100 within 0.01."""
        return abs(self.total - 100) < 0.01

    def to_dict(self) -> dict:
        """Convert to the camelCase mapping used by the front end."""
        return self.model_dump(by_alias=True)
