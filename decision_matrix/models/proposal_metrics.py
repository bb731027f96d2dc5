"""ProposalMetrics - raw metrics of one competing proposal."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ProposalMetrics(BaseModel):
    """Raw metrics of a single proposal in a scoring cohort.

    Cost-like metrics (price, delivery_time, shipping_cost) are better when
    lower; benefit-like metrics (sla, warranty, reputation) are better when
    higher. Accepts the camelCase names used by the front end.
    """

    price: float = Field(..., ge=0, allow_inf_nan=False, description="Total proposal cost")
    delivery_time: float = Field(..., ge=0, allow_inf_nan=False, description="Lead time in days")
    shipping_cost: float = Field(..., ge=0, allow_inf_nan=False, description="Freight cost, 0 means free")
    sla: float = Field(..., ge=0, allow_inf_nan=False, description="Service level, e.g. on-time delivery score")
    warranty: float = Field(..., ge=0, allow_inf_nan=False, description="Warranty in months")
    reputation: float = Field(..., ge=0, allow_inf_nan=False, description="Supplier reputation score")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "price": 1000.0,
                "deliveryTime": 5,
                "shippingCost": 0.0,
                "sla": 95,
                "warranty": 12,
                "reputation": 90,
            }
        },
    }
