"""Upstream quotation records consumed by the decision matrix."""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class QuoteProposal(BaseModel):
    """A supplier's answer to a quotation, as stored by the platform."""

    id: str = Field(..., description="Proposal identifier")
    supplier_id: Optional[str] = Field(None, description="Supplier identifier")
    supplier_name: str = Field(..., description="Supplier display name")
    total_price: float = Field(..., ge=0, description="Total price of all items")
    delivery_time: float = Field(..., ge=0, description="Lead time in days")
    shipping_cost: float = Field(default=0.0, ge=0, description="Freight cost")
    warranty_months: float = Field(default=12, ge=0, description="Warranty in months")
    delivery_score: float = Field(default=50, ge=0, description="On-time delivery score")
    reputation: float = Field(default=3.0, ge=0, description="Supplier reputation")
    payment_terms: Optional[str] = Field(None, description="Payment conditions")
    notes: Optional[str] = Field(None, description="Supplier notes")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class QuoteItem(BaseModel):
    """A line item of the quotation being decided."""

    id: str
    product_name: str
    quantity: float = Field(..., ge=0)
    unit_price: Optional[float] = None
    total: Optional[float] = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
