"""DecisionMatrixReport - everything an export needs about one decision."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .quote import QuoteItem
from .ranked_proposal import RankedProposal
from .weights import WeightConfig


class DecisionMatrixReport(BaseModel):
    """Ranked proposals of a quotation plus the metadata shown in exports."""

    quote_name: str = Field(..., description="Quotation title")
    quote_code: str = Field(..., description="Display code, e.g. #A1B2C3D4")
    client_name: Optional[str] = Field(None, description="Client shown in the header")
    weights: WeightConfig
    ranked_proposals: list[RankedProposal] = Field(default_factory=list)
    quote_items: list[QuoteItem] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)

    @property
    def winner(self) -> Optional[RankedProposal]:
        return self.ranked_proposals[0] if self.ranked_proposals else None
