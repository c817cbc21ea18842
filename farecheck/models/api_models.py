from pydantic import BaseModel, Field
from typing import List, Optional, Union

from farecheck.config import DEFAULT_ORIGIN, DEFAULT_DESTINATION, DEFAULT_PROMO_CODES


# Amounts may arrive as numbers or as raw displayed text ("₹ 4,567")
Amount = Union[int, float, str]


class CandidateIn(BaseModel):
    id: str
    displayed_text: str = ""


class SelectCheapestRequest(BaseModel):
    candidates: List[CandidateIn] = Field(default_factory=list)


class VerifyPromoRequest(BaseModel):
    baseline: Amount
    feedback_message: str
    displayed_total: Amount
    displayed_discount: Optional[Amount] = None


class RunFlowRequest(BaseModel):
    origin: str = DEFAULT_ORIGIN
    destination: str = DEFAULT_DESTINATION
    promo_codes: List[str] = Field(default_factory=lambda: list(DEFAULT_PROMO_CODES))
