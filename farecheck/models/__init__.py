"""Data models for fares, verification results and API requests."""

from .fare_models import (
    FareCandidate,
    CheapestFare,
    PromoOutcome,
    Verdict,
    VerificationResult,
    PromoTrial,
    FlowReport,
)
from .api_models import SelectCheapestRequest, VerifyPromoRequest, RunFlowRequest

__all__ = [
    'FareCandidate',
    'CheapestFare',
    'PromoOutcome',
    'Verdict',
    'VerificationResult',
    'PromoTrial',
    'FlowReport',
    'SelectCheapestRequest',
    'VerifyPromoRequest',
    'RunFlowRequest',
]
