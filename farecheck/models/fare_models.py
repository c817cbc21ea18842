from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional


@dataclass(frozen=True)
class FareCandidate:
    """One selectable date/fare tile in the fare calendar"""
    id: str
    displayed_text: str


class CheapestFare(NamedTuple):
    """Outcome of a calendar scan: the winning tile id and its price"""
    candidate_id: Optional[str]
    price: Decimal

    @property
    def found(self) -> bool:
        return self.price.is_finite()


class PromoOutcome(Enum):
    """How the site reacted to a submitted promo code"""
    REJECTED = "rejected"
    ACCEPTED = "accepted"
    UNKNOWN = "unknown"


class Verdict(Enum):
    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class VerificationResult:
    """Judgement of one promo-code trial against the baseline price"""
    expected_total: Decimal
    actual_total: Decimal
    verdict: Verdict
    reason: str
    outcome: PromoOutcome

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dictionary (amounts as exact strings)"""
        return {
            'expected_total': str(self.expected_total),
            'actual_total': str(self.actual_total),
            'verdict': self.verdict.value,
            'reason': self.reason,
            'outcome': self.outcome.value,
        }


@dataclass
class PromoTrial:
    """A single promo code attempt inside a booking flow run"""
    code: str
    result: VerificationResult

    def to_dict(self) -> Dict[str, Any]:
        return {'code': self.code, **self.result.to_dict()}


@dataclass
class FlowReport:
    """Summary of one end-to-end booking flow run"""
    status: str
    origin: str
    destination: str
    cheapest: CheapestFare
    trials: List[PromoTrial] = field(default_factory=list)
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.status == "success"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'origin': self.origin,
            'destination': self.destination,
            'cheapest': {
                'candidate_id': self.cheapest.candidate_id,
                'price': str(self.cheapest.price),
            },
            'trials': [trial.to_dict() for trial in self.trials],
            'message': self.message,
        }
