"""Promo-code price verification."""

from decimal import Decimal
from typing import Callable, Dict, Optional

from farecheck.models.fare_models import PromoOutcome, Verdict, VerificationResult
from farecheck.utils.price_parser import parse_discount, to_money

INVALID_COUPON_MARKER = "Invalid Coupon"
ACCEPTED_COUPON_MARKER = "Congratulations"

REASON_OK = "ok"
REASON_INVALID_MISMATCH = "price mismatch for invalid coupon"
REASON_DISCOUNT_ERROR = "discount calculation error"
REASON_DISCOUNT_MISSING = "discount not displayed for accepted coupon"
REASON_UNRECOGNIZED = "unrecognized promo feedback"


def classify_feedback(message: str) -> PromoOutcome:
    """Map the site's promo message to an outcome (case-sensitive)."""
    if message is None:
        raise TypeError("feedback_message is required")
    # Rejection is checked first
    if INVALID_COUPON_MARKER in message:
        return PromoOutcome.REJECTED
    if ACCEPTED_COUPON_MARKER in message:
        return PromoOutcome.ACCEPTED
    return PromoOutcome.UNKNOWN


def _judge(outcome, expected, actual, failure_reason) -> VerificationResult:
    if actual == expected:
        return VerificationResult(expected, actual, Verdict.PASS, REASON_OK, outcome)
    return VerificationResult(expected, actual, Verdict.FAIL, failure_reason, outcome)


def _verify_rejected(baseline, total, discount) -> VerificationResult:
    return _judge(PromoOutcome.REJECTED, baseline, total, REASON_INVALID_MISMATCH)


def _verify_accepted(baseline, total, discount) -> VerificationResult:
    if discount is None:
        return VerificationResult(
            baseline, total, Verdict.FAIL, REASON_DISCOUNT_MISSING, PromoOutcome.ACCEPTED
        )
    return _judge(PromoOutcome.ACCEPTED, baseline - discount, total, REASON_DISCOUNT_ERROR)


def _verify_unknown(baseline, total, discount) -> VerificationResult:
    return VerificationResult(
        baseline, total, Verdict.FAIL, REASON_UNRECOGNIZED, PromoOutcome.UNKNOWN
    )


_OUTCOME_CHECKS: Dict[PromoOutcome, Callable[..., VerificationResult]] = {
    PromoOutcome.REJECTED: _verify_rejected,
    PromoOutcome.ACCEPTED: _verify_accepted,
    PromoOutcome.UNKNOWN: _verify_unknown,
}


def verify(
    baseline: Decimal,
    feedback_message: str,
    displayed_total: Decimal,
    displayed_discount: Optional[Decimal] = None,
) -> VerificationResult:
    """
    Check the grand total the site shows after a promo-code submission.

    - Rejected code: the total must equal the baseline.
    - Accepted code: the total must equal baseline minus the displayed
      discount.
    - Unrecognized message: always a failure.

    Amounts are rounded to cents before comparing, so the check is exact.

    Args:
        baseline: Price before any promo code (must be finite)
        feedback_message: Text of the promo message element
        displayed_total: Grand total shown after applying the code
        displayed_discount: Discount shown, None if the element was absent;
            unreadable discount text counts as zero

    Returns:
        VerificationResult with verdict and reason

    Raises:
        TypeError: If a required argument is None
        ValueError: If baseline is not finite or an amount is negative
    """
    outcome = classify_feedback(feedback_message)

    baseline = to_money(baseline)
    if not baseline.is_finite():
        raise ValueError(f"baseline must be a finite price, got {baseline}")
    # An unreadable total stays Infinity and fails the comparison below
    total = to_money(displayed_total)

    if displayed_discount is None:
        discount = None
    elif isinstance(displayed_discount, str):
        discount = parse_discount(displayed_discount)
    else:
        discount = to_money(displayed_discount)

    return _OUTCOME_CHECKS[outcome](baseline, total, discount)
