from decimal import Decimal

import pytest

from farecheck.core.price_verifier import (
    REASON_DISCOUNT_ERROR,
    REASON_DISCOUNT_MISSING,
    REASON_INVALID_MISMATCH,
    REASON_UNRECOGNIZED,
    _OUTCOME_CHECKS,
    classify_feedback,
    verify,
)
from farecheck.models.fare_models import PromoOutcome, Verdict


@pytest.mark.parametrize("message, outcome", [
    ("Invalid Coupon applied", PromoOutcome.REJECTED),
    ("Congratulations! Coupon applied", PromoOutcome.ACCEPTED),
    ("Server error, try later", PromoOutcome.UNKNOWN),
    ("invalid coupon", PromoOutcome.UNKNOWN),
    ("", PromoOutcome.UNKNOWN),
    ("Congratulations? Invalid Coupon", PromoOutcome.REJECTED),
])
def test_classify_feedback(message, outcome):
    assert classify_feedback(message) is outcome


def test_rejected_coupon_keeps_baseline():
    result = verify(Decimal("1000"), "Invalid Coupon applied", Decimal("1000"))
    assert result.verdict is Verdict.PASS
    assert result.outcome is PromoOutcome.REJECTED
    assert result.expected_total == Decimal("1000.00")


def test_rejected_coupon_with_changed_total_fails():
    result = verify(Decimal("1000"), "Invalid Coupon applied", Decimal("950"))
    assert result.verdict is Verdict.FAIL
    assert result.reason == REASON_INVALID_MISMATCH
    assert result.actual_total == Decimal("950.00")


def test_accepted_coupon_subtracts_discount():
    result = verify(Decimal("1000"), "Congratulations! Coupon applied", Decimal("900"), Decimal("100"))
    assert result.passed
    assert result.expected_total == Decimal("900.00")


def test_accepted_coupon_with_wrong_total_fails():
    result = verify(Decimal("1000"), "Congratulations!", Decimal("950"), Decimal("100"))
    assert result.verdict is Verdict.FAIL
    assert result.reason == REASON_DISCOUNT_ERROR
    assert result.expected_total == Decimal("900.00")


def test_accepted_coupon_without_discount_fails():
    result = verify(Decimal("1000"), "Congratulations!", Decimal("1000"))
    assert result.verdict is Verdict.FAIL
    assert result.reason == REASON_DISCOUNT_MISSING


def test_unrecognized_feedback_never_passes():
    result = verify(Decimal("1000"), "Server error, try later", Decimal("1000"))
    assert result.verdict is Verdict.FAIL
    assert result.reason == REASON_UNRECOGNIZED
    assert result.outcome is PromoOutcome.UNKNOWN


def test_displayed_text_is_accepted():
    result = verify("₹ 1,000", "Congratulations! Coupon applied", "₹ 900.00", "₹ 100")
    assert result.passed


def test_unreadable_discount_counts_as_zero():
    result = verify(Decimal("1000"), "Congratulations!", Decimal("1000"), "n/a")
    assert result.passed
    assert result.expected_total == Decimal("1000.00")


def test_unreadable_total_fails():
    result = verify(Decimal("1000"), "Invalid Coupon", "")
    assert result.verdict is Verdict.FAIL
    assert result.reason == REASON_INVALID_MISMATCH


def test_float_amounts_compare_exactly():
    result = verify(0.3, "Congratulations!", 0.2, 0.1)
    assert result.passed


def test_verify_is_idempotent():
    args = (Decimal("1000"), "Congratulations!", Decimal("950"), Decimal("100"))
    assert verify(*args) == verify(*args)


def test_result_to_dict():
    result = verify(Decimal("1000"), "Congratulations!", Decimal("900"), Decimal("100"))
    assert result.to_dict() == {
        'expected_total': "900.00",
        'actual_total': "900.00",
        'verdict': "pass",
        'reason': "ok",
        'outcome': "accepted",
    }


def test_missing_arguments_fail_fast():
    with pytest.raises(TypeError):
        verify(Decimal("1000"), None, Decimal("1000"))
    with pytest.raises(TypeError):
        verify(Decimal("1000"), "Invalid Coupon", None)


def test_infinite_baseline_is_rejected():
    with pytest.raises(ValueError):
        verify(Decimal("Infinity"), "Invalid Coupon", Decimal("Infinity"))


def test_every_outcome_has_a_check():
    assert set(_OUTCOME_CHECKS) == set(PromoOutcome)


def test_negative_discount_number_is_rejected():
    with pytest.raises(ValueError):
        verify(1000, "Congratulations!", 1100, Decimal("-100"))
    # The same amounts as displayed text lose the sign and fail the check
    result = verify(1000, "Congratulations!", 1100, "-100")
    assert result.verdict is Verdict.FAIL
    assert result.reason == REASON_DISCOUNT_ERROR


def test_oversized_total_fails_comparison():
    result = verify(1000, "Invalid Coupon", "₹ " + "9" * 30)
    assert result.verdict is Verdict.FAIL
    assert result.actual_total == Decimal("Infinity")
