import pytest

from zkconv.errors import RejectError, SumcheckError, VerificationError


def test_reject_error_carries_reason():
    err = RejectError("Prover message is not consistent with the claim.")
    assert err.reason == "Prover message is not consistent with the claim."
    assert str(err) == "Prover message is not consistent with the claim."


def test_reject_error_without_reason():
    err = RejectError()
    assert err.reason is None
    assert str(err) == "proof rejected"


def test_reject_is_caught_as_base():
    err = RejectError("bad")
    assert isinstance(err, SumcheckError)
    assert err.reason == "bad"
    assert str(err) == "bad"
    with pytest.raises(SumcheckError, match="bad"):
        raise err


def test_verification_error_is_caught_as_base():
    err = VerificationError("mismatch")
    assert isinstance(err, SumcheckError)
    assert not isinstance(err, RejectError)
    assert str(err) == "mismatch"
    with pytest.raises(SumcheckError, match="mismatch"):
        raise err