"""Exceptions raised by the proof protocols."""


class SumcheckError(Exception):
    """Base class for every error raised by the proof protocols."""


class RejectError(SumcheckError):
    """The verifier rejects a proof."""

    def __init__(self, reason=None):
        self.reason = reason
        super().__init__(reason if reason is not None else "proof rejected")


class VerificationError(SumcheckError):
    """A consistency check on a proof failed."""