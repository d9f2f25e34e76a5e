"""
Exceptions raised by the curve arithmetic and the protocol built on it.

Every error derives from ValueError, so callers that only care about bad input
can keep catching ValueError. Failures are deterministic functions of the
curve parameters and the inputs; retrying with the same values is pointless.
"""


class CurveError(ValueError):
    """Base class for elliptic curve arithmetic failures."""


class NoInverseExists(CurveError):
    """Raised when a value has no multiplicative inverse modulo the field prime."""

    def __init__(self, value: int, modulus: int):
        super().__init__(f"No inverse exists for {value} mod {modulus}.")
        self.value = value
        self.modulus = modulus


class EncodingNotFound(CurveError):
    """Raised when no curve point has an x-coordinate in a message's slot range."""

    def __init__(self, message: int, slot_width: int):
        super().__init__(
            f"No curve point found for message {message} within {slot_width} slots."
        )
        self.message = message
        self.slot_width = slot_width


class DegenerateCurve(CurveError):
    """Raised when the curve has no affine points to work with."""


class KeyAgreementError(CurveError):
    """Raised when the two parties derive different shared secrets."""
