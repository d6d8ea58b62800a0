"""
Common exception classes.

Verification failures are not exceptions: :py:func:`fairdeck.commitment.decommit` and
:py:func:`fairdeck.schnorr.verify` return ``False``.
"""


class PreconditionError(Exception):
    """Caller broke an operation contract, e.g., empty openings or misaligned sequences."""


class RandomnessError(Exception):
    """The randomness source failed or produced output unfit for cryptographic use."""


class GroupSetupError(Exception):
    """Generators cannot be derived from the given labels."""


class GroupMismatchError(Exception):
    """Points or parameters come from different groups."""


class EncodingError(Exception):
    """Value cannot be serialized to its fixed-size encoding."""


class DecodingError(Exception):
    """Bytes do not hold a valid fixed-size encoding."""
