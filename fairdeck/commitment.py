r"""
Pedersen commitments to single cards.

A card :math:`c` with scalar :math:`v` is committed as :math:`C = v G + r H`, where :math:`r` is a
fresh blinding factor. The commitment is perfectly hiding and computationally binding, as long
as :math:`\log_G H` is unknown (see :py:mod:`fairdeck.params`).

>>> from fairdeck.rand import SecureRandom
>>> from fairdeck.params import init_generators
>>> params = init_generators()
>>> com, rev = commit(params, Card.SKULL, SecureRandom())
>>> decommit(params, com, rev)
True

"""
import hmac

import attr

from fairdeck.cards import Card, DEFAULT_ENCODING
from fairdeck.encoding import (
    point_to_bytes,
    point_from_bytes,
    scalar_to_bytes,
    scalar_from_bytes,
)
from fairdeck.exceptions import DecodingError


@attr.s(frozen=True)
class Commitment:
    """
    Public commitment to a card.

    Args:
        point: The point :math:`C = v G + r H`.
    """

    point = attr.ib()

    def to_bytes(self):
        return point_to_bytes(self.point)

    @classmethod
    def from_bytes(cls, params, data):
        return cls(point_from_bytes(params.group, data))


@attr.s(frozen=True)
class Revelation:
    """
    Opening of a commitment. Secret until the card is revealed.

    Args:
        r: Blinding factor.
        card: Committed card.
    """

    r = attr.ib(repr=False)
    card = attr.ib()

    def to_bytes(self, params):
        """Blinding factor followed by the one-byte card tag."""
        return scalar_to_bytes(self.r, params.group) + self.card.tag

    @classmethod
    def from_bytes(cls, params, data):
        if len(data) < 1:
            raise DecodingError("Empty revelation")
        try:
            card = Card.from_tag(data[-1:])
        except ValueError as e:
            raise DecodingError("Unknown card tag") from e
        return cls(r=scalar_from_bytes(data[:-1], params.group), card=card)


def _commitment_point(params, value, r):
    return value * params.g + r * params.h


def commit(params, card, rng, encoding=DEFAULT_ENCODING):
    """
    Commit to a card under a fresh blinding factor.

    Args:
        params (:py:class:`fairdeck.params.GroupParameters`): Group parameters.
        card (:py:class:`fairdeck.cards.Card`): Card to hide.
        rng (:py:class:`fairdeck.rand.RandomnessSource`): Source of the blinding factor.
        encoding: Public card-to-scalar mapping.

    Returns:
        tuple: The public :py:class:`Commitment` and the secret :py:class:`Revelation`.
    """
    r = rng.random_below(params.order)
    point = _commitment_point(params, encoding(card), r)
    return Commitment(point), Revelation(r=r, card=card)


def decommit(params, commitment, revelation, encoding=DEFAULT_ENCODING):
    """
    Check that a revelation opens a commitment.

    Comparison runs over the point encodings in constant time.

    Returns:
        bool: True if the opening matches, False otherwise.

    Raises:
        GroupMismatchError: If the commitment is not a point of the parameter group.
    """
    params.check_point(commitment.point)
    expected = _commitment_point(params, encoding(revelation.card), revelation.r)
    return hmac.compare_digest(expected.export(), commitment.point.export())
