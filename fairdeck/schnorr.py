r"""
Aggregate Schnorr proof of knowledge over deck blinding factors.

A deck committed as :math:`C_i = v_i G + r_i H` has, for any set :math:`S` of positions,

.. math::

    \sum_{i \in S} C_i - t G = \left(\sum_{i \in S} v_i - t\right) G + \left(\sum_{i \in S} r_i\right) H

If the committed card values in :math:`S` add up to the public target :math:`t`, the left-hand
side :math:`Y` is a multiple of :math:`H` alone, and the dealer proves it by a non-interactive
Schnorr proof

.. math::

    PK\{ x: Y = x H \}, \quad x = \sum_{i \in S} r_i

Nobody can produce this proof if the values do not add up to :math:`t`, since that would reveal
:math:`\log_G H`. Individual cards stay hidden.

The set :math:`S` is every position except the first ``skip`` ones. Both sides must use the same
:py:class:`FairnessRule`.

>>> from fairdeck.cards import Card
>>> from fairdeck.deck import commit_deck
>>> from fairdeck.params import init_generators
>>> from fairdeck.rand import SecureRandom
>>> params, rng = init_generators(), SecureRandom()
>>> deck = [Card.ROSE, Card.SKULL, Card.ROSE, Card.ROSE]
>>> commitments, revelations = commit_deck(params, deck, rng)
>>> sig = sign(params.h, [rev.r for rev in revelations], rng)
>>> verify(params, commitments, sig)
True

"""

import warnings

import attr
from petlib.bn import Bn

from fairdeck.cards import DEFAULT_ENCODING, deck_value
from fairdeck.consts import CHALLENGE_HASH, DEFAULT_SKIP, DEFAULT_TARGET
from fairdeck.encoding import scalar_to_bytes, scalar_from_bytes
from fairdeck.exceptions import PreconditionError, DecodingError
from fairdeck.utils import ensure_bn, sum_bn_array, sum_points, scalar_byte_length


def _check_skip(instance, attribute, value):
    if value < 0:
        raise PreconditionError("skip must be non-negative")


@attr.s(frozen=True)
class FairnessRule:
    """
    Which positions a proof covers and what their card values must add up to.

    Args:
        skip: Number of leading deck positions left out of the aggregate.
        target: Public sum of the card scalars at the remaining positions. This many copies of
            :math:`G` are subtracted on the verifier side.

    The default rule, ``skip=1, target=1``, requires exactly one skull after the first position,
    so it does not accept :py:data:`fairdeck.cards.DEFAULT_DECK`, whose only skull comes first.
    Use ``FairnessRule(skip=0, target=1)`` to require one skull in the whole hand.

    Raises:
        PreconditionError: If ``skip`` is negative.
    """

    skip = attr.ib(default=DEFAULT_SKIP, converter=int, validator=_check_skip)
    target = attr.ib(default=DEFAULT_TARGET, converter=ensure_bn)

    @classmethod
    def for_deck(cls, deck, skip=DEFAULT_SKIP, encoding=DEFAULT_ENCODING):
        """
        Rule whose target is the value an honest ``deck`` reaches over the covered positions.

        >>> from fairdeck.cards import DEFAULT_DECK
        >>> FairnessRule.for_deck(DEFAULT_DECK, skip=0).target
        1
        >>> FairnessRule.for_deck(DEFAULT_DECK, skip=1).target
        0
        """
        return cls(skip=skip, target=deck_value(deck[skip:], encoding))


@attr.s(frozen=True)
class SchnorrSignature:
    """
    Non-interactive proof transcript: response and challenge.

    The commitment :math:`R` is not part of the transcript, since the verifier recomputes it.
    """

    s = attr.ib()
    e = attr.ib()

    def to_bytes(self, params):
        return scalar_to_bytes(self.s, params.group) + scalar_to_bytes(self.e, params.group)

    @classmethod
    def from_bytes(cls, params, data):
        size = scalar_byte_length(params.group)
        if len(data) != 2 * size:
            raise DecodingError("Expected {} bytes, got {}".format(2 * size, len(data)))
        return cls(
            s=scalar_from_bytes(data[:size], params.group),
            e=scalar_from_bytes(data[size:], params.group),
        )


def build_fiat_shamir_challenge(commitment, order, message=b"", hash_fn=CHALLENGE_HASH):
    """
    Generate a Fiat-Shamir challenge from the proof commitment.

    The wide digest of the compressed point, followed by the optional message, is reduced modulo
    the group order.

    >>> from fairdeck.consts import DEFAULT_GROUP
    >>> commitment = 42 * DEFAULT_GROUP.generator()
    >>> isinstance(build_fiat_shamir_challenge(commitment, DEFAULT_GROUP.order()), Bn)
    True

    Args:
        commitment: The point :math:`R`.
        order: Group order.
        message (bytes): Optional message, e.g., a game identifier, to bind the proof to.
    """
    if isinstance(message, str):
        message = message.encode("utf-8")
    prehash = hash_fn(commitment.export())
    prehash.update(message)
    return Bn.from_hex(prehash.hexdigest()) % order


def sign(h, blindings, rng, skip=DEFAULT_SKIP, message=b""):
    """
    Prove knowledge of the sum of blinding factors with respect to :math:`H`.

    Only ``blindings[skip:]`` enter the key. A fresh nonce is drawn on every call: reusing one for
    the same key reveals the key.

    Args:
        h: The blinding generator :math:`H` (``params.h``).
        blindings: Blinding factors in deck order.
        rng (:py:class:`fairdeck.rand.RandomnessSource`): Source of the nonce.
        skip: Number of leading positions to leave out.
        message: Optional message bound into the challenge.

    Returns:
        SchnorrSignature: The proof.

    Raises:
        PreconditionError: If ``blindings`` is empty.
    """
    if len(blindings) == 0:
        raise PreconditionError("Cannot sign over an empty sequence of openings")
    if skip < 0:
        raise PreconditionError("skip must be non-negative")

    order = h.group.order()
    key = sum_bn_array(blindings[skip:], order)

    k = rng.random_below(order)
    e = build_fiat_shamir_challenge(k * h, order, message)
    s = k.mod_sub(key.mod_mul(e, order), order)
    return SchnorrSignature(s=s, e=e)


def verify(params, commitments, signature, rule=None, message=b""):
    """
    Verify a proof against the deck commitments.

    Recomputes :math:`Y = \\sum_{i \\geq skip} C_i - t G` and :math:`R' = s H + e Y`, and checks that
    :math:`R'` hashes back to the challenge.

    Args:
        params (:py:class:`fairdeck.params.GroupParameters`): Group parameters.
        commitments: All :py:class:`fairdeck.commitment.Commitment` objects, in deck order.
        signature (:py:class:`SchnorrSignature`): The proof.
        rule (:py:class:`FairnessRule`): Covered positions and target. Defaults to
            ``FairnessRule()``.
        message: The message the proof was bound to.

    Returns:
        bool: True if the proof is valid, False otherwise.

    Raises:
        PreconditionError: If ``commitments`` is empty.
        GroupMismatchError: If a commitment is not a point of the parameter group.
    """
    if rule is None:
        rule = FairnessRule()
    if len(commitments) == 0:
        raise PreconditionError("Cannot verify against an empty sequence of commitments")
    for com in commitments:
        params.check_point(com.point)
    if rule.skip >= len(commitments):
        warnings.warn("Rule skips every commitment; the proof covers no cards")

    order = params.order
    s, e = ensure_bn(signature.s), ensure_bn(signature.e)
    if not (0 <= s < order and 0 <= e < order):
        return False

    covered = [com.point for com in commitments[rule.skip:]]
    y = sum_points(covered, params.group) + ((-rule.target) % order) * params.g

    commitment_prime = s * params.h + e * y
    challenge_prime = build_fiat_shamir_challenge(commitment_prime, order, message)
    return challenge_prime == e


def sign_batch(params, batch, rng, rule=None, message=b""):
    """
    Sign over the blinding factors of a :py:class:`fairdeck.deck.DeckCommitmentBatch`.
    """
    if rule is None:
        rule = FairnessRule()
    return sign(params.h, batch.blindings, rng, skip=rule.skip, message=message)


def verify_batch(params, commitments, signature, rule=None, message=b""):
    """
    Same as :py:func:`verify`, also accepting a whole :py:class:`fairdeck.deck.DeckCommitmentBatch`.
    """
    commitments = getattr(commitments, "commitments", commitments)
    return verify(params, commitments, signature, rule=rule, message=message)
