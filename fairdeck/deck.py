"""
Commitments to a whole deck.
"""

import attr

from fairdeck.cards import DEFAULT_ENCODING
from fairdeck.commitment import Commitment, commit, decommit
from fairdeck.encoding import pack_points, unpack_points
from fairdeck.exceptions import PreconditionError, RandomnessError


def _check_aligned(instance, attribute, value):
    if len(value) != len(instance.commitments):
        raise PreconditionError(
            "Got {} commitments but {} revelations".format(
                len(instance.commitments), len(value)
            )
        )


@attr.s(frozen=True)
class DeckCommitmentBatch:
    """
    Commitments and revelations of a deck, aligned position by position.

    Unpacks as ``commitments, revelations = batch``.

    Args:
        commitments: Public commitments, in deck order.
        revelations: Secret openings, in deck order.
    """

    commitments = attr.ib(converter=tuple)
    revelations = attr.ib(converter=tuple, validator=_check_aligned)

    def __iter__(self):
        return iter((self.commitments, self.revelations))

    def __len__(self):
        return len(self.commitments)

    @property
    def blindings(self):
        """Blinding factors in deck order, as fed to :py:func:`fairdeck.schnorr.sign`."""
        return [rev.r for rev in self.revelations]

    def open(self, index):
        """
        Hand out the opening of one position at reveal time.
        """
        return self.revelations[index]

    def verify_openings(self, params, encoding=DEFAULT_ENCODING):
        """
        Check every revelation against the commitment at the same position.
        """
        return all(
            decommit(params, com, rev, encoding)
            for com, rev in zip(self.commitments, self.revelations)
        )

    def pack_commitments(self):
        """
        Public part of the batch, for the transport layer.
        """
        return pack_points(com.point for com in self.commitments)


def unpack_commitments(params, data):
    """
    Decode commitments produced by :py:meth:`DeckCommitmentBatch.pack_commitments`.
    """
    return [Commitment(point) for point in unpack_points(params.group, data)]


def commit_deck(params, deck, rng, encoding=DEFAULT_ENCODING):
    """
    Commit to every card of a deck, in order.

    The deck is committed as given: shuffling and dealing happen before this call. Each position
    gets its own blinding factor drawn from ``rng``.

    >>> from fairdeck.cards import DEFAULT_DECK
    >>> from fairdeck.params import init_generators
    >>> from fairdeck.rand import SecureRandom
    >>> params = init_generators()
    >>> commitments, revelations = commit_deck(params, DEFAULT_DECK, SecureRandom())
    >>> len(commitments) == len(revelations) == len(DEFAULT_DECK)
    True

    Args:
        params (:py:class:`fairdeck.params.GroupParameters`): Group parameters.
        deck: Sequence of :py:class:`fairdeck.cards.Card`.
        rng (:py:class:`fairdeck.rand.RandomnessSource`): Randomness source.
        encoding: Public card-to-scalar mapping.

    Returns:
        DeckCommitmentBatch: Aligned commitments and revelations.

    Raises:
        RandomnessError: If the source repeats a blinding factor within the deck.
    """
    commitments = []
    revelations = []
    seen = set()
    for card in deck:
        com, rev = commit(params, card, rng, encoding)
        if int(rev.r) in seen:
            raise RandomnessError("Randomness source repeated a blinding factor")
        seen.add(int(rev.r))
        commitments.append(com)
        revelations.append(rev)

    return DeckCommitmentBatch(commitments=commitments, revelations=revelations)
