"""
Card alphabet and its public scalar encoding.
"""

import enum

import attr
from petlib.bn import Bn


class Card(enum.Enum):
    """
    A card of the game. The enum value is the one-byte wire tag, not the committed scalar.
    """

    ROSE = 0
    SKULL = 1

    @property
    def tag(self):
        return bytes([self.value])

    @classmethod
    def from_tag(cls, tag):
        """
        >>> Card.from_tag(b"\\x01")
        <Card.SKULL: 1>
        """
        if len(tag) != 1:
            raise ValueError("Card tag must be a single byte")
        return cls(tag[0])


def _to_scalar_mapping(mapping):
    return {card: Bn(int(value)) for card, value in mapping.items()}


def _check_total(instance, attribute, value):
    missing = [card for card in Card if card not in value]
    if missing:
        raise ValueError("Encoding does not cover {}".format(missing))


@attr.s(frozen=True)
class CardEncoding:
    """
    Public mapping from cards to scalars.

    Args:
        mapping: Dictionary with an entry for every :py:class:`Card`.
    """

    mapping = attr.ib(converter=_to_scalar_mapping, validator=_check_total, hash=False)

    def __call__(self, card):
        return self.mapping[card]


# The skull is the sensitive card.
DEFAULT_ENCODING = CardEncoding({Card.SKULL: 1, Card.ROSE: 0})

DEFAULT_DECK = (Card.SKULL, Card.ROSE, Card.ROSE, Card.ROSE)


def card_to_scalar(card, encoding=DEFAULT_ENCODING):
    """
    Encode a card as a scalar.

    >>> card_to_scalar(Card.SKULL)
    1
    >>> card_to_scalar(Card.ROSE)
    0
    """
    return encoding(card)


def deck_value(deck, encoding=DEFAULT_ENCODING):
    """
    Sum of the card scalars of a deck, or of a slice of one.

    This is the public target that :py:func:`fairdeck.schnorr.verify` checks the committed cards
    against.

    >>> deck_value(DEFAULT_DECK)
    1
    >>> deck_value(DEFAULT_DECK[1:])
    0
    """
    total = Bn(0)
    for card in deck:
        total = total + encoding(card)
    return total
