import pytest

from petlib.bn import Bn

from fairdeck.cards import (
    Card,
    CardEncoding,
    DEFAULT_DECK,
    DEFAULT_ENCODING,
    card_to_scalar,
    deck_value,
)


def test_default_encoding():
    assert card_to_scalar(Card.SKULL) == 1
    assert card_to_scalar(Card.ROSE) == 0
    assert isinstance(card_to_scalar(Card.SKULL), Bn)


def test_default_deck_has_one_skull():
    assert len(DEFAULT_DECK) == 4
    assert DEFAULT_DECK[0] == Card.SKULL
    assert deck_value(DEFAULT_DECK) == 1
    assert deck_value(DEFAULT_DECK[1:]) == 0


def test_custom_encoding():
    encoding = CardEncoding({Card.SKULL: 255, Card.ROSE: 0})
    assert card_to_scalar(Card.SKULL, encoding) == 255
    assert deck_value([Card.SKULL, Card.SKULL, Card.ROSE], encoding) == 510


def test_partial_encoding_rejected():
    with pytest.raises(ValueError):
        CardEncoding({Card.SKULL: 1})


def test_encodings_compare_by_mapping():
    assert CardEncoding({Card.SKULL: 1, Card.ROSE: 0}) == DEFAULT_ENCODING
    assert CardEncoding({Card.SKULL: 2, Card.ROSE: 0}) != DEFAULT_ENCODING


@pytest.mark.parametrize("card", list(Card))
def test_card_tag(card):
    assert len(card.tag) == 1
    assert Card.from_tag(card.tag) == card


@pytest.mark.parametrize("tag", [b"\x07", b"", b"\x00\x01"])
def test_bad_card_tag(tag):
    with pytest.raises(ValueError):
        Card.from_tag(tag)
