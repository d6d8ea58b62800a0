import msgpack
import pytest

from fairdeck.cards import Card
from fairdeck.commitment import Commitment, Revelation
from fairdeck.consts import DEFAULT_GROUP
from fairdeck.encoding import (
    point_byte_length,
    point_to_bytes,
    point_from_bytes,
    scalar_to_bytes,
    scalar_from_bytes,
    pack_points,
    unpack_points,
)
from fairdeck.exceptions import EncodingError, DecodingError
from fairdeck.schnorr import SchnorrSignature
from fairdeck.utils import scalar_byte_length


def test_default_sizes():
    assert point_byte_length(DEFAULT_GROUP) == 33
    assert scalar_byte_length(DEFAULT_GROUP) == 32


def test_point_encoding_is_compressed(params):
    data = point_to_bytes(params.g)
    assert len(data) == point_byte_length(params.group)
    assert data[0] in (2, 3)
    assert point_from_bytes(params.group, data) == params.g


def test_identity_not_encodable(group):
    with pytest.raises(EncodingError):
        point_to_bytes(group.infinite())


def test_point_wrong_length(params):
    with pytest.raises(DecodingError):
        point_from_bytes(params.group, point_to_bytes(params.g)[:-1])


def test_point_bad_prefix(params):
    data = b"\x05" + point_to_bytes(params.g)[1:]
    with pytest.raises(DecodingError):
        point_from_bytes(params.group, data)


@pytest.mark.parametrize("value", [0, 1, 255])
def test_small_scalars_are_padded(group, value):
    data = scalar_to_bytes(value, group)
    assert len(data) == scalar_byte_length(group)
    assert scalar_from_bytes(data, group) == value


def test_scalar_out_of_range(group):
    with pytest.raises(EncodingError):
        scalar_to_bytes(group.order(), group)
    with pytest.raises(EncodingError):
        scalar_to_bytes(-1, group)


def test_non_canonical_scalar_rejected(group):
    data = group.order().binary().rjust(scalar_byte_length(group), b"\x00")
    with pytest.raises(DecodingError):
        scalar_from_bytes(data, group)


def test_scalar_wrong_length(group):
    with pytest.raises(DecodingError):
        scalar_from_bytes(b"\x01", group)


def test_revelation_bad_tag(params, rng):
    data = scalar_to_bytes(rng.random_below(params.order), params.group) + b"\x09"
    with pytest.raises(DecodingError):
        Revelation.from_bytes(params, data)
    with pytest.raises(DecodingError):
        Revelation.from_bytes(params, b"")


def test_revelation_layout(params):
    rev = Revelation(r=5, card=Card.SKULL)
    data = rev.to_bytes(params)
    assert data[-1:] == Card.SKULL.tag
    assert scalar_from_bytes(data[:-1], params.group) == 5


def test_commitment_from_garbage(params):
    with pytest.raises(DecodingError):
        Commitment.from_bytes(params, b"\x00" * 3)


def test_signature_wrong_length(params):
    with pytest.raises(DecodingError):
        SchnorrSignature.from_bytes(params, b"\x00" * 10)


def test_pack_points(params):
    data = pack_points([params.g, params.h])
    assert unpack_points(params.group, data) == [params.g, params.h]


def test_unpack_points_not_a_list(params):
    with pytest.raises(DecodingError):
        unpack_points(params.group, msgpack.packb({"g": 1}))
    with pytest.raises(DecodingError):
        unpack_points(params.group, msgpack.packb(["not bytes"]))
