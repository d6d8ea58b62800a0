"""
Fixed-size encodings for values that cross the boundary to the transport layer.

Points are SEC1-compressed. Scalars are big-endian, left-padded to the byte length of the group
order.
"""

import msgpack
from petlib.bn import Bn
from petlib.ec import EcPt

from fairdeck.exceptions import EncodingError, DecodingError
from fairdeck.utils import ensure_bn, scalar_byte_length


def point_byte_length(group):
    """
    Size of a compressed point of the group.

    >>> from fairdeck.consts import DEFAULT_GROUP
    >>> point_byte_length(DEFAULT_GROUP)
    33
    """
    return len(group.generator().export())


def point_to_bytes(point):
    if point.is_infinite():
        raise EncodingError("The identity has no fixed-size encoding")
    return point.export()


def point_from_bytes(group, data):
    """
    Decode a compressed point and check it lies in the group.

    >>> from fairdeck.consts import DEFAULT_GROUP
    >>> g = DEFAULT_GROUP.generator()
    >>> point_from_bytes(DEFAULT_GROUP, point_to_bytes(g)) == g
    True
    """
    if len(data) != point_byte_length(group):
        raise DecodingError(
            "Expected {} bytes, got {}".format(point_byte_length(group), len(data))
        )
    try:
        point = EcPt.from_binary(data, group)
    except Exception as e:
        raise DecodingError("Bytes do not encode a curve point") from e
    if not group.check_point(point):
        raise DecodingError("Point is not on the curve")
    return point


def scalar_to_bytes(scalar, group):
    scalar = ensure_bn(scalar)
    order = group.order()
    if scalar < 0 or scalar >= order:
        raise EncodingError("Scalar out of range")
    raw = scalar.binary()
    return raw.rjust(scalar_byte_length(group), b"\x00")


def scalar_from_bytes(data, group):
    """
    Decode a scalar, rejecting non-canonical values.

    >>> from fairdeck.consts import DEFAULT_GROUP
    >>> scalar_from_bytes(scalar_to_bytes(42, DEFAULT_GROUP), DEFAULT_GROUP)
    42
    """
    size = scalar_byte_length(group)
    if len(data) != size:
        raise DecodingError("Expected {} bytes, got {}".format(size, len(data)))
    scalar = Bn.from_binary(data)
    if scalar >= group.order():
        raise DecodingError("Scalar is not reduced modulo the group order")
    return scalar


def pack_points(points):
    """
    Serialize a sequence of points as a msgpack list of compressed encodings.
    """
    return msgpack.packb([point_to_bytes(p) for p in points], use_bin_type=True)


def unpack_points(group, data):
    try:
        items = msgpack.unpackb(data, raw=False)
    except Exception as e:
        raise DecodingError("Malformed msgpack payload") from e
    if not isinstance(items, list) or not all(isinstance(i, bytes) for i in items):
        raise DecodingError("Expected a list of encoded points")
    return [point_from_bytes(group, item) for item in items]
