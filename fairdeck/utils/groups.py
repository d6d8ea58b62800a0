from petlib.bn import Bn

from fairdeck.consts import DEFAULT_GROUP, CHALLENGE_HASH
from fairdeck.exceptions import GroupSetupError


def hash_to_generator(label, group=None, hash_fn=None):
    """
    Deterministically map a domain-separation label to a group element.

    The label is first hashed with a wide-output hash, and the digest is mapped to the curve with
    the group's hash-to-point.

    >>> from petlib.ec import EcPt
    >>> a = hash_to_generator(b"one")
    >>> isinstance(a, EcPt)
    True
    >>> a == hash_to_generator(b"one")
    True
    >>> a != hash_to_generator(b"two")
    True

    Args:
        label (bytes): Domain-separation label.
        group: Group. Defaults to :py:data:`fairdeck.consts.DEFAULT_GROUP`.
        hash_fn: Hash constructor from :py:mod:`hashlib`.
    """
    if group is None:
        group = DEFAULT_GROUP
    if hash_fn is None:
        hash_fn = CHALLENGE_HASH
    if isinstance(label, str):
        label = label.encode("ascii")

    point = group.hash_to_point(hash_fn(label).digest())
    if point.is_infinite():
        raise GroupSetupError("Label {!r} maps to the identity".format(label))
    return point


def sum_points(points, group=None):
    """
    Add up group elements, starting from the identity.

    >>> g = DEFAULT_GROUP.generator()
    >>> sum_points([g, g, g]) == 3 * g
    True
    >>> sum_points([]).is_infinite()
    True
    """
    if group is None:
        group = DEFAULT_GROUP
    result = group.infinite()
    for point in points:
        result = result + point
    return result


def sum_bn_array(arr, modulus):
    """
    Sum an array of big numbers under a modulus.

    >>> a = [Bn(5), Bn(7)]
    >>> m = 10
    >>> sum_bn_array(a, m)
    2
    """
    if not isinstance(modulus, Bn):
        modulus = Bn(modulus)
    res = Bn(0)
    for elem in arr:
        if not isinstance(elem, Bn):
            elem = Bn(elem)
        res = res.mod_add(elem, modulus)
    return res


def ensure_bn(x):
    """
    Ensure that value is big number.

    >>> isinstance(ensure_bn(42), Bn)
    True
    >>> isinstance(ensure_bn(Bn(42)), Bn)
    True
    """
    if isinstance(x, Bn):
        return x
    else:
        return Bn(x)


def scalar_byte_length(group=None):
    """
    Number of bytes in the fixed-size encoding of a scalar of the group.

    >>> scalar_byte_length()
    32
    """
    if group is None:
        group = DEFAULT_GROUP
    return (group.order().num_bits() + 7) // 8
