r"""
Public group parameters shared by all parties of a game.

Pedersen commitments :math:`C = v G + r H` are binding only if nobody knows :math:`\log_G H`.
Both generators are therefore derived by hashing fixed, public labels onto the curve, so every
party recomputes the same pair without a trusted setup.
"""

import attr

from fairdeck.consts import DEFAULT_GROUP, GENERATOR_LABELS, CHALLENGE_HASH
from fairdeck.exceptions import GroupSetupError, GroupMismatchError
from fairdeck.utils import hash_to_generator


@attr.s(frozen=True)
class GroupParameters:
    """
    Group and the two commitment generators.

    Args:
        group: The elliptic-curve group.
        g: Generator carrying the committed card value.
        h: Generator carrying the blinding factor.
    """

    group = attr.ib()
    g = attr.ib()
    h = attr.ib()

    @property
    def order(self):
        return self.group.order()

    def check_point(self, point):
        """Raise :py:class:`GroupMismatchError` if the point is not from this group."""
        if point.group != self.group:
            raise GroupMismatchError("Point does not belong to the parameter group")


def init_generators(group=None, labels=GENERATOR_LABELS, hash_fn=CHALLENGE_HASH):
    """
    Derive the commitment generators from domain-separation labels.

    Pure: the same labels and group always produce the same parameters.

    >>> params = init_generators()
    >>> params == init_generators()
    True
    >>> params.g != params.h
    True

    Args:
        group: Group to work in. Defaults to :py:data:`fairdeck.consts.DEFAULT_GROUP`.
        labels: Pair of distinct labels for :math:`G` and :math:`H`.
        hash_fn: Wide-output hash applied to the labels before hash-to-point.

    Returns:
        GroupParameters: Parameters with ``g`` derived from the first label and ``h`` from the
        second.
    """
    if group is None:
        group = DEFAULT_GROUP

    g_label, h_label = labels
    if g_label == h_label:
        raise GroupSetupError("Generator labels must be distinct")

    g = hash_to_generator(g_label, group, hash_fn)
    h = hash_to_generator(h_label, group, hash_fn)
    if g == h:
        raise GroupSetupError("Labels {!r} and {!r} collide".format(g_label, h_label))

    return GroupParameters(group=group, g=g, h=h)
