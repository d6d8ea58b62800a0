"""
Protocol-wide constants.

Every value here is a public protocol parameter. Functions take them as default arguments, so a
caller can override any of them without touching global state.
"""

import hashlib

from petlib.ec import EcGroup


# secp256k1: prime order, cofactor 1.
DEFAULT_GROUP_NID = 714
DEFAULT_GROUP = EcGroup(DEFAULT_GROUP_NID)

# Domain-separation labels for the two commitment generators g and h.
GENERATOR_LABELS = (b"AMONI", b"SAGOD")

# Wide-output hash used both for hash-to-curve and for Fiat-Shamir challenges.
CHALLENGE_HASH = hashlib.sha512

# Leading deck positions left out of the aggregate, and the card-value sum the rest must reach.
DEFAULT_SKIP = 1
DEFAULT_TARGET = 1
