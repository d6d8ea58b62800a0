"""
A dealer with two skulls cannot produce the fairness proof for a one-skull rule.
"""

from fairdeck import Card, init_generators, commit_deck, sign, verify
from fairdeck import FairnessRule, SecureRandom

params = init_generators()
rng = SecureRandom()

hand = [Card.SKULL, Card.SKULL, Card.ROSE, Card.ROSE]
commitments, revelations = commit_deck(params, hand, rng)

rule = FairnessRule(skip=0, target=1)
signature = sign(params.h, [rev.r for rev in revelations], rng, skip=rule.skip)
assert not verify(params, commitments, signature, rule)
