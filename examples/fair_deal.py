"""
A dealer commits to a Skull hand and proves it holds exactly one skull:
PK{ x: sum(C_i) - G = x * H }
"""

from fairdeck import Card, init_generators, commit_deck, sign, verify, decommit
from fairdeck import FairnessRule, SecureRandom

params = init_generators()
rng = SecureRandom()

# The dealer has already shuffled the hand.
hand = [Card.ROSE, Card.ROSE, Card.SKULL, Card.ROSE]

# Commit to every card; commitments are public, revelations stay with the dealer.
commitments, revelations = commit_deck(params, hand, rng)

# The whole hand must contain one skull.
rule = FairnessRule(skip=0, target=1)

signature = sign(params.h, [rev.r for rev in revelations], rng, skip=rule.skip)
assert verify(params, commitments, signature, rule)

# Later, a single card is flipped.
assert decommit(params, commitments[2], revelations[2])
