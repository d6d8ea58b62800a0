"""
Moving commitments, openings and proofs across the wire as fixed-size bytes.
"""

from fairdeck import DEFAULT_DECK, init_generators, commit_deck, sign, verify, decommit
from fairdeck import Commitment, Revelation, SchnorrSignature, FairnessRule, SecureRandom
from fairdeck.deck import unpack_commitments

params = init_generators()
rng = SecureRandom()
rule = FairnessRule(skip=0, target=1)

batch = commit_deck(params, DEFAULT_DECK, rng)
signature = sign(params.h, batch.blindings, rng, skip=rule.skip, message=b"round-1")

# Dealer side: 33-byte commitments, 64-byte proof.
published = batch.pack_commitments()
proof = signature.to_bytes(params)

# Verifier side.
commitments = unpack_commitments(params, published)
received = SchnorrSignature.from_bytes(params, proof)
assert verify(params, commitments, received, rule, message=b"round-1")

# A single card is disclosed.
opening = Revelation.from_bytes(params, batch.open(0).to_bytes(params))
commitment = Commitment.from_bytes(params, commitments[0].to_bytes())
assert decommit(params, commitment, opening)
