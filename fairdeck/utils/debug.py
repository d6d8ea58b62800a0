"""
Utils that can be useful for debugging.
"""

from fairdeck.deck import commit_deck
from fairdeck.rand import SecureRandom
from fairdeck.schnorr import FairnessRule, sign_batch, verify_batch


class FairDealRun:
    """
    Run a full deal: commit to a deck, prove fairness, check the proof.

    Both roles run in-process, so this is only useful to inspect the protocol.

    Args:
        params: Group parameters.
        rule: Fairness rule shared by dealer and verifier.
        rng: Randomness source. Defaults to :py:class:`fairdeck.rand.SecureRandom`.
    """

    def __init__(self, params, rule=None, rng=None):
        if rule is None:
            rule = FairnessRule()
        if rng is None:
            rng = SecureRandom()
        self.params = params
        self.rule = rule
        self.rng = rng

    def verify(self, deck, verbose=True):
        """Deal the deck and run verification."""
        batch = commit_deck(self.params, deck, self.rng)
        signature = sign_batch(self.params, batch, self.rng, self.rule)
        result = verify_batch(self.params, batch.commitments, signature, self.rule)

        if verbose:
            if result:
                print("Fair deal accepted for {0}".format(self.rule))
            else:
                print("Fair deal rejected for {0}".format(self.rule))

        return result
