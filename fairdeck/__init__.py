__version__ = "0.1.0"
__title__ = "fairdeck"
__author__ = "fairdeck developers"
__email__ = "fairdeck@users.noreply.github.com"
__url__ = "https://github.com/fairdeck/fairdeck"
__license__ = "MIT"
__description__ = "Pedersen-committed decks and aggregate Schnorr fairness proofs for Skull-style card games."
__copyright__ = "2026, fairdeck developers"


from fairdeck.cards import Card, CardEncoding, DEFAULT_DECK, card_to_scalar
from fairdeck.params import GroupParameters, init_generators
from fairdeck.commitment import Commitment, Revelation, commit, decommit
from fairdeck.deck import DeckCommitmentBatch, commit_deck
from fairdeck.schnorr import FairnessRule, SchnorrSignature, sign, verify
from fairdeck.rand import SecureRandom, SeededRandom
