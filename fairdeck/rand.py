"""
Randomness sources.

Every operation that needs randomness takes a source explicitly. Sources are not thread-safe: give
each thread or task its own instance.
"""

import abc
import warnings

from petlib.bn import Bn

from fairdeck.consts import CHALLENGE_HASH
from fairdeck.exceptions import RandomnessError
from fairdeck.utils import ensure_bn


class RandomnessSource(metaclass=abc.ABCMeta):
    """
    Abstract source of uniformly random scalars.
    """

    @abc.abstractmethod
    def random_below(self, bound):
        """
        Draw a uniformly random big number in :math:`[0, bound)`.

        Should raise :py:class:`RandomnessError` if no secure value can be produced.
        """
        pass


class SecureRandom(RandomnessSource):
    """
    Source backed by the OpenSSL CSPRNG, through petlib.
    """

    def random_below(self, bound):
        bound = ensure_bn(bound)
        if bound <= 0:
            raise ValueError("Bound must be positive")
        try:
            return bound.random()
        except Exception as e:
            raise RandomnessError("OpenSSL failed to produce randomness") from e


class SeededRandom(RandomnessSource):
    """
    Deterministic source for tests and reproducible transcripts.

    Values are drawn from a hash in counter mode over the seed. The output is 512 bits wide and
    reduced modulo the bound, so the bias is negligible for 256-bit groups.

    .. WARNING ::

        Anyone who knows the seed learns every blinding factor and nonce.

    >>> a, b = SeededRandom(1), SeededRandom(1)
    >>> a.random_below(1000) == b.random_below(1000)
    True

    Args:
        seed: Integer, string, or bytes seed.
    """

    def __init__(self, seed, hash_fn=CHALLENGE_HASH):
        warnings.warn("SeededRandom is deterministic and must not be used for real games")
        if isinstance(seed, int):
            seed = b"%i" % seed
        elif isinstance(seed, str):
            seed = seed.encode("utf-8")
        self.seed = seed
        self.hash_fn = hash_fn
        self.counter = 0

    def random_below(self, bound):
        bound = ensure_bn(bound)
        if bound <= 0:
            raise ValueError("Bound must be positive")
        block = self.hash_fn(self.seed + b"|%i" % self.counter).digest()
        self.counter += 1
        return Bn.from_binary(block) % bound
