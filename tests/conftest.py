import pytest

from petlib.ec import EcGroup

from fairdeck.params import init_generators
from fairdeck.rand import SecureRandom, SeededRandom


@pytest.fixture(params=[714, 713], ids=["secp256k1", "secp224r1"])
def group(request):
    return EcGroup(request.param)


@pytest.fixture
def params(group):
    return init_generators(group)


@pytest.fixture
def rng():
    return SecureRandom()


@pytest.fixture
def seeded_rng():
    with pytest.warns(UserWarning):
        return SeededRandom(42)
