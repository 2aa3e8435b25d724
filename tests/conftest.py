import pytest

from ens_reverse.namehash import namehash
from fakechain import ALICE, BOB, DEFAULT_RESOLVER, REGISTRAR, RESOLVER, ZERO, FakeChain, reverse_node


@pytest.fixture
def chain() -> FakeChain:
    return FakeChain()


@pytest.fixture
def ens(chain: FakeChain) -> FakeChain:
    """
    Mainnet-like setup: ALICE's reverse record points at RESOLVER which
    names her "alice.eth"; the reverse registrar owns addr.reverse and its
    default resolver knows BOB as "bob.eth".
    """
    records = chain.deploy_registry()
    records[reverse_node(ALICE)] = (ALICE, RESOLVER)
    records[namehash("addr.reverse")] = (REGISTRAR, ZERO)
    chain.deploy_resolver(RESOLVER, {reverse_node(ALICE): "alice.eth"})
    chain.deploy_resolver(DEFAULT_RESOLVER, {reverse_node(BOB): "bob.eth"})
    chain.deploy_registrar(REGISTRAR, DEFAULT_RESOLVER)
    return chain
