import logging

import pytest

from fakechain import ALICE, BOB, DEFAULT_RESOLVER, REGISTRAR, RESOLVER, ZERO, reverse_node
from ens_reverse.address import to_checksum_address
from ens_reverse.chains import ChainId, registry_contract_address
from ens_reverse.errors import (
    AddressError,
    ChainQueryError,
    NoCodeError,
    NoResolutionError,
    NotAResolverError,
    RegistrarNotFoundError,
    RpcError,
    UnsupportedChainError,
)
from ens_reverse.namehash import namehash
from ens_reverse.reverse import (
    ReverseResolver,
    format_address,
    new_reverse_resolver,
    new_reverse_resolver_at,
    new_reverse_resolver_for,
    reverse_resolve,
)

# --- construction at a bare address -------------------------------------------


def test_resolver_at_zero_address_is_not_a_resolver(chain):
    with pytest.raises(NotAResolverError) as exc:
        new_reverse_resolver_at(chain, ZERO, 1)
    assert isinstance(exc.value.__cause__, NoCodeError)
    assert chain.code_lookups == [ZERO]


def test_resolver_at_deployed_contract_queries_placeholder_name(chain):
    chain.deploy_resolver(RESOLVER, {})
    rr = new_reverse_resolver_at(chain, RESOLVER, ChainId.MAINNET)
    assert isinstance(rr, ReverseResolver)
    assert rr.contract_address == RESOLVER
    assert rr.chain_id is ChainId.MAINNET
    # empty answer to the placeholder query is still a valid resolver
    assert chain.names_queried(RESOLVER) == [namehash("0.addr.reverse")]


def test_resolver_at_accepts_hex_string(chain):
    chain.deploy_resolver(RESOLVER, {})
    rr = new_reverse_resolver_at(chain, to_checksum_address(RESOLVER), "1")
    assert rr.contract_address == RESOLVER


def test_resolver_at_surfaces_other_failures(chain):
    # contract exists but does not implement name(bytes32): reverts
    chain.deploy_registrar(REGISTRAR, DEFAULT_RESOLVER)
    with pytest.raises(RpcError) as exc:
        new_reverse_resolver_at(chain, REGISTRAR, 1)
    assert not isinstance(exc.value, NotAResolverError)
    assert exc.value.message == "execution reverted"


def test_resolver_at_surfaces_transport_failure(chain):
    chain.deploy_resolver(RESOLVER, {})
    chain.fail_with = RpcError(message="RPC transport failed", method="eth_call", code=-32098)
    with pytest.raises(RpcError):
        new_reverse_resolver_at(chain, RESOLVER, 1)


def test_resolver_at_code_without_return_data_is_query_error(chain):
    chain.contracts[RESOLVER] = {bytes.fromhex("691f3431"): lambda args: b""}
    with pytest.raises(ChainQueryError) as exc:
        new_reverse_resolver_at(chain, RESOLVER, 1)
    assert not isinstance(exc.value, NoCodeError)


def test_resolver_at_unsupported_chain(chain):
    with pytest.raises(UnsupportedChainError):
        new_reverse_resolver_at(chain, RESOLVER, 999)
    assert chain.calls == []


# --- discovery paths ----------------------------------------------------------


def test_resolver_for_address_uses_registry(ens):
    rr = new_reverse_resolver_for(ens, ALICE, 1)
    assert rr.contract_address == RESOLVER
    assert rr.name(ALICE) == "alice.eth"


def test_resolver_for_address_without_record(ens):
    with pytest.raises(NotAResolverError) as exc:
        new_reverse_resolver_for(ens, BOB, 1)
    assert exc.value.address == to_checksum_address(ZERO)


def test_default_resolver_via_registrar(ens):
    rr = new_reverse_resolver(ens, ChainId.MAINNET)
    assert rr.contract_address == DEFAULT_RESOLVER


def test_default_resolver_queries_with_queried_address_label(ens):
    rr = new_reverse_resolver(ens, 1)
    assert rr.name(BOB) == "bob.eth"
    assert ens.names_queried(DEFAULT_RESOLVER)[-1] == reverse_node(BOB)
    assert reverse_node(REGISTRAR) not in ens.names_queried(DEFAULT_RESOLVER)


def test_default_resolver_missing_registrar(chain):
    chain.deploy_registry()
    with pytest.raises(RegistrarNotFoundError) as exc:
        new_reverse_resolver(chain, 1)
    assert exc.value.domain == "addr.reverse"


def test_default_resolver_registrar_without_code(chain):
    records = chain.deploy_registry()
    records[namehash("addr.reverse")] = (REGISTRAR, ZERO)
    with pytest.raises(NoCodeError):
        new_reverse_resolver(chain, 1)


def test_registry_not_deployed_is_no_code(chain):
    with pytest.raises(NoCodeError):
        new_reverse_resolver_for(chain, ALICE, 1)


# --- name query ---------------------------------------------------------------


def test_name_returns_empty_string_verbatim(ens):
    rr = new_reverse_resolver_at(ens, RESOLVER, 1)
    assert rr.name(BOB) == ""


def test_name_is_idempotent(ens):
    rr = new_reverse_resolver_for(ens, ALICE, 1)
    assert [rr.name(ALICE) for _ in range(3)] == ["alice.eth"] * 3


def test_name_label_is_case_normalized(ens):
    rr = new_reverse_resolver_for(ens, ALICE, 1)
    assert rr.name("0x" + ALICE.hex().upper()) == "alice.eth"


def test_name_propagates_query_failure(ens):
    rr = new_reverse_resolver_for(ens, ALICE, 1)
    ens.fail_with = RpcError(message="boom", method="eth_call", code=-32000)
    with pytest.raises(RpcError):
        rr.name(ALICE)


def test_resolver_is_immutable(ens):
    rr = new_reverse_resolver_for(ens, ALICE, 1)
    with pytest.raises(AttributeError):
        rr.chain_id = ChainId.SEPOLIA  # type: ignore[misc]


# --- composed entry points ----------------------------------------------------


def test_reverse_resolve(ens):
    assert reverse_resolve(ens, ALICE, 1) == "alice.eth"
    assert reverse_resolve(ens, to_checksum_address(ALICE), ChainId.MAINNET) == "alice.eth"


def test_reverse_resolve_issues_registry_then_resolver_queries(ens):
    reverse_resolve(ens, ALICE, 1)
    targets = [to for to, _ in ens.calls]
    assert targets[0] == bytes.fromhex("00000000000c2e074ec69a0dfb2997ba6c7d2e1e")
    assert set(targets[1:]) == {RESOLVER}


def test_reverse_resolve_empty_name_is_no_resolution(ens):
    ens.records[reverse_node(BOB)] = (BOB, RESOLVER)
    with pytest.raises(NoResolutionError) as exc:
        reverse_resolve(ens, BOB, 1)
    assert exc.value.address == to_checksum_address(BOB)


def test_reverse_resolve_without_record(ens):
    with pytest.raises(NotAResolverError):
        reverse_resolve(ens, BOB, 1)


def test_format_address_resolves(ens):
    assert format_address(ens, ALICE, 1) == "alice.eth"


@pytest.mark.parametrize(
    "setup, chain_id",
    [
        (lambda c: None, 1),  # no resolver registered
        (lambda c: c.records.__setitem__(reverse_node(BOB), (BOB, RESOLVER)), 1),  # empty name
        (lambda c: setattr(c, "fail_with", RpcError(message="down", code=-32098)), 1),  # chain error
        (lambda c: None, 31337),  # unsupported chain
    ],
)
def test_format_address_falls_back_to_checksum(ens, setup, chain_id, caplog):
    setup(ens)
    with caplog.at_level(logging.DEBUG, logger="ens_reverse.reverse"):
        assert format_address(ens, BOB, chain_id) == to_checksum_address(BOB)
    assert "reverse resolution of" in caplog.text


def test_format_address_rejects_malformed_address(ens):
    with pytest.raises(AddressError):
        format_address(ens, "not-an-address", 1)


def test_reverse_resolve_on_base(chain):
    records = chain.deploy_registry(ChainId.BASE)
    records[reverse_node(ALICE, ChainId.BASE)] = (ALICE, RESOLVER)
    chain.deploy_resolver(RESOLVER, {reverse_node(ALICE, ChainId.BASE): "alice.base.eth"})

    assert reverse_resolve(chain, ALICE, ChainId.BASE) == "alice.base.eth"

    registry = registry_contract_address(ChainId.BASE)
    assert registry != registry_contract_address(ChainId.MAINNET)
    registry_nodes = [data[4:] for to, data in chain.calls if to == registry]
    assert registry_nodes == [namehash(f"{ALICE.hex()}.80002105.reverse")]
    assert chain.names_queried(RESOLVER) == [
        namehash("0.80002105.reverse"),
        namehash(f"{ALICE.hex()}.80002105.reverse"),
    ]
    # the mainnet-style label is never used on Base
    assert reverse_node(ALICE) not in chain.names_queried(RESOLVER)
