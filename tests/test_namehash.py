import pytest

from ens_reverse.chains import ChainId
from ens_reverse.errors import InvalidNameError, UnsupportedChainError
from ens_reverse.namehash import namehash, resolver_check_name, reverse_name


def test_namehash_known_vectors():
    assert namehash("") == b"\x00" * 32
    assert namehash("eth").hex() == "93cdeb708b7545dc668eb9280176169d1c33cfd8ed6f04690a0bcc88a93fc4ae"
    assert namehash("foo.eth").hex() == "de9b09fd7c5f901e23a3f19fecc54828e9c848539801e86591bd9801b019f84f"
    assert namehash("addr.reverse").hex() == "91d1777781884d03a6757a803996e38de2a42967fb37eeaca72729271025a9e2"


def test_namehash_is_case_insensitive():
    assert namehash("Foo.ETH") == namehash("foo.eth")


@pytest.mark.parametrize("bad", [".eth", "foo..eth", "foo.eth.", "."])
def test_namehash_rejects_empty_labels(bad):
    with pytest.raises(InvalidNameError):
        namehash(bad)


def test_namehash_rejects_oversized_label():
    with pytest.raises(InvalidNameError) as exc:
        namehash("a" * 256 + ".eth")
    assert exc.value.reason == "label too long"


def test_reverse_name_is_lower_hex_without_prefix():
    addr = "0xAbCdEF0123456789aBCDef0123456789AbCdEf01"
    assert reverse_name(addr, 1) == "abcdef0123456789abcdef0123456789abcdef01.addr.reverse"
    assert reverse_name(bytes.fromhex(addr[2:]), ChainId.SEPOLIA) == reverse_name(addr, 1)


def test_reverse_name_uses_chain_suffix():
    addr = b"\x11" * 20
    assert reverse_name(addr, ChainId.BASE) == "11" * 20 + ".80002105.reverse"


def test_resolver_check_name():
    assert resolver_check_name(1) == "0.addr.reverse"
    assert resolver_check_name(8453) == "0.80002105.reverse"


def test_reverse_name_unsupported_chain():
    with pytest.raises(UnsupportedChainError):
        reverse_name(b"\x11" * 20, 424242)
