import pytest

from ens_reverse.backend import RpcBackend
from ens_reverse.chains import ChainId
from ens_reverse.config import Config
from ens_reverse.errors import UnsupportedChainError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("RPC_URL", "CHAIN_ID", "TIMEOUT", "MAX_RETRIES", "BACKOFF", "USER_AGENT"):
        monkeypatch.delenv(f"ENS_{key}", raising=False)


def test_defaults():
    cfg = Config.from_env()
    assert cfg.rpc_url == "http://127.0.0.1:8545"
    assert cfg.chain_id is ChainId.MAINNET
    assert cfg.request_timeout == 10.0
    assert cfg.max_retries == 3
    assert cfg.user_agent.startswith("ens-reverse/")


def test_from_env(monkeypatch):
    monkeypatch.setenv("ENS_RPC_URL", "https://rpc.example")
    monkeypatch.setenv("ENS_CHAIN_ID", "0x2105")
    monkeypatch.setenv("ENS_TIMEOUT", "2.5")
    monkeypatch.setenv("ENS_MAX_RETRIES", "0")
    cfg = Config.from_env()
    assert cfg.rpc_url == "https://rpc.example"
    assert cfg.chain_id is ChainId.BASE
    assert cfg.request_timeout == 2.5
    assert cfg.max_retries == 0


def test_rejects_bad_values(monkeypatch):
    with pytest.raises(ValueError):
        Config(rpc_url="ws://127.0.0.1:8546")
    monkeypatch.setenv("ENS_CHAIN_ID", "31337")
    with pytest.raises(UnsupportedChainError):
        Config.from_env()


def test_with_overrides_ignores_none_and_unknown():
    base = Config(rpc_url="http://a.test", chain_id=ChainId.SEPOLIA)
    cfg = Config.with_overrides(base, rpc_url=None, chain_id="1", bogus=True)
    assert cfg.rpc_url == "http://a.test"
    assert cfg.chain_id is ChainId.MAINNET
    assert cfg.to_dict()["chain_id"] == 1


def test_backend_owns_its_client():
    backend = Config(rpc_url="http://a.test").backend()
    assert isinstance(backend, RpcBackend)
    with backend:
        pass
