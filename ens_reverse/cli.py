"""
ens_reverse.cli
===============

`ens-reverse`: look up the primary name of an account from the command line.

Examples
--------
    $ ens-reverse --rpc https://eth.example resolve 0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045
    $ ens-reverse format 0x000000000000000000000000000000000000dEaD
    $ ens-reverse --chain-id 8453 resolver 0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045
    $ ens-reverse resolver --default
    $ ens-reverse chains

Configuration
-------------
- RPC URL      : `--rpc` or env `ENS_RPC_URL` (default: http://127.0.0.1:8545)
- Chain ID     : `--chain-id` or env `ENS_CHAIN_ID` (default: 1)
- HTTP Timeout : `--timeout` or env `ENS_TIMEOUT` seconds (default: 10.0)
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from typing import Any, Optional

import typer

from .address import to_checksum_address
from .backend import RpcBackend
from .chains import supported_chains
from .config import Config
from .errors import EnsError
from .reverse import format_address, new_reverse_resolver, new_reverse_resolver_for, reverse_resolve
from .version import __version__

app = typer.Typer(
    name="ens-reverse",
    help="Reverse-resolve account addresses to names.",
    no_args_is_help=True,
    add_completion=False,
)

__all__ = ["app", "main"]


@dataclass
class Ctx:
    config: Config


def _print_json(obj: Any) -> None:
    typer.echo(json.dumps(obj, indent=2, ensure_ascii=False))


def _fail(err: Exception) -> None:
    typer.echo(f"error: {err}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def _root(
    ctx: typer.Context,
    rpc: Optional[str] = typer.Option(None, "--rpc", help="Node HTTP JSON-RPC URL."),
    chain_id: Optional[str] = typer.Option(None, "--chain-id", help="Chain id (decimal or 0x-hex)."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="HTTP timeout in seconds."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level."),
) -> None:
    """Resolve effective configuration (flags over ENS_* environment)."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = Config.with_overrides(
            Config.from_env(), rpc_url=rpc, chain_id=chain_id, request_timeout=timeout
        )
    except (EnsError, ValueError) as e:
        raise typer.BadParameter(str(e)) from e
    ctx.obj = Ctx(config=config)


def _backend(ctx: typer.Context) -> RpcBackend:
    c: Ctx = ctx.obj
    return c.config.backend()


@app.command("version")
def version() -> None:
    """Print the CLI version."""
    typer.echo(f"ens-reverse {__version__}")


@app.command("chains")
def chains() -> None:
    """List supported chains with their registry and reverse suffix."""
    _print_json([c.to_dict() for c in supported_chains()])


@app.command("resolve")
def resolve(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Account address (0x...)."),
) -> None:
    """Print the primary name of ADDRESS; exits 1 if none resolves."""
    c: Ctx = ctx.obj
    with _backend(ctx) as backend:
        try:
            typer.echo(reverse_resolve(backend, address, c.config.chain_id))
        except EnsError as e:
            _fail(e)


@app.command("format")
def format_(
    ctx: typer.Context,
    address: str = typer.Argument(..., help="Account address (0x...)."),
) -> None:
    """Print the primary name of ADDRESS, or the checksummed address."""
    c: Ctx = ctx.obj
    with _backend(ctx) as backend:
        try:
            typer.echo(format_address(backend, address, c.config.chain_id))
        except EnsError as e:
            # only a malformed address gets here
            _fail(e)


@app.command("resolver")
def resolver(
    ctx: typer.Context,
    address: Optional[str] = typer.Argument(None, help="Account address (0x...)."),
    default: bool = typer.Option(False, "--default", help="Use the reverse registrar's default resolver."),
) -> None:
    """Print the validated reverse resolver for ADDRESS, or the chain default."""
    c: Ctx = ctx.obj
    if (address is None) == (not default):
        raise typer.BadParameter("Provide exactly one of ADDRESS or --default")
    with _backend(ctx) as backend:
        try:
            if default:
                rr = new_reverse_resolver(backend, c.config.chain_id)
            else:
                rr = new_reverse_resolver_for(backend, address, c.config.chain_id)
        except EnsError as e:
            _fail(e)
        typer.echo(to_checksum_address(rr.contract_address))


# --- Entrypoints --------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the CLI. Returns an integer exit code.
    """
    try:
        rv = app(prog_name="ens-reverse", standalone_mode=False, args=argv)
    except typer.Exit as e:
        return int(e.exit_code)
    except Exception as e:
        typer.echo(f"error: {e}", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
