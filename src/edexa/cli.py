"""
eDexa CLI

Command-line interface for the eDexa token SDK.

Commands:
  resolve-name  - Forward-resolve a .edx name to an address
  resolve-addr  - Reverse-resolve an address to its name
  resolve       - Legacy registry lookup (addresses pass through)
  balance       - Token balance of an account
  whoami        - Show the wallet address for PRIVATE_KEY
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Optional

import click

from . import __version__
from .client import EdexaClient
from .config import DEFAULT_RPC_URL, load_config
from .errors import EdexaError, MissingValueError
from .naming.resolver import ResolutionKind
from .wallet import load_private_key

_STANDARDS = ("erc20", "erc721", "erc1155", "stablecoin")


def _run(coro):
    """Run a coroutine, turning SDK errors into a red message and exit code."""
    try:
        return asyncio.run(coro)
    except EdexaError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(exc.exit_code)
    except (MissingValueError, ValueError) as exc:
        # bad caller input, e.g. a non-numeric --token-id
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


def _client(ctx: click.Context) -> EdexaClient:
    return ctx.obj["client"]


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=__version__, prog_name="edexa")
@click.option(
    "--rpc-url",
    envvar="EDEXA_RPC_URL",
    default=DEFAULT_RPC_URL,
    show_default=True,
    help="eDexa JSON-RPC endpoint",
)
@click.option("--verbose", "-v", is_flag=True, help="Log RPC traffic to stderr")
@click.pass_context
def cli(ctx: click.Context, rpc_url: str, verbose: bool) -> None:
    """eDexa token SDK command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    if "client" not in ctx.obj:
        config = load_config().replace(rpc_url=rpc_url)
        ctx.obj["client"] = EdexaClient(config)


# ============ Name resolution ============


@cli.command("resolve-name")
@click.argument("name")
@click.pass_context
def resolve_name(ctx: click.Context, name: str) -> None:
    """Resolve NAME (e.g. alice.edx) to an address."""
    result = _run(_client(ctx).resolve_name_to_address(name))
    if result.kind is ResolutionKind.RESOLVED_ADDRESS:
        click.echo(result.value)
        return
    fg = "red" if result.kind is ResolutionKind.INVALID_FORMAT else "yellow"
    click.secho(result.message, fg=fg)
    sys.exit(1)


@cli.command("resolve-addr")
@click.argument("address")
@click.pass_context
def resolve_addr(ctx: click.Context, address: str) -> None:
    """Resolve ADDRESS to its reverse-registered name."""
    result = _run(_client(ctx).resolve_address_to_name(address))
    if result.kind is ResolutionKind.RESOLVED_NAME:
        click.echo(result.value)
        return
    fg = "red" if result.kind is ResolutionKind.INVALID_FORMAT else "yellow"
    click.secho(result.message, fg=fg)
    sys.exit(1)


@cli.command("resolve")
@click.argument("value")
@click.pass_context
def resolve(ctx: click.Context, value: str) -> None:
    """Return VALUE if it is an address, else look it up in the legacy registry."""
    click.echo(_run(_client(ctx).resolve_ens_or_return_address(value)))


# ============ Tokens ============


@cli.command()
@click.option(
    "--standard",
    type=click.Choice(_STANDARDS, case_sensitive=False),
    default="erc20",
    show_default=True,
    help="Token standard of the contract",
)
@click.option("--contract", required=True, help="Token contract address")
@click.option("--account", required=True, help="Account address or name")
@click.option("--token-id", default=None, help="Token id (ERC-1155 only)")
@click.pass_context
def balance(
    ctx: click.Context,
    standard: str,
    contract: str,
    account: str,
    token_id: Optional[str],
) -> None:
    """Show the token balance of an account."""
    client = _client(ctx)
    standard = standard.lower()

    if standard == "erc1155":
        if token_id is None:
            raise click.UsageError("--token-id is required for ERC-1155 balances")
        value = _run(client.get_erc1155_instance(contract).get_balance(account, token_id))
    elif standard == "erc721":
        value = _run(client.get_erc721_instance(contract).get_balance(account))
    elif standard == "stablecoin":
        value = _run(client.get_stable_coin_instance(contract).get_balance(account))
    else:
        value = _run(client.get_erc20_instance(contract).get_balance(account))

    click.echo(click.style("  Contract: ", dim=True) + contract)
    click.echo(click.style("  Account:  ", dim=True) + account)
    click.echo(click.style("  Balance:  ", dim=True) + click.style(str(value), bold=True))


# ============ Identity ============


@cli.command()
@click.pass_context
def whoami(ctx: click.Context) -> None:
    """Show current wallet identity."""
    try:
        signer = _client(ctx).create_wallet_signer(load_private_key())
    except (ValueError, FileNotFoundError):
        click.echo("No wallet found.")
        click.echo("Set PRIVATE_KEY in the environment or in ~/.edexa/.env.")
        sys.exit(1)
    click.echo(f"Address: {signer.address}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
