# blockhash_query/cli/main.py
"""
Command-line interface for resolving transaction blockhashes.

Commands pick the blockhash a transaction should carry (latest blockhash,
durable nonce, or a value supplied for offline signing) and inspect nonce
accounts.
"""

import json

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from ..config.config_loader import ConfigError, resolve_connection
from ..config.settings import COMMITMENT_LEVELS, logger
from ..core.errors import AccountNotFound, BlockhashQueryError, InvalidModeCombination
from ..core.resolution import DurableNonce, FixedHash, ResolvedBlockhash, resolve
from ..node_client.rpc_client import NodeRpcClient
from ..nonce.state import check_nonce_account, data_from_account_data
from .options import (
    PUBKEY,
    blockhash_query_from_options,
    nonce_authority_option,
    offline_options,
)


def connection_options(func):
    """Attach --url, --commitment and --config to a command."""
    func = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False),
        default=None,
        help="CLI config file (json_rpc_url, commitment).",
    )(func)
    func = click.option(
        "--commitment",
        type=click.Choice(COMMITMENT_LEVELS),
        default=None,
        help="Commitment level for node queries.",
    )(func)
    func = click.option(
        "--url",
        "-u",
        default=None,
        help="JSON-RPC URL of the node (uses the config file or BHQ_RPC_URL by default).",
    )(func)
    return func


def _open_node(ctx, url, commitment, config_file):
    """Create the node client, honoring a factory injected through ctx.obj."""
    try:
        connection = resolve_connection(url, commitment, config_file)
    except ConfigError as e:
        raise click.ClickException(str(e))
    factory = ctx.obj.get("node_factory", NodeRpcClient)
    logger.debug(f"Connecting to {connection['url']} ({connection['commitment']})")
    return factory(rpc_url=connection["url"], commitment=connection["commitment"])


def _read_nonce_data(node, address):
    data = node.get_account_data(address)
    if data is None:
        raise AccountNotFound(address)
    return data_from_account_data(data)


def _close_node(node):
    close = getattr(node, "close", None)
    if callable(close):
        close()


@click.group()
@click.pass_context
def cli(ctx):
    """
    Blockhash selection for online and offline transaction signing.
    """
    ctx.ensure_object(dict)


@cli.command("resolve")
@offline_options
@nonce_authority_option
@connection_options
@click.option(
    "--output",
    type=click.Choice(["display", "json"]),
    default="display",
    help="Output format.",
)
@click.pass_context
def resolve_cmd(ctx, blockhash, sign_only, nonce, nonce_authority, url, commitment, config_file, output):
    """
    Resolve the blockhash a transaction should be built with.
    """
    console = Console()

    try:
        mode = blockhash_query_from_options(blockhash, sign_only, nonce)
    except InvalidModeCombination as e:
        raise click.UsageError(str(e), ctx=ctx)
    if nonce_authority is not None and nonce is None:
        raise click.UsageError("--nonce-authority requires --nonce", ctx=ctx)

    verify_authority = nonce_authority is not None and not sign_only

    # Offline resolution never opens a connection
    node = None
    if not isinstance(mode, FixedHash) or verify_authority:
        node = _open_node(ctx, url, commitment, config_file)

    try:
        if verify_authority and isinstance(mode, DurableNonce):
            # One read serves both the blockhash and the authority check
            nonce_data = _read_nonce_data(node, nonce)
            blockhash_value = nonce_data.durable_nonce
            check_nonce_account(nonce_data, nonce_authority, blockhash_value)
        else:
            blockhash_value = resolve(mode, node)
            if verify_authority:
                check_nonce_account(_read_nonce_data(node, nonce), nonce_authority, blockhash_value)
        if verify_authority:
            logger.debug(f"Nonce account {nonce} verified for authority {nonce_authority}")
        resolved = ResolvedBlockhash(blockhash=blockhash_value, nonce_account=nonce)
    except BlockhashQueryError as e:
        console.print(f":cross_mark: [bold red]Error:[/bold red] {e}")
        ctx.exit(1)
    finally:
        if node is not None:
            _close_node(node)

    if output == "json":
        click.echo(
            json.dumps(
                {
                    "blockhash": str(resolved.blockhash),
                    "mode": type(mode).__name__,
                    "nonceAccount": str(nonce) if nonce else None,
                    "requiresNonceAdvance": resolved.requires_nonce_advance,
                    "signOnly": sign_only,
                }
            )
        )
        return

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Mode", mode.describe())
    table.add_row("Blockhash", f"[bold blue]{resolved.blockhash}[/bold blue]")
    if sign_only:
        table.add_row("Sign only", "[yellow]yes[/yellow]")
    console.print(table)

    if resolved.requires_nonce_advance:
        console.print(
            Panel(
                f"Prepend an advance-nonce instruction for [green]{nonce}[/green], "
                "signed by the nonce authority, before submitting.",
                title="[bold yellow]Durable nonce[/]",
                border_style="yellow",
            )
        )


@cli.command("nonce-account")
@click.argument("address", type=PUBKEY)
@connection_options
@click.pass_context
def nonce_account_cmd(ctx, address, url, commitment, config_file):
    """
    Show the contents of a nonce account.
    """
    console = Console()
    console.print(f"⏳ Querying nonce account [blue]{address}[/blue]...")

    node = _open_node(ctx, url, commitment, config_file)
    try:
        nonce_data = _read_nonce_data(node, address)
    except BlockhashQueryError as e:
        console.print(f":cross_mark: [bold red]Error:[/bold red] {e}")
        ctx.exit(1)
    finally:
        _close_node(node)

    table = Table(title=f"Nonce account {address}", box=box.SIMPLE)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("Nonce blockhash", f"[bold blue]{nonce_data.durable_nonce}[/bold blue]")
    table.add_row("Authority", str(nonce_data.authority))
    table.add_row("Fee", f"{nonce_data.lamports_per_signature:,} lamports per signature")
    console.print(table)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
