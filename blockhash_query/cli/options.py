# blockhash_query/cli/options.py
"""
Shared click options for offline signing and durable nonce transactions.
"""

from typing import Optional

import click

from ..core.datatypes import Hash, Pubkey
from ..core.resolution import ResolutionMode, select


class HashParamType(click.ParamType):
    """Base58 encoded 32-byte blockhash."""

    name = "BLOCKHASH"

    def convert(self, value, param, ctx):
        if isinstance(value, Hash):
            return value
        try:
            return Hash.from_string(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


class PubkeyParamType(click.ParamType):
    """Base58 encoded 32-byte account address."""

    name = "PUBKEY"

    def convert(self, value, param, ctx):
        if isinstance(value, Pubkey):
            return value
        try:
            return Pubkey.from_string(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


HASH = HashParamType()
PUBKEY = PubkeyParamType()


blockhash_option = click.option(
    "--blockhash",
    type=HASH,
    default=None,
    help="Use the supplied blockhash instead of looking one up.",
)

sign_only_option = click.option(
    "--sign-only",
    is_flag=True,
    default=False,
    help="Sign the transaction offline. Requires --blockhash.",
)

nonce_option = click.option(
    "--nonce",
    type=PUBKEY,
    default=None,
    help=(
        "Provide the nonce account to use when creating a nonced transaction. "
        "Nonced transactions are useful when a transaction requires a lengthy signing process."
    ),
)

nonce_authority_option = click.option(
    "--nonce-authority",
    type=PUBKEY,
    default=None,
    help="Address of the nonce authority expected to sign the advance-nonce instruction.",
)


def offline_options(func):
    """Attach --blockhash, --sign-only and --nonce to a command."""
    for option in (nonce_option, sign_only_option, blockhash_option):
        func = option(func)
    return func


def blockhash_query_from_options(
    blockhash: Optional[Hash],
    sign_only: bool,
    nonce: Optional[Pubkey],
) -> ResolutionMode:
    """Build the resolution mode from parsed command line values."""
    return select(blockhash, sign_only, nonce)
