"""
Blockhash resolution modes.

A transaction carries either a recent blockhash fetched from a node or the
durable nonce stored in a nonce account. ``select`` picks the mode from the
caller's three inputs (explicit blockhash, sign-only flag, nonce account) and
``resolve`` turns the mode into the concrete hash, querying the node at most
once.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from ..nonce.state import data_from_account_data
from .datatypes import Hash, Pubkey
from .errors import AccountNotFound, InvalidAccountState, InvalidModeCombination, NetworkUnavailable

if TYPE_CHECKING:
    from ..node_client.node import NodeQueryCapability

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixedHash:
    """Caller supplied the blockhash; nothing is looked up."""
    value: Hash

    def describe(self) -> str:
        return f"fixed blockhash {self.value}"


@dataclass(frozen=True)
class DurableNonce:
    """Blockhash is the durable nonce stored in ``nonce_account``."""
    nonce_account: Pubkey

    def describe(self) -> str:
        return f"durable nonce from {self.nonce_account}"


@dataclass(frozen=True)
class LiveLookup:
    """Blockhash is the node's latest blockhash."""

    def describe(self) -> str:
        return "latest blockhash from node"


@dataclass(frozen=True)
class FeeCalculator:
    """
    Deprecated legacy mode kept for old call paths that asked for a blockhash
    together with its fee calculator. Resolves exactly like ``LiveLookup``.
    """

    def describe(self) -> str:
        return "latest blockhash from node (deprecated fee calculator lookup)"


ResolutionMode = Union[FixedHash, DurableNonce, LiveLookup, FeeCalculator]


@dataclass(frozen=True)
class ResolvedBlockhash:
    """
    Result handed to the transaction builder. When ``nonce_account`` is set the
    builder must prepend an advance-nonce instruction signed by the nonce
    authority.
    """
    blockhash: Hash
    nonce_account: Optional[Pubkey] = None

    @property
    def requires_nonce_advance(self) -> bool:
        return self.nonce_account is not None


def select(
    explicit_value: Optional[Hash],
    sign_only: bool,
    nonce_account: Optional[Pubkey],
) -> ResolutionMode:
    """
    Choose the resolution mode for a transaction build.

    An explicit blockhash always wins, since it never needs a lookup. Without
    one, sign-only mode is rejected because both remaining modes need the
    network.

    Raises:
        InvalidModeCombination: sign-only requested without an explicit blockhash.
    """
    if explicit_value is not None:
        mode: ResolutionMode = FixedHash(explicit_value)
    elif sign_only:
        if nonce_account is not None:
            raise InvalidModeCombination(
                f"Sign-only mode with nonce account {nonce_account} requires an explicit "
                "blockhash: fetch the durable nonce first and pass it with --blockhash"
            )
        raise InvalidModeCombination(
            "Sign-only mode requires an explicit blockhash; no node is reachable offline"
        )
    elif nonce_account is not None:
        mode = DurableNonce(nonce_account)
    else:
        mode = LiveLookup()

    logger.debug(f"Selected blockhash mode: {mode.describe()}")
    return mode


def resolve(mode: ResolutionMode, node: Optional["NodeQueryCapability"]) -> Hash:
    """
    Resolve ``mode`` into a concrete blockhash.

    Args:
        mode: Mode returned by ``select``.
        node: A ``NodeQueryCapability``. Not touched for ``FixedHash``.

    Raises:
        AccountNotFound: The nonce account does not exist.
        InvalidAccountState: The nonce account data is not an initialized nonce.
        NetworkUnavailable: The node query failed, or no node was given for an
            online mode.
    """
    if isinstance(mode, FixedHash):
        return mode.value

    if node is None:
        raise NetworkUnavailable(f"No node connection available to resolve {mode.describe()}")

    if isinstance(mode, DurableNonce):
        data = node.get_account_data(mode.nonce_account)
        if data is None:
            logger.error(f"Nonce account {mode.nonce_account} not found")
            raise AccountNotFound(mode.nonce_account)
        try:
            nonce_data = data_from_account_data(data)
        except InvalidAccountState as e:
            logger.error(f"Nonce account {mode.nonce_account} unusable: {e}")
            raise
        logger.info(f"Resolved durable nonce {nonce_data.durable_nonce} from {mode.nonce_account}")
        return nonce_data.durable_nonce

    if isinstance(mode, FeeCalculator):
        warnings.warn(
            "FeeCalculator blockhash mode is deprecated, use LiveLookup",
            DeprecationWarning,
            stacklevel=2,
        )
        logger.warning("Resolving deprecated FeeCalculator mode as a live lookup")
        blockhash = node.get_recent_blockhash()
        logger.info(f"Resolved latest blockhash {blockhash}")
        return blockhash

    if isinstance(mode, LiveLookup):
        blockhash = node.get_recent_blockhash()
        logger.info(f"Resolved latest blockhash {blockhash}")
        return blockhash

    raise TypeError(f"Unknown blockhash resolution mode: {mode!r}")


def resolve_blockhash(
    explicit_value: Optional[Hash],
    sign_only: bool,
    nonce_account: Optional[Pubkey],
    node: Optional["NodeQueryCapability"] = None,
) -> ResolvedBlockhash:
    """
    Select and resolve in one step, carrying the advance-nonce obligation.

    The obligation is attached whenever a nonce account was given, including
    the offline case where the durable nonce arrives as an explicit blockhash.
    """
    mode = select(explicit_value, sign_only, nonce_account)
    blockhash = resolve(mode, node)
    return ResolvedBlockhash(blockhash=blockhash, nonce_account=nonce_account)
