"""
Node query capability consumed by blockhash resolution.
"""

from typing import Optional, Protocol, runtime_checkable

from ..core.datatypes import Hash, Pubkey


@runtime_checkable
class NodeQueryCapability(Protocol):
    """The two node reads resolution needs. Both may raise NetworkUnavailable."""

    def get_recent_blockhash(self) -> Hash:
        ...

    def get_account_data(self, address: Pubkey) -> Optional[bytes]:
        """Raw account data, or None when no account exists at ``address``."""
        ...
