"""
Mock node client for blockhash resolution tests
Records every query so tests can assert how often the node was touched
"""

from typing import Dict, List, Optional, Tuple

from blockhash_query.core.datatypes import Hash, Pubkey
from blockhash_query.core.errors import NetworkUnavailable


class MockNodeClient:
    """In-memory stand-in for the node query capability"""

    def __init__(self, blockhash: Optional[Hash] = None, **kwargs):
        self.blockhash = blockhash or Hash(bytes([1] * 32))
        self.accounts: Dict[Pubkey, bytes] = {}
        self.calls: List[Tuple] = []
        self.fail_with: Optional[Exception] = None
        self.closed = False
        # Connection settings passed by the CLI factory
        self.rpc_url = kwargs.get("rpc_url")
        self.commitment = kwargs.get("commitment")

    def set_account(self, address: Pubkey, data: bytes):
        """Store raw account data at ``address``"""
        self.accounts[address] = data

    def go_offline(self, message: str = "connection refused"):
        """Make every following query fail"""
        self.fail_with = NetworkUnavailable(message)

    def get_recent_blockhash(self) -> Hash:
        self.calls.append(("get_recent_blockhash",))
        if self.fail_with:
            raise self.fail_with
        return self.blockhash

    def get_account_data(self, address: Pubkey) -> Optional[bytes]:
        self.calls.append(("get_account_data", address))
        if self.fail_with:
            raise self.fail_with
        return self.accounts.get(address)

    def call_count(self, method: str) -> int:
        return sum(1 for call in self.calls if call[0] == method)

    def close(self):
        self.closed = True
