"""
Node client package: the query capability resolution depends on and its
JSON-RPC implementation.
"""

from .node import NodeQueryCapability
from .rpc_client import AccountInfo, NodeRpcClient

__all__ = [
    "NodeQueryCapability",
    "AccountInfo",
    "NodeRpcClient",
]
