"""
JSON-RPC node client for blockhash resolution
Provides the node query capability over HTTP using httpx
"""

import base64
import itertools
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from ..config.settings import settings
from ..core.datatypes import Hash, Pubkey
from ..core.errors import NetworkUnavailable, node_error_handler
from ..nonce.state import NonceData, check_account_identity, data_from_account_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountInfo:
    """Account as returned by getAccountInfo"""
    owner: Pubkey
    lamports: int
    data: bytes
    executable: bool = False


class NodeRpcClient:
    """Synchronous JSON-RPC client for a node"""

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        commitment: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.rpc_url = rpc_url or settings.RPC_URL
        self.commitment = commitment or settings.COMMITMENT
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self._ids = itertools.count(1)
        self._http = httpx.Client(timeout=self.timeout, transport=transport)
        logger.debug(f"Node client for {self.rpc_url} (commitment={self.commitment})")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the underlying HTTP connection pool"""
        self._http.close()

    def _request(self, method: str, params: List[Any]) -> Any:
        """Send one JSON-RPC request and return its ``result``"""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        with node_error_handler(method):
            response = self._http.post(self.rpc_url, json=payload)
            response.raise_for_status()
            body = response.json()

        if not isinstance(body, dict):
            raise NetworkUnavailable(f"Failed {method}: malformed response {body!r}")
        if "error" in body:
            error = body["error"] or {}
            logger.error(f"RPC error from {method}: {error}")
            raise NetworkUnavailable(
                f"Failed {method}: RPC error {error.get('code')}: {error.get('message')}"
            )
        if "result" not in body:
            raise NetworkUnavailable(f"Failed {method}: response has no result")
        return body["result"]

    def _commitment_config(self) -> Dict[str, str]:
        return {"commitment": self.commitment}

    def get_recent_blockhash(self) -> Hash:
        """Latest blockhash at the configured commitment"""
        result = self._request("getLatestBlockhash", [self._commitment_config()])
        with node_error_handler("getLatestBlockhash"):
            blockhash = Hash.from_string(result["value"]["blockhash"])
        logger.debug(f"Latest blockhash: {blockhash}")
        return blockhash

    def is_blockhash_valid(self, blockhash: Hash) -> bool:
        """Whether the node still accepts ``blockhash`` for new transactions"""
        result = self._request("isBlockhashValid", [str(blockhash), self._commitment_config()])
        with node_error_handler("isBlockhashValid"):
            return bool(result["value"])

    def get_account_info(self, address: Pubkey) -> Optional[AccountInfo]:
        """Fetch an account, None if it does not exist"""
        config = {"encoding": "base64", **self._commitment_config()}
        result = self._request("getAccountInfo", [str(address), config])
        if not isinstance(result, dict) or "value" not in result:
            raise NetworkUnavailable(f"Failed getAccountInfo: malformed result {result!r}")
        value = result["value"]
        if value is None:
            logger.debug(f"No account at {address}")
            return None

        with node_error_handler("getAccountInfo"):
            encoded, encoding = value["data"]
            if encoding != "base64":
                raise ValueError(f"unexpected account data encoding '{encoding}'")
            return AccountInfo(
                owner=Pubkey.from_string(value["owner"]),
                lamports=int(value.get("lamports", 0)),
                data=base64.b64decode(encoded),
                executable=bool(value.get("executable", False)),
            )

    def get_account_data(self, address: Pubkey) -> Optional[bytes]:
        """
        Raw data of a nonce account candidate, None if it does not exist.

        Raises InvalidAccountState when the account exists but is not owned
        by the system program or holds no data.
        """
        info = self.get_account_info(address)
        if info is None:
            return None
        check_account_identity(info.owner, info.data)
        return info.data

    def get_nonce_data(self, address: Pubkey) -> Optional[NonceData]:
        """Decoded nonce account contents, None if the account does not exist"""
        data = self.get_account_data(address)
        if data is None:
            return None
        return data_from_account_data(data)
