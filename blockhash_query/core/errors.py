#!/usr/bin/env python3
"""
Blockhash query errors
Error classes and handlers for blockhash selection and resolution
"""

import logging
from contextlib import contextmanager
from typing import Generator

import httpx

logger = logging.getLogger(__name__)


class BlockhashQueryError(Exception):
    """Base exception for blockhash query errors"""

    pass


class InvalidModeCombination(BlockhashQueryError):
    """The caller's inputs do not describe a legal resolution mode"""

    pass


class AccountNotFound(BlockhashQueryError):
    """Nonce account address does not resolve to an existing account"""

    def __init__(self, address):
        self.address = address
        super().__init__(f"Nonce account not found: {address}")


class InvalidAccountState(BlockhashQueryError):
    """Account exists but does not hold a usable nonce state"""

    pass


class NetworkUnavailable(BlockhashQueryError):
    """A node query failed; retrying is up to the caller"""

    pass


@contextmanager
def node_error_handler(operation: str) -> Generator[None, None, None]:
    """
    Context manager converting transport failures into NetworkUnavailable.

    Args:
        operation: Name of the node operation being performed
    """
    try:
        yield
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
        logger.error(f"Error in node operation '{operation}': {e}")
        raise NetworkUnavailable(f"Failed {operation}: {e}") from e
