"""
Test configuration and fixtures for blockhash query tests
"""

import os

import pytest


@pytest.fixture
def sample_blockhash():
    """A deterministic 32-byte blockhash"""
    from blockhash_query.core.datatypes import Hash

    return Hash(bytes(range(1, 33)))


@pytest.fixture
def durable_nonce():
    """Value stored inside the test nonce account"""
    from blockhash_query.core.datatypes import Hash

    return Hash(bytes([7] * 32))


@pytest.fixture
def nonce_address():
    """Address of the test nonce account"""
    from blockhash_query.core.datatypes import Pubkey

    return Pubkey(bytes([42] * 32))


@pytest.fixture
def nonce_authority():
    """Authority of the test nonce account"""
    from blockhash_query.core.datatypes import Pubkey

    return Pubkey(bytes([9] * 32))


@pytest.fixture
def nonce_account_bytes(durable_nonce, nonce_authority):
    """Raw data of an initialized, current-version nonce account"""
    from blockhash_query.nonce.state import NonceData, NonceVersion, NonceVersions

    return NonceVersions(
        version=NonceVersion.CURRENT,
        data=NonceData(
            authority=nonce_authority,
            durable_nonce=durable_nonce,
            lamports_per_signature=5000,
        ),
    ).encode()


@pytest.fixture
def mock_node(sample_blockhash, nonce_address, nonce_account_bytes):
    """Mock node holding the test nonce account, no real network calls"""
    from tests.core.mock_node import MockNodeClient

    node = MockNodeClient(blockhash=sample_blockhash)
    node.set_account(nonce_address, nonce_account_bytes)
    return node


# Setup test environment
def pytest_configure(config):
    """Configure test environment"""
    # Log output shares the CliRunner stream with command output
    os.environ["BHQ_LOG_LEVEL"] = "WARNING"
    os.environ["BHQ_RPC_URL"] = "http://localhost:8899"
    # Keep a developer's real CLI config file out of the tests
    os.environ["BHQ_CONFIG_FILE"] = os.path.join(
        os.path.dirname(__file__), "does-not-exist", "config.yml"
    )

    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "cli: mark test as exercising the command line")
