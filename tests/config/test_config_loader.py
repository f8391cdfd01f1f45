import pytest

from blockhash_query.config.config_loader import (
    ConfigError,
    load_cli_config,
    resolve_connection,
)
from blockhash_query.config.settings import Settings, normalize_rpc_url


def test_missing_file_gives_defaults(tmp_path):
    config = load_cli_config(tmp_path / "absent.yml")
    assert config.json_rpc_url == "http://localhost:8899"
    assert config.commitment == "confirmed"


def test_reads_yaml_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(
        "---\n"
        "json_rpc_url: https://api.testnet.solana.com\n"
        "websocket_url: ''\n"
        "keypair_path: /home/user/.config/solana/id.json\n"
        "commitment: Finalized\n"
    )
    config = load_cli_config(path)
    assert config.json_rpc_url == "https://api.testnet.solana.com"
    assert config.commitment == "finalized"
    assert set(config.model_dump()) == {"json_rpc_url", "commitment"}


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("")
    assert load_cli_config(path).commitment == "confirmed"


@pytest.mark.parametrize(
    "content",
    [
        "json_rpc_url: [unterminated\n",
        "- just\n- a list\n",
        "commitment: eventually\n",
    ],
)
def test_invalid_file_raises_config_error(tmp_path, content):
    path = tmp_path / "config.yml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_cli_config(path)


def test_resolve_connection_precedence(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("json_rpc_url: https://api.testnet.solana.com\ncommitment: processed\n")

    from_file = resolve_connection(config_file=path)
    assert from_file == {"url": "https://api.testnet.solana.com", "commitment": "processed"}

    explicit = resolve_connection("devnet", "finalized", config_file=path)
    assert explicit == {"url": "https://api.devnet.solana.com", "commitment": "finalized"}


def test_resolve_connection_rejects_unknown_moniker(tmp_path):
    with pytest.raises(ConfigError, match="moniker"):
        resolve_connection("nowhere", config_file=tmp_path / "absent.yml")


def test_normalize_rpc_url():
    assert normalize_rpc_url("mainnet-beta") == "https://api.mainnet-beta.solana.com"
    assert normalize_rpc_url(" http://127.0.0.1:8899 ") == "http://127.0.0.1:8899"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BHQ_RPC_URL", "testnet")
    monkeypatch.setenv("BHQ_COMMITMENT", "PROCESSED")
    monkeypatch.setenv("BHQ_HTTP_TIMEOUT_SECONDS", "5")
    settings = Settings(_env_file=None)
    assert settings.RPC_URL == "https://api.testnet.solana.com"
    assert settings.COMMITMENT == "processed"
    assert settings.HTTP_TIMEOUT_SECONDS == 5.0


def test_settings_reject_bad_commitment(monkeypatch):
    monkeypatch.setenv("BHQ_COMMITMENT", "eventually")
    with pytest.raises(ValueError):
        Settings(_env_file=None)
