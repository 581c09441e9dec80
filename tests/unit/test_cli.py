"""
CLI Unit Tests

Tests for signer_cli:
- keygen / sign / verify round trip through main()
- exit codes for failed verification and malformed input
- config --init / --show
- serve builds the listener config from flags
"""
import json

import base58
import pytest

from signer_cli.main import (
    main,
    EXIT_SUCCESS,
    EXIT_RUNTIME_ERROR,
    EXIT_VERIFICATION_FAILED,
)


@pytest.fixture(autouse=True)
def isolated_cwd(clean_env, tmp_path):
    """Run each CLI test in an empty directory with no service env vars."""
    clean_env.chdir(tmp_path)
    return tmp_path


def _run_json(capsys, argv):
    code = main(argv)
    out = capsys.readouterr().out
    return code, json.loads(out) if out.strip() else None


class TestKeyCommands:
    def test_keygen_json(self, capsys):
        code, data = _run_json(capsys, ["keygen", "--json"])

        assert code == EXIT_SUCCESS
        assert len(base58.b58decode(data["publicKey"])) == 32
        assert len(bytes.fromhex(data["secretKey"])) == 64

    def test_keygen_human(self, capsys):
        assert main(["keygen"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "public_key: " in out
        assert "secret_key: " in out

    def test_sign_verify_round_trip(self, capsys):
        _, keys = _run_json(capsys, ["keygen", "--json"])
        code, signed = _run_json(
            capsys, ["sign", "hello world", "--secret-key", keys["secretKey"], "--json"]
        )
        assert code == EXIT_SUCCESS

        code, result = _run_json(
            capsys,
            [
                "verify", "hello world",
                "--signature", signed["signature"],
                "--public-key", keys["publicKey"],
                "--json",
            ],
        )

        assert code == EXIT_SUCCESS
        assert result == {"verified": True}

    def test_verify_mismatch_exit_code(self, capsys):
        _, keys = _run_json(capsys, ["keygen", "--json"])
        _, signed = _run_json(capsys, ["sign", "hello world", "-k", keys["secretKey"], "--json"])

        code = main(
            ["verify", "hello world!", "-s", signed["signature"], "-p", keys["publicKey"]]
        )

        assert code == EXIT_VERIFICATION_FAILED
        assert "verified: false" in capsys.readouterr().out

    def test_sign_rejects_bad_secret_key(self, capsys):
        code = main(["sign", "hello", "--secret-key", "abc"])

        assert code == EXIT_RUNTIME_ERROR
        assert "invalid secret key" in capsys.readouterr().err

    def test_verify_rejects_bad_public_key(self, capsys):
        code = main(["verify", "hello", "-s", "00" * 64, "-p", "not-base58!!"])

        assert code == EXIT_RUNTIME_ERROR
        assert "invalid public key" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_RUNTIME_ERROR


class TestConfigCommand:
    def test_init_then_show(self, capsys, isolated_cwd):
        assert main(["config", "--init"]) == EXIT_SUCCESS
        assert (isolated_cwd / "signer.json").exists()
        capsys.readouterr()

        code, data = _run_json(capsys, ["config", "--show"])

        assert code == EXIT_SUCCESS
        assert data["port"] == 5000

    def test_init_refuses_to_overwrite(self, isolated_cwd):
        (isolated_cwd / "signer.json").write_text("{}")

        assert main(["config", "--init"]) == EXIT_RUNTIME_ERROR


class TestServeCommand:
    def test_flags_override_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "signer_cli.commands.serve.run",
            lambda config, reload=False: calls.append((config, reload)),
        )

        code = main(["--log-level", "DEBUG", "serve", "--host", "127.0.0.1", "--port", "8123"])

        assert code == EXIT_SUCCESS
        config, reload = calls[0]
        assert config.host == "127.0.0.1"
        assert config.port == 8123
        assert config.log_level == "DEBUG"
        assert reload is False


class TestLogging:
    def test_cli_shares_service_logging_setup(self):
        from api.app import setup_logging as service_setup_logging
        from signer_cli import main as cli_main

        assert cli_main.setup_logging is service_setup_logging
