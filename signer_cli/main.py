"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m signer_cli keygen [--json]
    python -m signer_cli sign "<message>" --secret-key HEX [--json]
    python -m signer_cli verify "<message>" --signature HEX --public-key B58 [--json]
    python -m signer_cli serve [--host HOST] [--port PORT] [--reload]
    python -m signer_cli config --init | --show

Environment Variables:
    SIGNER_HOST             Listen address (default: 0.0.0.0)
    SIGNER_PORT / PORT      Listen port (default: 5000)
    SIGNER_LOG_LEVEL        Log level (default: INFO)
    SIGNER_LOG_FILE         Optional log file
    SIGNER_CORS_ORIGINS     Comma-separated allowed origins (default: *)
"""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import Sequence

from signer_cli import __version__
from signer_cli.commands import keys, serve
from api.app import setup_logging
from core.config import load_config, get_default_config_template


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="signer",
        description="Signer CLI - Generate Ed25519 keys, sign and verify messages, run the API.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./signer.json or ~/.config/signer/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- keygen command ---
    keygen_parser = subparsers.add_parser(
        "keygen",
        help="Generate a new Ed25519 key pair",
        description="Print a base58 public key and a hex 64-byte secret key.",
    )
    keygen_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    keygen_parser.set_defaults(func=keys.keygen_cmd)

    # --- sign command ---
    sign_parser = subparsers.add_parser(
        "sign",
        help="Sign a message",
        description="Produce a detached hex signature over the UTF-8 message.",
    )
    sign_parser.add_argument("message", type=str, help="Message to sign")
    sign_parser.add_argument(
        "--secret-key", "-k",
        type=str,
        required=True,
        help="Hex encoded 64-byte secret key",
    )
    sign_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    sign_parser.set_defaults(func=keys.sign_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a signed message",
        description="Exit 0 if the signature is valid, 2 if it is not.",
    )
    verify_parser.add_argument("message", type=str, help="Message that was signed")
    verify_parser.add_argument(
        "--signature", "-s",
        type=str,
        required=True,
        help="Hex encoded signature",
    )
    verify_parser.add_argument(
        "--public-key", "-p",
        type=str,
        required=True,
        help="Base58 encoded public key",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    verify_parser.set_defaults(func=keys.verify_cmd)

    # --- serve command ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
        description="Serve the signer API with uvicorn.",
    )
    serve_parser.add_argument("--host", type=str, default=None, help="Listen address")
    serve_parser.add_argument("--port", type=int, default=None, help="Listen port")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        default=False,
        help="Reload on code changes (development)",
    )
    serve_parser.set_defaults(func=serve.serve_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="signer.json",
        help="Path for config file (default: signer.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (SIGNER_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.service_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: signer config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.service_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level.upper() == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
