"""
CLI Serve Command

Run the HTTP API under uvicorn.

Usage:
    signer serve [--host HOST] [--port PORT] [--reload]
"""

from __future__ import annotations

import copy
from argparse import Namespace

from api.app import run


EXIT_SUCCESS = 0


def serve_cmd(args: Namespace) -> int:
    """Execute the serve command."""
    config = copy.deepcopy(args.service_config)
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port
    if args.log_level:
        config.log_level = args.log_level

    run(config, reload=args.reload)
    return EXIT_SUCCESS
