"""
Module execution entry point.

Allows running with: python -m signer_cli
"""

import sys
from signer_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
