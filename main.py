#!/usr/bin/env python3
"""SDK Operation Catalog - Entry point."""
import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from opcatalog.cli.main import cli


if __name__ == "__main__":
    cli()
