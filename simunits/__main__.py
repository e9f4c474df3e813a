"""
Entry point for running simunits as a module.

Usage:
    python -m simunits convert speed to_kph 10
    python -m simunits serve --port 8000
"""

import sys

from simunits.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
