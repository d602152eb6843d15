"""
Entry point for running the catalog demo as a module.

Usage:
    python -m instrument_catalog
"""

import sys

from instrument_catalog.main import main

sys.exit(main())
