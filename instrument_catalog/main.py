"""
Instrument Catalog - console entry point.

Builds the demo catalog, prints every instrument through the shared
describe() interface, then inspects the first entry's concrete variant.
"""

import sys
from typing import TextIO

from pydantic import ValidationError

from instrument_catalog import __version__
from instrument_catalog.catalog import Catalog, build_demo_catalog, inspect_and_describe
from instrument_catalog.config import Settings, get_settings
from instrument_catalog.logging import get_logger, setup_logging

logger = get_logger(__name__)


def display_catalog(catalog: Catalog, out: TextIO) -> None:
    """Write one description block per instrument, each followed by a blank line."""
    for description in catalog.descriptions():
        print(description, file=out)
        print(file=out)


def run_demo(out: TextIO) -> Catalog:
    """
    Run the catalog demo against an output stream.

    Args:
        out: Stream receiving the catalog text

    Returns:
        The demo catalog
    """
    catalog = build_demo_catalog()
    logger.info("Built demo catalog with %d instruments", catalog.count())

    display_catalog(catalog, out)
    print(inspect_and_describe(catalog.get(0)), file=out)
    return catalog


def main() -> int:
    """Process entry point."""
    settings_error: ValidationError | None = None
    try:
        settings = get_settings()
    except ValidationError as e:
        settings_error = e
        settings = Settings.model_construct()

    setup_logging(level=settings.log_level, json_output=settings.log_json)
    if settings_error is not None:
        logger.warning(
            "Invalid configuration, using defaults (%d errors): %s",
            settings_error.error_count(),
            settings_error.errors()[0]["msg"],
        )
    logger.info("Instrument Catalog v%s starting", __version__)
    logger.debug("Config: %s", settings.get_redacted_config())

    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
