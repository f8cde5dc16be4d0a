# =============================================================================
# main.py  -  Entry Point for the HubSpot MCP Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py                          → MCP server on stdio
#   python main.py get-contact a@b.com      → run one command and exit
#   hubspot-mcp ...                         → same, via the console script
#
# WHAT HAPPENS:
#   1. Logging is pointed at STDERR (stdout belongs to MCP), and LC_TIME
#      follows the user's locale so dates render in their layout
#   2. Settings are read from .env / the environment
#   3. ONE HubSpotClient is created and passed to whichever path runs
#   4. The transport is chosen ONCE from argv:
#        - first argument is a known command → CLI, exit 0/1
#        - anything else                     → MCP stdio server
#
#   The two paths never run at the same time: a CLI invocation finishes
#   and exits without ever opening the MCP channel.
# =============================================================================

import locale
import logging
import sys
from typing import Optional

from core.config import load_settings
from core.errors import ConfigurationError
from core.hubspot_client import HubSpotClient
from tools.cli import is_command, run_command
from tools.mcp_server import run_server


logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def configure_locale() -> None:
    """Use the user's locale for dates (the "Created:" lines use %c)."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.warning("Could not apply the system locale, dates use the C layout: %s", exc)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the server, or run a single command when argv names one."""
    if argv is None:
        argv = sys.argv[1:]

    configure_logging()
    configure_locale()

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return 1
    logging.getLogger().setLevel(settings.log_level)

    with HubSpotClient.from_settings(settings) as client:
        if is_command(argv):
            return run_command(client, argv)
        run_server(client)
    return 0


def cli() -> None:
    """Console-script entry point (hubspot-mcp)."""
    sys.exit(main())


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    cli()
