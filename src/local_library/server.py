"""Local Library catalog server.

Registers the catalog resources with FastMCP and runs them over the
configured transport (stdio or streamable HTTP).
"""

import logging
import signal
import sys
from typing import Any

from fastmcp import FastMCP

from .config import LibraryConfig, get_config
from .database.session import get_db_manager
from .observability import initialize_observability
from .resources import catalog_resources

logger = logging.getLogger(__name__)


def configure_logging(config: LibraryConfig) -> None:
    """Send log records to stderr so stdout stays free for the stdio transport."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    if not config.is_development:
        logging.getLogger("fastmcp").setLevel(logging.WARNING)


def create_server(config: LibraryConfig) -> FastMCP:
    """Create the FastMCP server with every catalog resource registered."""
    mcp = FastMCP(
        name=config.server_name,
        version=config.server_version,
        instructions=(
            "Local Library catalog. Read library://authors/list for the author "
            "list and library://books/status for the books available to borrow."
        ),
    )

    for resource in catalog_resources:
        mcp.resource(
            uri=resource["uri"],
            name=resource["name"],
            description=resource["description"],
            mime_type=resource["mime_type"],
        )(resource["handler"])

    logger.info("Registered %d catalog resources", len(catalog_resources))
    return mcp


def run_server(mcp: FastMCP, config: LibraryConfig) -> None:
    """Run ``mcp`` over the configured transport until interrupted."""

    def signal_handler(signum: int, _frame: Any) -> None:
        logger.info("Received signal %s, initiating shutdown...", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    logger.info(
        "Starting %s v%s on %s transport",
        config.server_name,
        config.server_version,
        config.transport,
    )

    if config.transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="streamable-http", host=config.http_host, port=config.http_port)


def main() -> None:
    """Entry point for ``local-library``."""
    config = get_config()
    configure_logging(config)

    try:
        logger.info("=" * 60)
        logger.info("Local Library Catalog Server")
        logger.info("Version: %s", config.server_version)
        logger.info("Transport: %s", config.transport)
        logger.info("Debug Mode: %s", config.debug)
        logger.info("=" * 60)

        initialize_observability()

        db_manager = get_db_manager()
        if not db_manager.verify_connection():
            logger.error("Failed to connect to database")
            sys.exit(1)
        db_manager.init_database()

        run_server(create_server(config), config)

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception:
        logger.exception("Failed to start catalog server")
        sys.exit(1)
    finally:
        get_db_manager().close()


if __name__ == "__main__":
    main()
