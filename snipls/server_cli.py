"""Entry point for the snipls stdio server."""

import asyncio
import logging
import sys


def main():
    """Run the snipls language server on stdin/stdout."""
    from .server.server import run_server

    try:
        exit_code = asyncio.run(run_server())
    finally:
        logging.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
