"""
Command-line entry point.

Usage:
    python -m mdm_management --host 0.0.0.0 --port 8080
"""

import argparse
import logging

import uvicorn

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="MDM Management API server")
    parser.add_argument("--host", default="0.0.0.0", help="Bind address")
    parser.add_argument("--port", type=int, default=8080, help="Bind port")
    args = parser.parse_args()

    logger.info("Starting management API at http://%s:%d", args.host, args.port)
    uvicorn.run("mdm_management.main:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
