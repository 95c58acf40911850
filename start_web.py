#!/usr/bin/env python3
"""
Briar Web Interface
Serves the theme's layout and markup helpers over HTTP.
"""

import os
import sys
import logging
import argparse
from pathlib import Path

import uvicorn

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))


# Setup logging
def setup_logging(log_level: str = "INFO"):
    """Configure logging for the application."""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler('briar_web.log')
        ]
    )


def main():
    parser = argparse.ArgumentParser(description="Briar theme web server")
    parser.add_argument('--host', default='127.0.0.1', help='Bind address')
    parser.add_argument('--port', type=int, default=8000, help='Port')
    parser.add_argument('--config-dir', default='./config', help='Directory holding theme.yaml')
    parser.add_argument('--log-level', default=os.getenv('BRIAR_LOG_LEVEL', 'INFO'), help='Logging level')
    parser.add_argument('--reload', action='store_true', help='Auto-reload on code changes')
    args = parser.parse_args()

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    # Read by briar.web.dependencies on first use
    os.environ['BRIAR_CONFIG_DIR'] = args.config_dir

    try:
        logger.info(f"Starting Briar web server on {args.host}:{args.port}")
        uvicorn.run(
            "briar.web.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=args.log_level.lower(),
        )
    except KeyboardInterrupt:
        print("\n[INFO] Shutting down gracefully...")
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
