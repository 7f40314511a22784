"""
boot/mains.py - Entry Point

This is the main entry point for the greeting server.

Responsibilities:
- Load configuration
- Wire up dependencies (via wires.py)
- Bind and announce the port
- Serve

Rules:
- No business logic here
- A bind failure ends the process
"""

import sys
import asyncio
import logging
from typing import Optional

from .setup import load_config, setup_logging
from .wires import wire_dependencies

logger = logging.getLogger(__name__)


async def main(log_level: Optional[str] = None) -> int:
    """Main entry point."""
    config = load_config()
    setup_logging(log_level or config["log_level"], config["log_dir"])
    
    deps = wire_dependencies(config)
    server = deps.server
    
    try:
        server.bind()
    except OSError as e:
        print(f"Failed to bind port {config['port']}: {e}")
        logger.error(f"Bind failed on {config['host']}:{config['port']}: {e}")
        return 1
    
    print(f"Server listening on port {server.bound_port}")
    
    await server.serve()
    return 0


def run(log_level: Optional[str] = None) -> None:
    """Synchronous entry point for CLI."""
    try:
        exit_code = asyncio.run(main(log_level))
        sys.exit(exit_code)
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    run()
