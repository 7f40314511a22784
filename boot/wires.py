"""
boot/wires.py - Dependency Wiring

This module wires the app and the listener together.

Rules:
- All components created here
- Just instantiation and wiring
"""

from typing import Dict, Any
from dataclasses import dataclass

from fastapi import FastAPI

from servr.api import create_app
from servr.servr import GreetServer


@dataclass
class Dependencies:
    """Container for the running pieces."""
    config: Dict[str, Any]
    app: FastAPI
    server: GreetServer


def wire_dependencies(config: Dict[str, Any]) -> Dependencies:
    """Create the app and a server for it.
    
    Args:
        config: Configuration from boot.setup.load_config
        
    Returns:
        Dependencies container
    """
    app = create_app()
    server = GreetServer(app, host=config["host"], port=config["port"])
    return Dependencies(config=config, app=app, server=server)
