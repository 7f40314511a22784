"""
servr/routs.py - Route Handlers

This module defines the HTTP route handlers.

Endpoints:
- GET / - Hello world
- GET /evening - Good evening

Rules:
- Handlers return constant text
- No side effects
"""

HELLO_TEXT = "Hello world"
EVENING_TEXT = "Good evening"


async def handle_root() -> str:
    """Handle the root greeting request.
    
    Returns:
        Greeting text
    """
    return HELLO_TEXT


async def handle_evening() -> str:
    """Handle the evening greeting request."""
    return EVENING_TEXT
