"""
servr/servr.py - HTTP Listener

This module owns the listening socket and runs the app under uvicorn.

Responsibilities:
- Bind the TCP socket
- Track the server state (stopped -> listening)
- Hand the socket to uvicorn

Rules:
- Bind before serving
- Bind errors propagate
- No graceful shutdown path beyond uvicorn's own signal handling
"""

import logging
import socket
from enum import Enum
from typing import Optional

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)

PORT = 3000


class ServerState(Enum):
    """Lifecycle states of the listener."""
    STOPPED = "stopped"
    LISTENING = "listening"


class GreetServer:
    """HTTP server for the greeting app.
    
    The socket is created and bound by bind(), then passed to uvicorn
    by serve(), so an address conflict surfaces as an OSError before
    any serving starts.
    """
    
    def __init__(self, app: FastAPI, host: str = "0.0.0.0", port: int = PORT):
        self.app = app
        self.host = host
        self.port = port
        self.socket: Optional[socket.socket] = None
        self.state = ServerState.STOPPED
        self.uvicorn_server: Optional[uvicorn.Server] = None
    
    @property
    def bound_port(self) -> Optional[int]:
        """Port the socket is bound to, or None when stopped."""
        if self.socket is None:
            return None
        return self.socket.getsockname()[1]
    
    def bind(self) -> socket.socket:
        """Bind and listen on host:port.
        
        Returns:
            The listening socket
            
        Raises:
            OSError: If the address is already in use
            RuntimeError: If the server is already listening
        """
        if self.state is ServerState.LISTENING:
            raise RuntimeError(f"Server already listening on port {self.bound_port}")
        
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
            sock.listen()
        except OSError:
            sock.close()
            raise
        
        self.socket = sock
        self.state = ServerState.LISTENING
        logger.info(f"Bound {self.host}:{self.bound_port}")
        return sock
    
    async def serve(self) -> None:
        """Serve the app on the bound socket until uvicorn exits."""
        if self.state is ServerState.STOPPED:
            self.bind()
        
        config = uvicorn.Config(self.app, log_config=None)
        self.uvicorn_server = uvicorn.Server(config)
        await self.uvicorn_server.serve(sockets=[self.socket])
    
    def close(self) -> None:
        """Release the socket of a server that is not serving."""
        if self.socket is not None:
            self.socket.close()
            self.socket = None
        self.state = ServerState.STOPPED
