"""
boot/setup.py - Configuration and Environment Setup

This module handles:
- Loading environment variables
- Building the config dictionary
- Configuring logging

Rules:
- No business logic
- Only configuration loading
- The listen port is fixed; the environment cannot change it
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from servr.servr import PORT


def get_project_root() -> Path:
    """Get the project root directory."""
    # Assume boot/ is at project root
    return Path(__file__).parent.parent


def load_env_file(env_path: Optional[Path] = None) -> None:
    """Load environment variables from .env file.
    
    Keys already present in the environment are left alone.
    
    Args:
        env_path: Path to .env file. If None, searches in project root.
    """
    if env_path is None:
        env_path = get_project_root() / ".env"
    
    if not env_path.exists():
        return
    
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            
            if "=" in line:
                key, value = line.split("=", 1)
                os.environ.setdefault(key.strip(), value.strip())


def load_config(env_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from environment and files.
    
    Args:
        env_path: Optional .env file to read first
        
    Returns:
        Configuration dictionary
    """
    load_env_file(env_path)
    
    config = {
        # Server config
        "host": os.getenv("GREETR_HOST", "0.0.0.0"),
        "port": PORT,
        
        # Logging
        "log_level": os.getenv("GREETR_LOG_LEVEL", "INFO"),
        "log_dir": os.getenv("GREETR_LOG_DIR", ""),
        
        # Paths
        "project_root": str(get_project_root()),
    }
    
    return config


def setup_logging(level: str = None, log_dir: str = None) -> Optional[str]:
    """Setup logging with console output and an optional log file.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the log file. No file is written if empty.
        
    Returns:
        Path to the log file, or None when logging to console only
    """
    if level is None:
        level = os.getenv("GREETR_LOG_LEVEL", "INFO")
    if log_dir is None:
        log_dir = os.getenv("GREETR_LOG_DIR", "")
    
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handler level
    root_logger.handlers.clear()
    
    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(console_handler)
    
    if not log_dir:
        return None
    
    logs_path = Path(log_dir)
    logs_path.mkdir(parents=True, exist_ok=True)
    log_path = logs_path / "greetr.log"
    
    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)
    
    logging.info(f"Log file: {log_path}")
    return str(log_path)
