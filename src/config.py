"""Environment configuration for the stemming tools"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent

logger = logging.getLogger(__name__)


def load_environment(root: Optional[Path] = None) -> Optional[Path]:
    """
    Load environment variables from .env.local (local dev) or .env.
    
    .env.local has the highest priority; .env is the fallback. Existing
    process variables win over both.
    
    Args:
        root: Directory holding the env files (default: project root)
        
    Returns:
        Path of the file that was loaded, or None
    """
    root = Path(root) if root is not None else PROJECT_ROOT
    for name in (".env.local", ".env"):
        env_file = root / name
        if env_file.exists():
            load_dotenv(env_file, override=False)
            logger.debug(f"Loaded environment from: {env_file}")
            return env_file
    return None


def get_log_level(default: int = logging.WARNING) -> int:
    """LOG_LEVEL env var as a logging level (unknown names fall back to default)"""
    name = os.getenv("LOG_LEVEL", "").upper()
    if not name:
        return default
    return getattr(logging, name, default)
