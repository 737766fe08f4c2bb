"""Environment variable handling for moonphase."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_env_file() -> None:
    """Load environment variables from a .env file in the working directory.

    Values already present in the real environment take precedence.
    """
    root_env = Path(".env")
    if root_env.exists():
        load_dotenv(root_env)


def get_env_var(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable with proper precedence.

    Order of precedence (highest to lowest):
    1. Process environment
    2. Root .env file
    3. Default value

    Args:
        key: Environment variable key
        default: Default value if not found

    Returns:
        Environment variable value or default
    """
    load_env_file()
    return os.getenv(key, default)
