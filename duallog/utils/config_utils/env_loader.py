"""Utility to read environment variables, optionally seeded from a .env file"""
import os
import logging
from typing import Optional
from dotenv import find_dotenv, load_dotenv

# Set up a logger for the utility
logger = logging.getLogger("duallog.env-loader")

TRUTHY_VALUES = {"1", "true", "yes", "on"}


# ---------------------------Load the caller's .env file (searched from the working directory)---------------
def load_env_file() -> bool:
    """Never called on import: only the config entry points seed the environment."""
    return load_dotenv(find_dotenv(usecwd=True))


# ---------------------------Look up an environment variable---------------
def get_env_var(name: str, required: bool = True, default: Optional[str] = None) -> Optional[str]:
    """Return `name` from the environment, else `default`; a required variable with neither raises EnvironmentError."""
    if name in os.environ:
        return os.environ[name]
    if required and default is None:
        logger.error(f"Required environment variable {name} is not set")
        raise EnvironmentError(f"{name} is not set")
    return default


# ---------------------------Read an environment variable as a boolean flag---------------
def get_env_flag(name: str, default: bool = False) -> bool:
    value = get_env_var(name, required=False)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES
