"""Settings loaded from the environment.

A ``.env`` file is read on import; ``ENV_FILE`` points at an alternative
file. Only the CLI consults these values, the prompt builders take
everything as arguments.
"""

import os

from dotenv import load_dotenv

load_dotenv(os.getenv("ENV_FILE"), override=True)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()
LOG_FILE = os.getenv("LOG_FILE") or None

# Prompts
DEFAULT_POLISH_LANGUAGE = os.getenv("DEFAULT_POLISH_LANGUAGE", "zh")
STRICT_LANGUAGE_TAGS = _env_flag("STRICT_LANGUAGE_TAGS")
