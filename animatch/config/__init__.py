"""Configuration module for Animatch.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access function

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

Usage:
------
```python
from animatch.config import settings
threshold = settings.matching.loose_threshold

from animatch.config import get_logger
logger = get_logger(__name__)
logger.debug("Matching started")
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import get_config, settings

__all__ = [
    "get_config",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
