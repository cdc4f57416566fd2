"""Utils module -- config, logging, error categories."""

from src.utils.config import settings
from src.utils.logger import get_logger

__all__ = ["settings", "get_logger"]
