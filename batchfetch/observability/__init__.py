"""
Observability module.

Provides logging configuration and structured logging helpers, including
the default batch failure hook.
"""

from batchfetch.observability.log_utils import log_batch_error, log_with_context
from batchfetch.observability.logger import configure_logging

__all__ = ["configure_logging", "log_batch_error", "log_with_context"]
