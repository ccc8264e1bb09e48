# 📄 File: garden_assistant/shared/utils/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# A small toolbox of helpers shared across the assistant, starting with logging.
#
# 🧪 Purpose (Technical Summary):
# Utilities package exporting the structured logging helpers.
#
# 🔗 Dependencies:
# - logging.py (structured logging)
#
# 🔄 Connected Modules / Calls From:
# - All modules that log

from .logging import (
    get_logger,
    setup_logging,
    log_context,
    StructuredLogger,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "log_context",
    "StructuredLogger",
]
