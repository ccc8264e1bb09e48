# 📄 File: garden_assistant/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools that every part of the
# assistant can use, like settings, error types, logging and storage.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, exceptions, logging and
# infrastructure used by the reminders and plant assistant modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Exception hierarchy
- Structured logging
- Key-value storage and the generative model HTTP client
"""

__all__ = []
