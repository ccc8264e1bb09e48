# 📄 File: garden_assistant/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that look at every request before and after it reaches the assistant,
# for example writing it to the log.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware components with per-middleware configuration.
# 🔗 Dependencies:
# Starlette middleware base, garden_assistant.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# garden_assistant.main (middleware registration)

"""
Garden Assistant API Middleware Package

Middleware Components:
    - RequestLoggingMiddleware: request/response logging with request ids
"""

from typing import Any, Dict

MIDDLEWARE_CONFIG = {
    "logging": {
        "enabled": True,
        "exclude_paths": [
            "/favicon.ico",
            "/docs",
            "/redoc",
            "/openapi.json",
        ],
    },
}


def get_middleware_config(middleware_name: str) -> Dict[str, Any]:
    return MIDDLEWARE_CONFIG.get(middleware_name, {})


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """
    Check if a path should be excluded from middleware processing

    Args:
        middleware_name: Name of the middleware
        path: Request path to check

    Returns:
        True if path should be excluded, False otherwise
    """
    exclude_paths = get_middleware_config(middleware_name).get("exclude_paths", [])

    # Exact and prefix matches
    for exclude_path in exclude_paths:
        if path == exclude_path or path.startswith(exclude_path + "/"):
            return True

    return False


__all__ = [
    "MIDDLEWARE_CONFIG",
    "get_middleware_config",
    "should_exclude_path",
]
