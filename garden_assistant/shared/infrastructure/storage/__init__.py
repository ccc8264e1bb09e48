# 📄 File: garden_assistant/shared/infrastructure/storage/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Groups the code that remembers small things on the user's machine between runs.
#
# 🧪 Purpose (Technical Summary):
# Storage package exporting the key-value storage contract and its implementations.
#
# 🔗 Dependencies:
# - key_value_storage.py
#
# 🔄 Connected Modules / Calls From:
# - Reminder store, service wiring, health checks

from .key_value_storage import (
    KeyValueStorage,
    InMemoryKeyValueStorage,
    FileKeyValueStorage,
    create_storage,
)

__all__ = [
    "KeyValueStorage",
    "InMemoryKeyValueStorage",
    "FileKeyValueStorage",
    "create_storage",
]
