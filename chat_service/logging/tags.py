# chat_service/logging/tags.py
"""
Logging subsystem tags.

Prefixed to log messages so output stays searchable per subsystem.
"""

CHAT = "[CHAT]"
PLUGIN = "[PLUGIN]"
HISTORY = "[HISTORY]"
HTTP = "[HTTP]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
