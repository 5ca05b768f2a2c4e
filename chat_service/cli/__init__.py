# chat_service/cli/__init__.py
"""Command-line interface for chat_service."""
