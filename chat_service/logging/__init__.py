# chat_service/logging/__init__.py
"""Logging helpers shared across chat_service."""
