# chat_service/cli/commands/__init__.py
