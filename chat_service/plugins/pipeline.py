# chat_service/plugins/pipeline.py
"""
Sequential, fail-fast plugin runner.

Plugins run strictly in registration order. The first failure stops the
run; later plugins are not invoked. Any exception other than PluginError is
wrapped into one, so callers only ever see PluginError from this stage.
"""

from __future__ import annotations

from typing import Sequence

from chat_service.core import keys
from chat_service.core.exceptions import PluginError
from chat_service.core.json_view import JSONView
from chat_service.logging.logger import get_logger
from chat_service.logging.tags import PLUGIN
from chat_service.plugins.base import ChatPlugin

logger = get_logger(__name__)


async def run_plugins(plugins: Sequence[ChatPlugin], view: JSONView[keys.Root]) -> None:
    """
    Run every plugin over `view`, in order.

    Raises:
        PluginError: From the first plugin that fails
    """
    for position, plugin in enumerate(plugins):
        logger.debug(f"{PLUGIN} Running plugin {position}: {plugin.name}")
        try:
            await plugin.handle(view)
        except PluginError as exc:
            if exc.plugin is None:
                exc.plugin = plugin.name
            logger.debug(f"{PLUGIN} Plugin {plugin.name} rejected response: {exc.reason}")
            raise
        except Exception as exc:
            logger.debug(f"{PLUGIN} Plugin {plugin.name} crashed: {exc!r}")
            raise PluginError(f"{type(exc).__name__}: {exc}", plugin=plugin.name) from exc


__all__ = ["run_plugins"]
