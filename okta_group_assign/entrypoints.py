import asyncio
from typing import Any, Dict, Mapping

from . import handler


def run_invoke_sync(params: Mapping[str, Any], context: Any, **kwargs) -> Dict[str, Any]:
    """
    Synchronous helper to run the assignment.

    This is intended for notebooks or simple scripts that don't want to
    manage asyncio directly.
    """
    return asyncio.run(handler.invoke(params, context, **kwargs))


def run_error_sync(params: Mapping[str, Any], context: Any, **kwargs) -> Dict[str, Any]:
    return asyncio.run(handler.error(params, context, **kwargs))


def run_halt_sync(params: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    return asyncio.run(handler.halt(params, context))
