"""In-process host context with synchronous event handlers."""

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping

from waveformsegments.config import get_bool_config, get_config
from waveformsegments.host.base import OPTION_ALIASES, HostContext

logger = logging.getLogger(__name__)

# camelCase name -> snake_case name
_CANONICAL_NAMES = {alias: name for name, alias in OPTION_ALIASES.items()}


class EventHost(HostContext):
    """Host context that keeps its options in memory and calls handlers in-line."""

    def __init__(self, **options: Any) -> None:
        """Initialize the host.

        Args:
            **options: Overrides for the configured defaults. camelCase names
                such as ``randomizeSegmentColor`` are accepted.
        """
        resolved = {
            "randomize_segment_color": get_bool_config("randomize_segment_color"),
            "segment_color": get_config("segment_color"),
            "segment_id_prefix": get_config("segment_id_prefix"),
        }
        for key, value in options.items():
            resolved[_CANONICAL_NAMES.get(key, key)] = value

        self._options = MappingProxyType(resolved)
        self._handlers: Dict[str, List[Callable[..., Any]]] = defaultdict(list)

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        """Register a handler for an event.

        Args:
            event: Event name
            handler: Callable invoked with the event payload
        """
        self._handlers[event].append(handler)
        logger.debug(f"Registered handler for {event}")

    def off(self, event: str, handler: Callable[..., Any]) -> None:
        """Unregister a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.debug(f"Removed handler for {event}")

    def emit(self, event: str, *args: Any) -> None:
        # Copy so handlers may unregister themselves while running
        for handler in list(self._handlers.get(event, [])):
            handler(*args)
