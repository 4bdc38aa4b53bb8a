"""Base host context class."""

from abc import ABC, abstractmethod
from typing import Any, Mapping

# camelCase option names used by JavaScript hosts
OPTION_ALIASES = {
    "randomize_segment_color": "randomizeSegmentColor",
    "segment_color": "segmentColor",
    "segment_id_prefix": "segmentIdPrefix",
}


def get_option(options: Mapping[str, Any], name: str, default: Any = None) -> Any:
    """Look up a host option by its snake_case name or its camelCase alias.

    Args:
        options: Host options mapping
        name: snake_case option name
        default: Value returned when neither spelling is present

    Returns:
        Option value
    """
    if name in options:
        return options[name]

    return options.get(OPTION_ALIASES.get(name, name), default)


class HostContext(ABC):
    """Base class for the application hosting a segment repository.

    A host supplies read-only options and receives mutation notifications.
    """

    @property
    @abstractmethod
    def options(self) -> Mapping[str, Any]:
        """Get the host options.

        Recognized keys are ``randomize_segment_color``, ``segment_color`` and
        ``segment_id_prefix``, or their camelCase spellings
        (``randomizeSegmentColor``, ``segmentColor``, ``segmentIdPrefix``).

        Returns:
            Read-only mapping of option names to values
        """
        pass

    @abstractmethod
    def emit(self, event: str, *args: Any) -> None:
        """Announce an event to the host.

        Args:
            event: Event name, see :mod:`waveformsegments.host.events`
            *args: Event payload
        """
        pass
