"""Names of the events announced to the host context."""

# Payload: list of the newly added segments
SEGMENTS_ADD = "segments.add"

# Payload: list of the removed segments, possibly empty
SEGMENTS_REMOVE = "segments.remove"

# No payload
SEGMENTS_REMOVE_ALL = "segments.remove_all"
