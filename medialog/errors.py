"""Exceptions raised by the media log core."""


class DataLoadError(Exception):
    """The data source could not be read, parsed, or is not a JSON array.

    Caught at the loader boundary and turned into a degraded snapshot; it
    never escapes to request handlers.
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
