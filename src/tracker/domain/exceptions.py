"""Tracker exceptions.

Every failure inside the tracker is raised as a subclass of
TrackerException so the CLI layer can catch them in one place and turn
them into a non-zero exit with a readable message.
"""


class TrackerException(Exception):
    """Base class for all tracker errors."""


class StoreError(TrackerException):
    """The order store could not be opened, written or queried."""


class ExportError(TrackerException):
    """The export file could not be created or written."""


class DataShapeError(TrackerException):
    """A stored row cannot be rebuilt into an Order."""
