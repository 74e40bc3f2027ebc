class ExtractionError(Exception):
    """A document could not be turned into plain text."""


class EmptyContentWarning(UserWarning):
    """The loaded text contains nothing to play."""
