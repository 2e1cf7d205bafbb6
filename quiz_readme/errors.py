class QuizReadmeError(Exception):
    """Base class for failures that abort a README build."""


class CorpusConsistencyError(QuizReadmeError, ValueError):
    """A question directory disagrees with its own metadata."""


class ContentStructureError(QuizReadmeError, ValueError):
    """A TL;DR excerpt captured more than the summary paragraph."""


class SentinelNotFoundError(QuizReadmeError, ValueError):
    """README markers are missing, duplicated or out of order."""
