"""Errors raised while handling a form submission.

Every error carries the HTTP status the endpoint should answer with, so the
route can turn any of them into a single JSON error response.
"""


class SubmissionError(Exception):
    status_code = 500


class ConfigurationError(SubmissionError):
    """A required setting is missing or malformed."""


class MissingHeaderError(ConfigurationError):
    """The destination sheet has no header row yet."""


class SheetsAuthError(SubmissionError):
    """The service account credential was rejected or could not be loaded."""


class DownstreamError(SubmissionError):
    """The Sheets API or the recalculation webhook reported a failure."""
    status_code = 502
