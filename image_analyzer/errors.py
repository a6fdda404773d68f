"""Analysis error taxonomy — each error carries the message shown to the user."""
from image_analyzer.constants import (
    MSG_ANALYSIS_FAILED,
    MSG_ANALYSIS_IN_PROGRESS,
    MSG_INVALID_RESPONSE,
    MSG_NO_IMAGE,
)


class AnalysisError(Exception):
    user_message: str = MSG_ANALYSIS_FAILED


class MissingImageError(AnalysisError):
    """Analyze was requested before any image was selected."""

    user_message = MSG_NO_IMAGE


class AnalysisFailedError(AnalysisError):
    """The inference call itself failed (network, auth, quota, bad request)."""

    user_message = MSG_ANALYSIS_FAILED


class InvalidAnalysisResponseError(AnalysisError):
    """The model's reply is not JSON or does not match the analysis schema."""

    user_message = MSG_INVALID_RESPONSE


class AnalysisInProgressError(Exception):
    """Analyze was requested while the same chat already has one in flight."""

    user_message = MSG_ANALYSIS_IN_PROGRESS
