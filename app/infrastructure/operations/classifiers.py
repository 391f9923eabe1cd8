"""Error classifiers for Slack Web API exceptions.

Converts ``slack_sdk`` exceptions into standardized OperationResult
objects so notification and lookup code never lets a provider exception
escape.

Usage:
    from infrastructure.operations.classifiers import classify_slack_error

    try:
        client.conversations_open(users=user_id)
    except Exception as exc:
        return classify_slack_error(exc)
"""

from slack_sdk.errors import SlackApiError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

# Slack error strings that will not succeed on retry
PERMANENT_SLACK_ERRORS = frozenset(
    {
        "user_not_found",
        "users_not_found",
        "channel_not_found",
        "cannot_dm_bot",
        "user_disabled",
        "user_not_visible",
        "not_in_channel",
        "is_archived",
        "invalid_arguments",
        "missing_scope",
    }
)

AUTH_SLACK_ERRORS = frozenset(
    {
        "not_authed",
        "invalid_auth",
        "account_inactive",
        "token_revoked",
        "token_expired",
    }
)


def classify_slack_error(exc: Exception) -> OperationResult:
    """Classify a Slack Web API error into an OperationResult.

    Mapping:
    - ``ratelimited`` (HTTP 429) → TRANSIENT_ERROR with retry_after from the
      Retry-After header (default 30 seconds)
    - auth errors → UNAUTHORIZED
    - unknown users/channels and other non-retryable errors → PERMANENT_ERROR
    - anything else, including non-Slack exceptions → TRANSIENT_ERROR

    Args:
        exc: Exception raised by a ``slack_sdk.WebClient`` call

    Returns:
        OperationResult with status, message and the Slack error string as
        ``error_code``
    """
    if not isinstance(exc, SlackApiError):
        return OperationResult.transient_error(
            f"Slack connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    response = exc.response
    error_code = "unknown_error"
    status_code = None
    if response is not None:
        try:
            error_code = response.get("error") or error_code
        except (AttributeError, TypeError):
            pass
        status_code = getattr(response, "status_code", None)

    if error_code == "ratelimited" or status_code == 429:
        retry_after = 30
        headers = getattr(response, "headers", None) or {}
        header_value = headers.get("Retry-After") or headers.get("retry-after")
        if header_value:
            try:
                retry_after = int(header_value)
            except (ValueError, TypeError):
                pass  # keep default for a malformed header
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "Slack API rate limited",
            error_code="ratelimited",
            retry_after=retry_after,
        )

    if error_code in AUTH_SLACK_ERRORS:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Slack API authentication failed: {error_code}",
            error_code=error_code,
        )

    if error_code in PERMANENT_SLACK_ERRORS:
        return OperationResult.permanent_error(
            f"Slack API error: {error_code}",
            error_code=error_code,
        )

    return OperationResult.transient_error(
        f"Slack API error: {error_code}",
        error_code=error_code,
    )
