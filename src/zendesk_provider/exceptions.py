"""Exception hierarchy for the Zendesk provider."""


class ZendeskError(Exception):
    """Base exception for provider and API failures."""
    pass


class ZendeskAPIError(ZendeskError):
    """The Zendesk API rejected a request or returned an unusable body."""

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        """
        Args:
            message: Error message
            status_code: HTTP status code if the failure came from a response
            response_body: Raw response body if one was read
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class ZendeskNotFoundError(ZendeskAPIError):
    """The addressed record does not exist (404)."""
    pass


class ZendeskRateLimitError(ZendeskAPIError):
    """Rate limit still exceeded after retrying (429)."""
    pass


class ZendeskValidationError(ZendeskError):
    """Invalid configuration, state or identifier.

    `attributes` names the offending schema attributes when the error comes
    from checking a configuration.
    """

    def __init__(self, message: str, attributes: list[str] | None = None):
        super().__init__(message)
        self.attributes = list(attributes or [])


class ZendeskNetworkError(ZendeskError):
    """Connection-level failure talking to Zendesk."""
    pass
