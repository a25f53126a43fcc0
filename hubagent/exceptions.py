"""Exceptions shared by the agent modules."""


class HubAgentError(Exception):
    """Base class for agent errors."""


class NotFoundError(HubAgentError):
    """Raised by a store when the requested object does not exist."""


class PlatformError(HubAgentError):
    """Raised when the platform answers with an unexpected status code."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        message = f"unexpected status code {status_code}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)
