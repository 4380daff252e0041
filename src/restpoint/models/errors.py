from .status_code import HTTPStatusCode


class HTTPError(Exception):
    """The response isn't HTTP or has an issue with HTTP things like status codes."""

    def __init__(self, message: str, reason: str):
        self.message = message
        self.reason = reason
        super().__init__(f"{message}: {reason}")


class NonHTTPResponseError(HTTPError):
    """A response came back from the transport, but it didn't carry HTTP semantics."""

    def __init__(self):
        super().__init__(
            "Expected HTTP Response",
            "The response from server was missing one or more values required by HTTP.",
        )


class InvalidStatusCodeError(HTTPError):
    """An HTTP response came back with a status code outside the known registry."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(
            "Invalid Status",
            f"The server returned a status of “{status_code}”, which is invalid.",
        )


class UnexpectedStatusError(HTTPError):
    """An HTTP response came back with a status the caller didn't expect."""

    def __init__(self, status: HTTPStatusCode):
        self.status = status
        super().__init__(
            "Unexpected Response",
            f"The server responded with an unexpected status. {status.description}",
        )


class InvalidBaseURLError(Exception):
    """The base URL a request is rendered against can't be resolved.

    This is a configuration mistake, not a runtime condition, so it is raised
    immediately instead of being delivered as a failed result.
    """

    def __init__(self, base_url: str, reason: str = "Problem resolving against base URL"):
        self.base_url = base_url
        self.message = f"{reason}: {base_url!r}"
        super().__init__(self.message)


class TransportContractError(Exception):
    """The transport returned neither an error nor a response."""

    def __init__(self, message="Transport contract failure: no response and no error"):
        self.message = message
        super().__init__(self.message)


class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="No base URL given. Pass one explicitly or set the RESTPOINT_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)
