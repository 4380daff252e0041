from enum import IntEnum
from http import HTTPStatus
from typing import Union

INFORMATIONAL_RANGE = range(100, 200)
SUCCESS_RANGE = range(200, 300)
REDIRECTION_RANGE = range(300, 400)
CLIENT_ERROR_RANGE = range(400, 500)
SERVER_ERROR_RANGE = range(500, 600)


class HTTPStatusCode(IntEnum):
    """The HTTP status codes this client recognizes.

    Constructing a member from a code outside the registry raises ``ValueError``::

        HTTPStatusCode(404)  # HTTPStatusCode.NOT_FOUND
        HTTPStatusCode(800)  # ValueError

    Members are ints, so they compare against literals and ranges directly::

        match status:
            case 200:
                ...
            case _ if status in range(401, 404):
                ...
    """

    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207
    ALREADY_REPORTED = 208
    IM_USED = 226

    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    SWITCH_PROXY = 306
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    MISDIRECTED_REQUEST = 421
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424
    UPGRADE_REQUIRED = 426
    PRECONDITION_REQUIRED = 428
    TOO_MANY_REQUESTS = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    UNAVAILABLE_FOR_LEGAL_REASONS = 451

    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505

    @property
    def phrase(self) -> str:
        try:
            return HTTPStatus(self.value).phrase
        except ValueError:
            # 306 was dropped from the registry the stdlib follows
            return self.name.replace("_", " ").title()

    @property
    def description(self) -> str:
        """Human readable form, e.g. ``"404: Not Found"``."""
        return f"{self.value}: {self.phrase}"

    @property
    def is_informational(self) -> bool:
        return self.value in INFORMATIONAL_RANGE

    @property
    def is_success(self) -> bool:
        return self.value in SUCCESS_RANGE

    @property
    def is_redirection(self) -> bool:
        return self.value in REDIRECTION_RANGE

    @property
    def is_client_error(self) -> bool:
        return self.value in CLIENT_ERROR_RANGE

    @property
    def is_server_error(self) -> bool:
        return self.value in SERVER_ERROR_RANGE

    def matches(self, pattern: Union[int, range]) -> bool:
        """Match against a single code or a range of codes."""
        if isinstance(pattern, range):
            return self.value in pattern
        return self.value == pattern
