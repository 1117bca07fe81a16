"""HTTP status codes and their reason phrases."""

from enum import IntEnum


class HttpStatusCode(IntEnum):
    """Known HTTP status codes."""

    HTTP_100_CONTINUE = 100
    HTTP_101_SWITCHING_PROTOCOLS = 101
    HTTP_102_PROCESSING = 102
    HTTP_103_EARLY_HINTS = 103

    HTTP_200_OK = 200
    HTTP_201_CREATED = 201
    HTTP_202_ACCEPTED = 202
    HTTP_203_NON_AUTHORITATIVE_INFORMATION = 203
    HTTP_204_NO_CONTENT = 204
    HTTP_205_RESET_CONTENT = 205
    HTTP_206_PARTIAL_CONTENT = 206
    HTTP_207_MULTI_STATUS = 207
    HTTP_208_ALREADY_REPORTED = 208
    HTTP_226_IM_USED = 226

    HTTP_300_MULTIPLE_CHOICES = 300
    HTTP_301_MOVED_PERMANENTLY = 301
    HTTP_302_FOUND = 302
    HTTP_303_SEE_OTHER = 303
    HTTP_304_NOT_MODIFIED = 304
    HTTP_305_USE_PROXY = 305
    HTTP_307_TEMPORARY_REDIRECT = 307
    HTTP_308_PERMANENT_REDIRECT = 308

    HTTP_400_BAD_REQUEST = 400
    HTTP_401_UNAUTHORIZED = 401
    HTTP_402_PAYMENT_REQUIRED = 402
    HTTP_403_FORBIDDEN = 403
    HTTP_404_NOT_FOUND = 404
    HTTP_405_METHOD_NOT_ALLOWED = 405
    HTTP_406_NOT_ACCEPTABLE = 406
    HTTP_407_PROXY_AUTHENTICATION_REQUIRED = 407
    HTTP_408_REQUEST_TIMEOUT = 408
    HTTP_409_CONFLICT = 409
    HTTP_410_GONE = 410
    HTTP_411_LENGTH_REQUIRED = 411
    HTTP_412_PRECONDITION_FAILED = 412
    HTTP_413_PAYLOAD_TOO_LARGE = 413
    HTTP_414_URI_TOO_LONG = 414
    HTTP_415_UNSUPPORTED_MEDIA_TYPE = 415
    HTTP_416_RANGE_NOT_SATISFIABLE = 416
    HTTP_417_EXPECTATION_FAILED = 417
    HTTP_418_IM_A_TEAPOT = 418
    HTTP_421_MISDIRECTED_REQUEST = 421
    HTTP_422_UNPROCESSABLE_ENTITY = 422
    HTTP_423_LOCKED = 423
    HTTP_424_FAILED_DEPENDENCY = 424
    HTTP_425_TOO_EARLY = 425
    HTTP_426_UPGRADE_REQUIRED = 426
    HTTP_428_PRECONDITION_REQUIRED = 428
    HTTP_429_TOO_MANY_REQUESTS = 429
    HTTP_431_REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    HTTP_451_UNAVAILABLE_FOR_LEGAL_REASONS = 451

    HTTP_500_INTERNAL_SERVER_ERROR = 500
    HTTP_501_NOT_IMPLEMENTED = 501
    HTTP_502_BAD_GATEWAY = 502
    HTTP_503_SERVICE_UNAVAILABLE = 503
    HTTP_504_GATEWAY_TIMEOUT = 504
    HTTP_505_HTTP_VERSION_NOT_SUPPORTED = 505
    HTTP_506_VARIANT_ALSO_NEGOTIATES = 506
    HTTP_507_INSUFFICIENT_STORAGE = 507
    HTTP_508_LOOP_DETECTED = 508
    HTTP_510_NOT_EXTENDED = 510
    HTTP_511_NETWORK_AUTHENTICATION_REQUIRED = 511


_S = HttpStatusCode

_MESSAGES = {
    _S.HTTP_100_CONTINUE: "Continue",
    _S.HTTP_101_SWITCHING_PROTOCOLS: "Switching Protocols",
    _S.HTTP_102_PROCESSING: "Processing",
    _S.HTTP_103_EARLY_HINTS: "Early Hints",
    _S.HTTP_200_OK: "OK",
    _S.HTTP_201_CREATED: "Created",
    _S.HTTP_202_ACCEPTED: "Accepted",
    _S.HTTP_203_NON_AUTHORITATIVE_INFORMATION: "Non-Authoritative Information",
    _S.HTTP_204_NO_CONTENT: "No Content",
    _S.HTTP_205_RESET_CONTENT: "Reset Content",
    _S.HTTP_206_PARTIAL_CONTENT: "Partial Content",
    _S.HTTP_207_MULTI_STATUS: "Multi-Status",
    _S.HTTP_208_ALREADY_REPORTED: "Already Reported",
    _S.HTTP_226_IM_USED: "IM Used",
    _S.HTTP_300_MULTIPLE_CHOICES: "Multiple Choices",
    _S.HTTP_301_MOVED_PERMANENTLY: "Moved Permanently",
    _S.HTTP_302_FOUND: "Found",
    _S.HTTP_303_SEE_OTHER: "See Other",
    _S.HTTP_304_NOT_MODIFIED: "Not Modified",
    _S.HTTP_305_USE_PROXY: "Use Proxy",
    _S.HTTP_307_TEMPORARY_REDIRECT: "Temporary Redirect",
    _S.HTTP_308_PERMANENT_REDIRECT: "Permanent Redirect",
    _S.HTTP_400_BAD_REQUEST: "Bad Request",
    _S.HTTP_401_UNAUTHORIZED: "Unauthorized",
    _S.HTTP_402_PAYMENT_REQUIRED: "Payment Required",
    _S.HTTP_403_FORBIDDEN: "Forbidden",
    _S.HTTP_404_NOT_FOUND: "Not Found",
    _S.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    _S.HTTP_406_NOT_ACCEPTABLE: "Not Acceptable",
    _S.HTTP_407_PROXY_AUTHENTICATION_REQUIRED: "Proxy Authentication Required",
    _S.HTTP_408_REQUEST_TIMEOUT: "Request Timeout",
    _S.HTTP_409_CONFLICT: "Conflict",
    _S.HTTP_410_GONE: "Gone",
    _S.HTTP_411_LENGTH_REQUIRED: "Length Required",
    _S.HTTP_412_PRECONDITION_FAILED: "Precondition Failed",
    _S.HTTP_413_PAYLOAD_TOO_LARGE: "Payload Too Large",
    _S.HTTP_414_URI_TOO_LONG: "URI Too Long",
    _S.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    _S.HTTP_416_RANGE_NOT_SATISFIABLE: "Range Not Satisfiable",
    _S.HTTP_417_EXPECTATION_FAILED: "Expectation Failed",
    _S.HTTP_418_IM_A_TEAPOT: "I'm a teapot",
    _S.HTTP_421_MISDIRECTED_REQUEST: "Misdirected Request",
    _S.HTTP_422_UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    _S.HTTP_423_LOCKED: "Locked",
    _S.HTTP_424_FAILED_DEPENDENCY: "Failed Dependency",
    _S.HTTP_425_TOO_EARLY: "Too Early",
    _S.HTTP_426_UPGRADE_REQUIRED: "Upgrade Required",
    _S.HTTP_428_PRECONDITION_REQUIRED: "Precondition Required",
    _S.HTTP_429_TOO_MANY_REQUESTS: "Too Many Requests",
    _S.HTTP_431_REQUEST_HEADER_FIELDS_TOO_LARGE: "Request Header Fields Too Large",
    _S.HTTP_451_UNAVAILABLE_FOR_LEGAL_REASONS: "Unavailable For Legal Reasons",
    _S.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    _S.HTTP_501_NOT_IMPLEMENTED: "Not Implemented",
    _S.HTTP_502_BAD_GATEWAY: "Bad Gateway",
    _S.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
    _S.HTTP_504_GATEWAY_TIMEOUT: "Gateway Timeout",
    _S.HTTP_505_HTTP_VERSION_NOT_SUPPORTED: "HTTP Version Not Supported",
    _S.HTTP_506_VARIANT_ALSO_NEGOTIATES: "Variant Also Negotiates",
    _S.HTTP_507_INSUFFICIENT_STORAGE: "Insufficient Storage",
    _S.HTTP_508_LOOP_DETECTED: "Loop Detected",
    _S.HTTP_510_NOT_EXTENDED: "Not Extended",
    _S.HTTP_511_NETWORK_AUTHENTICATION_REQUIRED: "Network Authentication Required",
}


def get_message(code: int) -> str:
    """Return the reason phrase for a status code.

    Raises ValueError for a code that is not known.
    """
    try:
        return _MESSAGES[code]
    except KeyError:
        raise ValueError("Unknown Status Code") from None


def get_status_line(code: int) -> str:
    """Return the status line part such as ``"200 OK"``."""
    return f"{int(code)} {get_message(code)}"