"""
Atlas Gateway - Error taxonomy.

Every error the gateway reports to a caller is a GatewayError carrying
the HTTP status it maps to. Anything else reaching the request handler
is treated as an internal error (500).
"""


class GatewayError(Exception):
    """Base class for errors surfaced to the caller as an error envelope."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(GatewayError):
    """Missing body or identifier, malformed JSON, invalid query controls."""

    status_code = 400


class ResourceNotAllowed(GatewayError):
    """Resource is not listed in the configured capability map."""

    status_code = 400

    def __init__(self, resource: str):
        super().__init__(f"Resource '{resource}' is not allowed")
        self.resource = resource


class RecordNotFound(GatewayError):
    """Point operation matched no record."""

    status_code = 404

    def __init__(self, resource: str, record_id: str | None = None):
        message = (
            f"{resource} record '{record_id}' not found"
            if record_id is not None
            else f"{resource} record not found"
        )
        super().__init__(message)
        self.resource = resource
        self.record_id = record_id


class MethodNotAllowed(GatewayError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class BackendError(GatewayError):
    """
    Failure reported by the backing store.

    The backend's message is passed through verbatim.
    """

    status_code = 400

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code
