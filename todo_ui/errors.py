"""Todo UI exceptions with contextual error messages."""


class TodoUIError(Exception):
    """Base exception for all todo UI errors."""


class RemoteCallError(TodoUIError):
    """A call to the remote todo API failed.

    Raised for transport failures (connection refused, timeouts, bodies
    that are not JSON) and for error envelopes returned by the server.
    """

    def __init__(
        self,
        message: str,
        procedure: str | None = None,
        code: str | None = None,
        http_status: int | None = None,
    ):
        self.procedure = procedure
        self.code = code
        self.http_status = http_status

        full_message = message
        if procedure:
            location = f"Procedure: {procedure}"
            if http_status is not None:
                location += f", HTTP {http_status}"
            full_message += f"\n\n  {location}"
        if code:
            full_message += f"\n  Code: {code}"

        super().__init__(full_message)
        self.message = message


class UnknownViewError(TodoUIError, ValueError):
    def __init__(self, key: str, available: list[str]):
        self.key = key
        self.available = available
        super().__init__(
            f"Unknown view {key!r}\n\n  Available views: {', '.join(available)}"
        )
