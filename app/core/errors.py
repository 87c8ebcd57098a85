class ValidationFailure(ValueError):
    """Raised when a record cannot be turned into a result.

    ``reason`` is a short machine-readable code, ``detail`` is meant for humans.
    """

    def __init__(self, reason: str, detail: str = "") -> None:
        super().__init__(detail or reason)
        self.reason = reason
        self.detail = detail or reason
