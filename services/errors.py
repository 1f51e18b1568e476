class RecordError(ValueError):
    """A stored row could not be turned into a typed record."""


class FetchError(Exception):
    """Students, subjects or marks could not be loaded."""


class ValidationError(ValueError):
    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


class NotFoundError(LookupError):
    pass
