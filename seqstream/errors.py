class SeqStreamError(Exception):
    """base class for errors raised by seqstream itself."""
    pass


class StateError(SeqStreamError, RuntimeError):
    """raised when a sequence is used after it has been operated upon or closed."""

    def __init__(self, message: str = "sequence has already been operated upon or closed"):
        super().__init__(message)


class NoSuchElementError(SeqStreamError, LookupError):
    """raised when the value of an empty optional is requested."""
    pass
