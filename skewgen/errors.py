class InvalidParameterError(ValueError):
    """Raised when a generator is constructed with parameters outside its domain."""


class RangeExhaustedError(ValueError):
    """Raised when a generator's range cannot grow any further."""
