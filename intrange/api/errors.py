class InvalidArgument(ValueError):
    """Raised when an operation is called with an argument outside of its domain."""
    pass
