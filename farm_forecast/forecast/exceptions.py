class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside the forecaster's contract."""
