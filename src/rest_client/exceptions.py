class RestConfigError(ValueError):
    """Raised when client configuration is invalid."""
    pass
