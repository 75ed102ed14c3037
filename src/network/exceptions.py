class NetworkConfigurationError(ValueError):
    """Raised when the static network definition cannot produce a valid graph"""
