class AppException(Exception):
    """Base application exception."""

    pass
