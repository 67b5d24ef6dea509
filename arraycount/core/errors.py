"""Exceptions raised by arraycount."""

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when a required argument is absent or has an unusable shape.

    Parameters
    ----------
    parameter : str
        Name of the offending parameter.
    message : str, optional
        Explanation. Defaults to ``"<parameter> must not be None."``.
    """

    def __init__(self, parameter, message=None):
        self.parameter = parameter
        if message is None:
            message = f"{parameter} must not be None."
        super().__init__(message)
