# greatcircle/exceptions.py
"""
Great Circle Exceptions
Error types raised while resolving and building a great-circle route.
"""

class GreatCircleError(Exception):
    """Base class for all great-circle errors"""
    pass

class InvalidOptionsError(GreatCircleError):
    """The options argument is not a valid configuration"""
    def __init__(self, message="options is invalid", option_name=None):
        self.option_name = option_name
        super().__init__(f"{message} [Option: {option_name}]" if option_name else message)

class MissingEndpointError(GreatCircleError):
    """Neither an end coordinate nor a bearing was supplied"""
    def __init__(self, message="Either 'end' or 'options.bearing' must be provided"):
        super().__init__(message)

class InvalidPointError(GreatCircleError):
    """Input cannot be normalized to a coordinate"""
    def __init__(self, value, message="Invalid point input"):
        self.value = value
        super().__init__(f"{message}: {value!r}")

class GeometryError(GreatCircleError):
    """A line geometry cannot be assembled from the given coordinates"""
    pass
