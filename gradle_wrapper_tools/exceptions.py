"""
Collection of public exceptions raised by this library
"""


class GradleWrapperToolsError(Exception):

    MESSAGE = ""

    def __init__(self, **kwargs):
        Exception.__init__(self, self.MESSAGE.format(**kwargs))


class UnsupportedExecutionModeError(GradleWrapperToolsError):
    """
    Raised when the configured binary source is not one of the known execution modes
    """

    MESSAGE = "Execution mode '{mode}' is not supported. Supported modes: {supported}"


class InvalidRequestError(GradleWrapperToolsError):
    """
    Raised when a JSON-RPC request is missing a required parameter
    """

    MESSAGE = "Invalid request: {reason}"
