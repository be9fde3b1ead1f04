"""
Execution mode configuration. Describes where build tooling commands are run.
"""

import logging
import os

from gradle_wrapper_tools.exceptions import UnsupportedExecutionModeError

LOG = logging.getLogger(__name__)

BINARY_SOURCE_ENV_VAR = "GRADLE_WRAPPER_TOOLS_BINARY_SOURCE"


class ExecutionMode(object):

    # Tools are taken from the host
    GLOBAL = "global"
    # Tools run inside an isolated container image with its own JDK baseline
    DOCKER = "docker"
    INSTALL = "install"
    HERMIT = "hermit"

    SUPPORTED = (GLOBAL, DOCKER, INSTALL, HERMIT)

    @classmethod
    def validate(cls, mode):
        if mode not in cls.SUPPORTED:
            raise UnsupportedExecutionModeError(mode=mode, supported=", ".join(cls.SUPPORTED))
        return mode

    @classmethod
    def is_containerized(cls, mode):
        return mode == cls.DOCKER


class ResolverConfig(object):
    """
    Read-only settings handed to the resolvers. Instances are never mutated after construction, so one
    config can be shared between concurrent resolutions.
    """

    def __init__(self, execution_mode=ExecutionMode.GLOBAL):
        """
        Parameters
        ----------
        execution_mode : str
            One of ``ExecutionMode.SUPPORTED``

        Raises
        ------
        UnsupportedExecutionModeError
            Raised when the execution mode is unknown
        """
        self._execution_mode = ExecutionMode.validate(execution_mode)

    @property
    def execution_mode(self):
        return self._execution_mode

    @property
    def is_containerized(self):
        return ExecutionMode.is_containerized(self._execution_mode)

    @classmethod
    def from_dict(cls, params):
        mode = params.get("binary_source") or ExecutionMode.GLOBAL
        return cls(execution_mode=mode)

    @classmethod
    def from_environ(cls, environ=None):
        environ = os.environ if environ is None else environ
        mode = environ.get(BINARY_SOURCE_ENV_VAR) or ExecutionMode.GLOBAL
        LOG.debug("Using execution mode '%s' from environment", mode)
        return cls(execution_mode=mode)

    def __eq__(self, other):
        return isinstance(other, ResolverConfig) and other.execution_mode == self.execution_mode

    def __hash__(self):
        return hash(self._execution_mode)

    def __repr__(self):
        return "ResolverConfig(execution_mode={!r})".format(self._execution_mode)
