"""
Java version constraint resolution for Gradle wrapper projects
"""

import logging

import semantic_version

from gradle_wrapper_tools.execution_mode import ResolverConfig
from .daemon_jvm import DaemonJvmReader

LOG = logging.getLogger(__name__)

DEFAULT_HOST_CONSTRAINT = "^8.0.0"
UNKNOWN_GRADLE_CONSTRAINT = "^11.0.0"

# (lowest gradle version, java major), highest first. First matching row wins.
GRADLE_JAVA_COMPATIBILITY = [
    (semantic_version.Version("7.3.0"), 17),
    (semantic_version.Version("7.0.0"), 16),
    (semantic_version.Version("5.0.0"), 11),
    (semantic_version.Version("0.0.0"), 8),
]


def java_constraint(major):
    return "^{}.0.0".format(major)


def parse_gradle_version(gradle_version):
    """
    Parses a Gradle version leniently, missing components are treated as zero: "4.9" is 4.9.0.

    :rtype: semantic_version.Version
    :return: the parsed version, or None if it is empty or not a version
    """
    if not gradle_version or not isinstance(gradle_version, str):
        return None
    try:
        return semantic_version.Version.coerce(gradle_version.strip())
    except ValueError:
        LOG.debug("Unable to parse Gradle version '%s'", gradle_version)
        return None


class JavaConstraintResolver(object):
    """
    Works out the Java runtime constraint needed to run a Gradle wrapper project.

    Resolution is a chain of layers tried in order, the first layer returning a constraint wins:

    1. a toolchain declared in gradle/gradle-daemon-jvm.properties
    2. the default of the execution mode, when builds run on the host
    3. the Gradle to Java compatibility table, when builds run in a container
    """

    def __init__(self, config=None, daemon_jvm_reader=None, os_utils=None):
        self.config = config if config else ResolverConfig()
        self.daemon_jvm_reader = daemon_jvm_reader if daemon_jvm_reader else DaemonJvmReader(os_utils=os_utils)
        self.layers = [self._from_daemon_jvm, self._from_execution_mode, self._from_gradle_version]

    def get_java_constraint(self, gradle_version, wrapper_path):
        """
        Parameters
        ----------
        gradle_version : str
            Gradle version of the project, eg: 7.3.0. None or empty if unknown
        wrapper_path : str
            path of the wrapper script, eg: sub/gradlew

        Returns
        -------
        str
            caret range constraint of the Java version, eg: ^17.0.0
        """
        for layer in self.layers:
            constraint = layer(gradle_version, wrapper_path)
            if constraint:
                LOG.debug(
                    "Java constraint %s for Gradle %s resolved by %s", constraint, gradle_version, layer.__name__
                )
                return constraint
        return UNKNOWN_GRADLE_CONSTRAINT

    def _from_daemon_jvm(self, gradle_version, wrapper_path):
        toolchain_version = self.daemon_jvm_reader.toolchain_version(wrapper_path)
        if toolchain_version:
            return java_constraint(toolchain_version)
        return None

    def _from_execution_mode(self, gradle_version, wrapper_path):
        # The host JDK is unknown, only the lowest common denominator is safe
        if not self.config.is_containerized:
            return DEFAULT_HOST_CONSTRAINT
        return None

    def _from_gradle_version(self, gradle_version, wrapper_path):
        version = parse_gradle_version(gradle_version)
        if version is None:
            return UNKNOWN_GRADLE_CONSTRAINT

        for lowest, java_major in GRADLE_JAVA_COMPATIBILITY:
            if version >= lowest:
                return java_constraint(java_major)
        return UNKNOWN_GRADLE_CONSTRAINT


def get_java_constraint(gradle_version, wrapper_path, config=None, os_utils=None):
    return JavaConstraintResolver(config=config, os_utils=os_utils).get_java_constraint(gradle_version, wrapper_path)
