"""
Reads the Java toolchain declared for the Gradle daemon in gradle/gradle-daemon-jvm.properties
"""

import logging

from gradle_wrapper_tools.os_utils import OSUtils

LOG = logging.getLogger(__name__)


class DaemonJvmReader(object):
    PROPERTIES_DIR = "gradle"
    PROPERTIES_FILE = "gradle-daemon-jvm.properties"
    TOOLCHAIN_VERSION_KEY = "toolchainVersion"
    COMMENT_PREFIXES = ("#", "!")

    def __init__(self, os_utils=None):
        self.os_utils = os_utils if os_utils else OSUtils()

    def properties_path(self, wrapper_path):
        """
        The properties file lives in the gradle/ folder next to the wrapper script.

        :type wrapper_path: str
        :param wrapper_path: path of gradlew, e.g. "sub/gradlew"
        """
        project_dir = self.os_utils.dirname(wrapper_path or "")
        return self.os_utils.joinpath(project_dir, self.PROPERTIES_DIR, self.PROPERTIES_FILE)

    def read_properties(self, wrapper_path):
        path = self.properties_path(wrapper_path)
        content = self.os_utils.read_file(path, "utf8")
        if content is None:
            LOG.debug("No daemon JVM properties found at %s", path)
            return None
        return parse_properties(content)

    def toolchain_version(self, wrapper_path):
        properties = self.read_properties(wrapper_path)
        if not properties:
            return None

        version = properties.get(self.TOOLCHAIN_VERSION_KEY)
        if not version:
            return None
        LOG.debug("Gradle daemon JVM toolchain version %s declared for %s", version, wrapper_path)
        return version


def parse_properties(content):
    properties = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith(DaemonJvmReader.COMMENT_PREFIXES):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        properties[key.strip()] = value.strip()
    return properties


def get_jvm_configuration(wrapper_path, os_utils=None):
    """
    Returns the toolchainVersion declared for the Gradle daemon, or None if none is declared
    """
    return DaemonJvmReader(os_utils=os_utils).toolchain_version(wrapper_path)
