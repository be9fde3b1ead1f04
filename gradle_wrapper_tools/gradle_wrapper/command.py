"""
Gradle wrapper command preparation
"""

import logging
import stat

from gradle_wrapper_tools.os_utils import OSUtils

LOG = logging.getLogger(__name__)


class GradleCommandPreparer(object):
    WINDOWS_WRAPPER = "gradlew.bat"
    UNIX_WRAPPER = "./gradlew"

    # execute permission for owner, group and others
    EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

    def __init__(self, os_utils=None):
        self.os_utils = os_utils if os_utils else OSUtils()

    @property
    def wrapper_name(self):
        return self.WINDOWS_WRAPPER if self.os_utils.is_windows() else self.UNIX_WRAPPER

    def prepare(self, wrapper_path):
        """
        Checks the wrapper script can be run.

        A wrapper that is not executable by others gets the execute bits added, since wrappers committed
        from Windows machines often lose them. Failing to do so is not fatal, the command is returned anyway.

        :type wrapper_path: str
        :param wrapper_path: path of the wrapper script

        :rtype: str
        :return: wrapper_path, or None if it is not an existing file
        """
        wrapper_stat = self.os_utils.stat_file(wrapper_path)
        if wrapper_stat is None:
            LOG.debug("Gradle wrapper %s not found", wrapper_path)
            return None

        if not stat.S_ISREG(wrapper_stat.st_mode):
            LOG.debug("Gradle wrapper %s is not a file", wrapper_path)
            return None

        if not self.os_utils.is_windows() and not wrapper_stat.st_mode & stat.S_IXOTH:
            LOG.debug("Gradle wrapper %s is missing the executable bit", wrapper_path)
            self._make_executable(wrapper_path, wrapper_stat.st_mode)

        return wrapper_path

    def _make_executable(self, wrapper_path, mode):
        try:
            self.os_utils.chmod(wrapper_path, stat.S_IMODE(mode) | self.EXECUTE_BITS)
        except OSError as ex:
            LOG.warning("Unable to make Gradle wrapper %s executable: %s", wrapper_path, ex)


def gradle_wrapper_file_name(os_utils=None):
    return GradleCommandPreparer(os_utils=os_utils).wrapper_name


def prepare_gradle_command(wrapper_path, os_utils=None):
    return GradleCommandPreparer(os_utils=os_utils).prepare(wrapper_path)
