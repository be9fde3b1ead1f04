"""
OSUtils implementation which is used to probe the Gradle project on disk
"""
import io
import logging
import os
import sys

LOG = logging.getLogger(__name__)


class OSUtils:
    """
    Convenience wrapper around common system functions. Lookups that fail return None instead of raising.
    """

    def joinpath(self, *args):
        return os.path.join(*args)

    def dirname(self, path):
        return os.path.dirname(path)

    def platform(self):
        return sys.platform

    def is_windows(self):
        return self.platform() == "win32"

    def read_file(self, path, encoding="utf8"):
        """
        Parameters
        ----------
        path : str
            path of the file to read
        encoding : str
            text encoding of the file

        Returns
        -------
        str
            contents of the file, or None if it does not exist or can't be read
        """
        try:
            with io.open(path, "r", encoding=encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as ex:
            LOG.debug("Unable to read file %s", path, exc_info=ex)
            return None

    def stat_file(self, path):
        try:
            return os.stat(path)
        except OSError as ex:
            LOG.debug("Unable to stat file %s", path, exc_info=ex)
            return None

    def chmod(self, path, mode):
        os.chmod(path, mode)
