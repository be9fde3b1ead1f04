"""
Gradle version extraction from wrapper properties or distribution urls
"""

import logging
import re

LOG = logging.getLogger(__name__)

DISTRIBUTION_URL_REGEX = re.compile(r"^\s*distributionUrl\s*[=:]\s*(?P<url>\S+?)\s*$", re.MULTILINE)

# gradle-7.3.3-bin.zip, gradle-7.4-rc-1-all.zip
DISTRIBUTION_FILE_REGEX = re.compile(r"-(?P<version>\d+\.\d+(?:\.\d+)?(?:-\w+)*)-(?P<type>bin|all)\.zip")

VERSION_REGEX = re.compile(r"(?<![\w.])(?P<version>\d+(?:\.\d+)+(?:-[0-9A-Za-z]+)*)")


def _unescape(text):
    # Properties files escape ':' and '=' in values
    return text.replace("\\:", ":").replace("\\=", "=")


def extract_distribution_url(text):
    """
    Returns the distributionUrl of a gradle-wrapper.properties content, or None
    """
    if not text or not isinstance(text, str):
        return None

    match = DISTRIBUTION_URL_REGEX.search(_unescape(text))
    if not match:
        return None
    return match.group("url")


def extract_gradle_version(text):
    """
    Finds the Gradle version embedded in a piece of text.

    A distribution file name (``gradle-<version>-bin.zip``) is preferred when present, since the rest of a
    wrapper properties file can contain unrelated numbers. Otherwise the first version-looking token of the
    text is returned.

    :type text: str
    :param text:
        wrapper properties content, distribution url or similar

    :rtype: str
    :return: the version, or None if the text holds no version
    """
    if not text or not isinstance(text, str):
        return None

    text = _unescape(text)

    match = DISTRIBUTION_FILE_REGEX.search(text)
    if match:
        LOG.debug("Found Gradle version %s in distribution file name", match.group("version"))
        return match.group("version")

    match = VERSION_REGEX.search(text)
    if match:
        return match.group("version")

    LOG.debug("No Gradle version found in text")
    return None
