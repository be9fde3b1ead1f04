"""
CLI interface for Gradle Wrapper Tools. It is a very thin wrapper over the library, meant to integrate with update
tooling written in other programming languages that can't import Python libraries directly. The CLI provides
a JSON-RPC interface over stdin/stdout.
"""

import sys
import json
import os
import logging
import re

from gradle_wrapper_tools import RPC_PROTOCOL_VERSION as gradle_wrapper_tools_protocol_version
from gradle_wrapper_tools.exceptions import InvalidRequestError, UnsupportedExecutionModeError
from gradle_wrapper_tools.execution_mode import ResolverConfig
from gradle_wrapper_tools.gradle_wrapper.command import prepare_gradle_command
from gradle_wrapper_tools.gradle_wrapper.java_constraint import JavaConstraintResolver
from gradle_wrapper_tools.gradle_wrapper.version import extract_gradle_version

log_level = int(os.environ.get("GRADLE_WRAPPER_TOOLS_LOG_LEVEL", logging.INFO))

# Write output to stderr because stdout is used for command response
logging.basicConfig(stream=sys.stderr, level=log_level, format="%(message)s")

LOG = logging.getLogger(__name__)

VERSION_REGEX = re.compile("^([0-9])+.([0-9]+)$")


def _success_response(request_id, result):
    return json.dumps({"jsonrpc": "2.0", "id": request_id, "result": result})


def _error_response(request_id, http_status_code, message):
    return json.dumps({"jsonrpc": "2.0", "id": request_id, "error": {"code": http_status_code, "message": message}})


def _parse_version(version_string):

    if version_string and VERSION_REGEX.match(version_string):
        return float(version_string)
    else:
        ex = "Protocol Version does not match : {}".format(VERSION_REGEX.pattern)
        LOG.debug(ex)
        raise ValueError(ex)


def version_compatibility_check(version):
    # A caller speaking a newer protocol than ours is rejected, older or equal is fine

    if _parse_version(gradle_wrapper_tools_protocol_version) < version:
        ex = "Incompatible Protocol Version : {}, " "Current Protocol Version: {}".format(
            version, gradle_wrapper_tools_protocol_version
        )
        LOG.error(ex)
        raise ValueError(ex)


def _write_response(response, exit_code):
    sys.stdout.write(response)
    sys.stdout.flush()  # Make sure it is written
    sys.exit(exit_code)


def _required(params, name):
    if name not in params:
        raise InvalidRequestError(reason="missing parameter '{}'".format(name))
    return params[name]


def get_java_constraint(params):
    config = ResolverConfig.from_dict(params)
    resolver = JavaConstraintResolver(config=config)
    constraint = resolver.get_java_constraint(params.get("gradle_version"), params.get("wrapper_path", ""))
    return {"java_constraint": constraint}


def extract_version(params):
    return {"gradle_version": extract_gradle_version(_required(params, "text"))}


def prepare_command(params):
    return {"command": prepare_gradle_command(_required(params, "wrapper_path"))}


METHODS = {
    "GradleWrapper.getJavaConstraint": get_java_constraint,
    "GradleWrapper.extractGradleVersion": extract_version,
    "GradleWrapper.prepareCommand": prepare_command,
}


def main():
    """
    Implementation of CLI Interface. Handles only one JSON-RPC method at a time and responds with data

    Input is passed as JSON string either through stdin or as the first argument to the command. Output is always
    printed to stdout.
    """

    if len(sys.argv) > 1:
        request_str = sys.argv[1]
        LOG.debug("Using the request object from command line argument")
    else:
        LOG.debug("Reading the request object from stdin")
        request_str = sys.stdin.read()

    request = json.loads(request_str)
    request_id = request["id"]
    params = request.get("params", {})

    method = METHODS.get(request["method"])
    if method is None:
        response = _error_response(request_id, -32601, "Method unavailable")
        return _write_response(response, 1)

    try:
        protocol_version = _parse_version(params.get("__protocol_version"))
        version_compatibility_check(protocol_version)

    except ValueError:
        response = _error_response(request_id, 505, "Unsupported Protocol Version")
        return _write_response(response, 1)

    exit_code = 0
    response = None

    try:
        response = _success_response(request_id, method(params))

    except (InvalidRequestError, UnsupportedExecutionModeError) as ex:
        LOG.debug("Invalid request", exc_info=ex)
        exit_code = 1
        response = _error_response(request_id, 400, str(ex))

    except Exception as ex:
        LOG.debug("Resolution crashed", exc_info=ex)
        exit_code = 1
        response = _error_response(request_id, 500, str(ex))

    _write_response(response, exit_code)


if __name__ == "__main__":
    main()
