"""
Exit codes for the InfluxDB 2 CLI.

Scripts can branch on these to tell apart what went wrong.
"""

SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments, or a request that could not be encoded
ERROR_INVALID_ARGS = 2

# No token configured, or the server rejected it (401)
ERROR_AUTH_FAILURE = 3

# Server unreachable, timeout, or an unexpected HTTP status
ERROR_NETWORK = 4

# Resource not found (404)
ERROR_NOT_FOUND = 5

# Permission denied (403)
ERROR_PERMISSION_DENIED = 6

_STATUS_EXIT_CODES = {
    401: ERROR_AUTH_FAILURE,
    403: ERROR_PERMISSION_DENIED,
    404: ERROR_NOT_FOUND,
}


def exit_code_for_status(status_code: int) -> int:
    """Map an unexpected HTTP status to an exit code."""
    return _STATUS_EXIT_CODES.get(status_code, ERROR_NETWORK)


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_AUTH_FAILURE: "ERROR_AUTH_FAILURE",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
    }
    return code_names.get(code, f"UNKNOWN({code})")
