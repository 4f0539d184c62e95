"""
Scheduler Endpoint Validators.

Normalizes a user supplied scheduler address into the canonical
scheme://host:port/api form the RPC layer connects to. Every later RPC
call trusts the returned string, so this is the single failure point for
a misconfigured address.

Exports:
    validate_aurora_address: Normalize and validate a scheduler address
"""

from urllib.parse import urlsplit, urlunsplit

from config.defaults import SchedulerDefaults
from exceptions import EndpointParseError, UnsupportedSchemeError, InvalidApiPathError


def validate_aurora_address(address: str) -> str:
    """
    Normalize a scheduler address and reject unsupported ones.

    Steps:
        1. No "://" separator: assume http
        2. Parse as URL; control characters anywhere or whitespace in the
           host are rejected
        3. Empty path: assume /api
        4. No port: assume 8081
        5. Scheme must be http or https
        6. Path must be exactly /api

    Args:
        address: Raw scheduler address, e.g. "scheduler.example.com"

    Returns:
        Canonical URL, e.g. "http://scheduler.example.com:8081/api"

    Raises:
        EndpointParseError: address is not a parseable URL
        UnsupportedSchemeError: scheme is not http/https
        InvalidApiPathError: path is not /api
    """
    if "://" not in address:
        address = f"{SchedulerDefaults.DEFAULT_SCHEME}://{address}"

    # urlsplit silently strips some control characters, so check first
    if any(ord(ch) < 0x20 or ord(ch) == 0x7f for ch in address):
        raise EndpointParseError(f"error parsing url: invalid control character in {address!r}")

    try:
        parts = urlsplit(address)
        # .port validates the port and raises ValueError when it is bad
        port = parts.port
    except ValueError as e:
        raise EndpointParseError(f"error parsing url: {e}") from e

    if any(ch.isspace() for ch in parts.netloc):
        raise EndpointParseError(f"error parsing url: invalid character in host {parts.netloc!r}")

    path = parts.path or SchedulerDefaults.API_PATH

    netloc = parts.netloc
    if port is None:
        netloc = f"{netloc}:{SchedulerDefaults.DEFAULT_PORT}"

    if parts.scheme not in SchedulerDefaults.SUPPORTED_SCHEMES:
        raise UnsupportedSchemeError(
            f"only protocols http and https are supported {parts.scheme}"
        )

    if path != SchedulerDefaults.API_PATH:
        raise InvalidApiPathError(f"expected {SchedulerDefaults.API_PATH} path {path}")

    return urlunsplit((parts.scheme, netloc, path, parts.query, parts.fragment))
