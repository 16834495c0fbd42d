"""
ecrlogin.py — Print `docker login` commands for ECR registries.

Usage:
  awslite ecr get-login
  awslite ecr get-login --region eu-west-1 --registry-ids 012345678910 023456789012
  eval "$(awslite ecr get-login)"

Output (stdout), one line per registry, in the order ECR returns them:
  docker login -u AWS -p <password> https://012345678910.dkr.ecr.eu-west-1.amazonaws.com

Each authorization token is base64("user:password"). By default a token that
does not decode is reported on stderr and skipped, the remaining lines are
still printed, and the call ends with DecodeError. With strict=True the first
bad token stops the run before any later line is printed.
"""

# ── Stdlib imports ────────────────────────────────────────────────────────────
import base64
import binascii
import logging
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from .config import STRICT_LOGIN
from .errors import DecodeError, aws_call
from .session import make_client

log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Token decoding & formatting
# ─────────────────────────────────────────────────────────────────────────────
def decode_token(token: str) -> Tuple[str, str]:
    """Decode base64("user:password") into (user, password)."""
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise DecodeError(f"authorization token is not valid base64: {e}") from e

    user, sep, password = decoded.partition(":")
    if not sep:
        raise DecodeError("authorization token is not of the form user:password")
    return user, password


def format_login(user: str, password: str, endpoint: str) -> str:
    return f"docker login -u {user} -p {password} {endpoint}"


def get_authorization_data(client, registry_ids: Sequence[str]) -> List[dict]:
    """Fetch authorizationData for registry_ids, or the caller's default registry."""
    kwargs = {"registryIds": list(registry_ids)} if registry_ids else {}
    with aws_call("ecr get-authorization-token"):
        resp = client.get_authorization_token(**kwargs)
    return resp.get("authorizationData", [])


# ─────────────────────────────────────────────────────────────────────────────
# emit_logins(region, registry_ids)
# ─────────────────────────────────────────────────────────────────────────────
def emit_logins(
    region: Optional[str],
    registry_ids: Sequence[str],
    client=None,
    out: Optional[TextIO] = None,
    strict: bool = STRICT_LOGIN,
) -> int:
    """
    Print one `docker login` line per authorization entry and return how many
    were printed.

    region overrides the configured default region when client is not given.
    Raises DecodeError if any token is malformed (after printing the good
    ones, unless strict).
    """
    if client is None:
        client = make_client("ecr", region=region)
    out = out if out is not None else sys.stdout

    entries = get_authorization_data(client, registry_ids)
    log.info(f"Received {len(entries)} authorization entries")

    printed = 0
    failures = []
    for entry in entries:
        endpoint = entry.get("proxyEndpoint", "")
        try:
            user, password = decode_token(entry.get("authorizationToken", ""))
        except DecodeError as e:
            if strict:
                raise DecodeError(f"{endpoint}: {e}") from e
            log.error(f"{endpoint}: {e}")
            failures.append(endpoint)
            continue

        out.write(format_login(user, password, endpoint) + "\n")
        printed += 1
    out.flush()

    if failures:
        raise DecodeError(f"{len(failures)} of {len(entries)} authorization tokens could not be decoded: {', '.join(failures)}")
    return printed
