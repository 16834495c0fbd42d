"""
session.py — boto3 client construction.

Credentials, profile and default region come from boto3's usual chain
(env vars, ~/.aws/credentials, ~/.aws/config, instance metadata). A region
override, when given, replaces the configured default for that client only.
"""

# ── Stdlib imports ────────────────────────────────────────────────────────────
import logging
from typing import Optional

# ── External deps ─────────────────────────────────────────────────────────────
import boto3

from .errors import aws_call

log = logging.getLogger(__name__)


def make_client(service: str, region: Optional[str] = None):
    """
    Build a boto3 client for `service`.
    Raises ConfigError when the profile is unknown or no region can be resolved.
    """
    with aws_call(f"{service} session"):
        session = boto3.session.Session(region_name=region or None)
        client = session.client(service)
    log.debug(f"Created {service} client (region={client.meta.region_name})")
    return client
