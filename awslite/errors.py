"""
errors.py — Error taxonomy for awslite.

Every failure the CLI can report is one of the classes below. Components raise
them; only the command dispatcher (cli.main) turns them into an exit code.

Exit codes:
  2 : UsageError          (bad or missing command-line arguments)
  3 : ConfigError         (no credentials / region / profile for the SDK)
  4 : RemoteRequestError  (S3 or ECR call failed)
  5 : DecodeError         (malformed authorization token)
  6 : LocalIOError        (local file open/read/write failed)
"""

# ── Stdlib imports ────────────────────────────────────────────────────────────
import contextlib

# ── External deps ─────────────────────────────────────────────────────────────
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
    ProfileNotFound,
)


class AwsliteError(Exception):
    exit_code = 1


class UsageError(AwsliteError):
    exit_code = 2


class ConfigError(AwsliteError):
    exit_code = 3


class RemoteRequestError(AwsliteError):
    exit_code = 4


class DecodeError(AwsliteError):
    exit_code = 5


class LocalIOError(AwsliteError):
    exit_code = 6


# SDK exceptions that mean "the session could not be set up" rather than
# "the service said no".
_CONFIG_FAILURES = (NoCredentialsError, PartialCredentialsError, NoRegionError, ProfileNotFound)


# ──────────────────────────────────────────────────────────────────────────────
# aws_call(what)
# Wrap one SDK interaction and translate botocore failures into the taxonomy.
# ──────────────────────────────────────────────────────────────────────────────
@contextlib.contextmanager
def aws_call(what: str):
    try:
        yield
    except _CONFIG_FAILURES as e:
        raise ConfigError(f"{what}: {e}") from e
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code", "Unknown")
        raise RemoteRequestError(f"{what}: {code}: {e}") from e
    except BotoCoreError as e:
        raise RemoteRequestError(f"{what}: {e}") from e


@contextlib.contextmanager
def local_io(what: str):
    """
    Translate OSError raised while touching local files into LocalIOError.
    SDK transport errors (some of which are also OSError) pass through so that
    aws_call can report them as remote failures.
    """
    try:
        yield
    except BotoCoreError:
        raise
    except OSError as e:
        raise LocalIOError(f"{what}: {e}") from e
