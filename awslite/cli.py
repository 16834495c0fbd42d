"""
cli.py — awslite command-line entrypoint.

Supports two commands:
  - s3 cp        : copy bytes between S3, local files and stdio
  - ecr get-login: print `docker login` commands for ECR registries

Usage:
  awslite s3 cp <src> <dst>
  awslite ecr get-login [--region <name>] [--registry-ids <id> ...]

Exit codes:
  0 ok, 2 usage, 3 AWS config/credentials, 4 AWS request failed,
  5 bad authorization token, 6 local file I/O
"""

# ── Stdlib imports ────────────────────────────────────────────────────────────
import logging
import sys
from typing import List, Optional

from . import config
from .ecrlogin import emit_logins
from .errors import AwsliteError, UsageError
from .options import MANY, ONE, OptionSpec, parse_options
from .s3copy import copy

log = logging.getLogger("awslite")

USAGE = (
    "usage: awslite s3 cp <src> <dst>\n"
    "       awslite ecr get-login [--region <name>] [--registry-ids <id> ...]\n"
    "\n"
    "  <src>/<dst> : s3://bucket/key, a local path, or - for stdin/stdout\n"
    "                (a destination of . reuses the source's file name)\n"
)

GET_LOGIN_OPTIONS = (
    OptionSpec("region", ONE),
    OptionSpec("registry-ids", MANY),
)


# ─────────────────────────────────────────────────────────────────────────────
# Subcommands
# ─────────────────────────────────────────────────────────────────────────────
def s3_command(args: List[str]) -> None:
    if len(args) != 3 or args[0] != "cp":
        raise UsageError("s3 cp <src> <dst>")
    copy(args[1], args[2])


def ecr_command(args: List[str]) -> None:
    if not args or args[0] != "get-login":
        raise UsageError("ecr get-login [--region <name>] [--registry-ids <id> ...]")
    opts = parse_options(GET_LOGIN_OPTIONS, args[1:])
    emit_logins(opts.get("region"), opts.get("registry-ids", []), strict=config.STRICT_LOGIN)


COMMANDS = {
    "s3": s3_command,
    "ecr": ecr_command,
}


# ──────────────────────────────────────────────────────────────────────────────
# main(argv)
# Dispatches on the first argument and maps error kinds to exit codes.
# ──────────────────────────────────────────────────────────────────────────────
def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(name)s: %(message)s")
    args = sys.argv[1:] if argv is None else list(argv)

    if args and args[0] in ("-h", "--help"):
        sys.stdout.write(USAGE)
        return 0

    try:
        if not args:
            raise UsageError("missing command")
        command = COMMANDS.get(args[0])
        if command is None:
            raise UsageError(f"unknown command: {args[0]}")
        command(args[1:])
    except UsageError as e:
        log.error(f"error: {e}")
        sys.stderr.write(USAGE)
        return e.exit_code
    except AwsliteError as e:
        log.error(f"error: {e}")
        return e.exit_code
    return 0


# ──────────────────────────────────────────────────────────────────────────────
# Standard Python entrypoint guard
# ──────────────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(main())
