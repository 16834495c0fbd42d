"""
paths.py — Classify `s3 cp` operands.

An operand is one of:
  - RemoteObject : anything containing "s3://" (bucket/key split at the first "/")
  - StandardStream : the literal "-"
  - LocalFile : everything else

The remote check is a substring test, not a prefix test, so "x-s3://b/k" is
treated as remote. Existing scripts pass such operands; keep it.
"""

# ── Stdlib imports ────────────────────────────────────────────────────────────
from dataclasses import dataclass
from typing import Tuple, Union

from .config import S3_SCHEME, STDIO
from .errors import UsageError


@dataclass(frozen=True)
class RemoteObject:
    bucket: str
    key: str

    @property
    def uri(self) -> str:
        return f"{S3_SCHEME}{self.bucket}/{self.key}"


@dataclass(frozen=True)
class LocalFile:
    path: str


@dataclass(frozen=True)
class StandardStream:
    pass


Endpoint = Union[RemoteObject, LocalFile, StandardStream]


def is_s3_path(path: str) -> bool:
    return S3_SCHEME in path


# ──────────────────────────────────────────────────────────────────────────────
# parse_s3_path(path) -> (bucket, key)
# Drops a leading "s3://" and splits on the first "/". A path with no "/" has
# no key and is rejected.
# ──────────────────────────────────────────────────────────────────────────────
def parse_s3_path(path: str) -> Tuple[str, str]:
    rest = path[len(S3_SCHEME):] if path.startswith(S3_SCHEME) else path
    bucket, sep, key = rest.partition("/")
    if not sep:
        raise UsageError(f"Bad S3 URI (expected s3://bucket/key): {path}")
    return bucket, key


def classify(path: str) -> Endpoint:
    """Return the transfer endpoint a `cp` operand refers to."""
    if is_s3_path(path):
        return RemoteObject(*parse_s3_path(path))
    if path == STDIO:
        return StandardStream()
    return LocalFile(path)
