"""
s3copy.py — `s3 cp` between S3 objects, local files and stdio.

Operands (see paths.py):
  s3://bucket/key : an S3 object
  -               : stdin as a source, stdout as a destination
  anything else   : a local file; "." as destination means "same name as
                    the last path segment of the source"

Usage:
  awslite s3 cp s3://bucket/key LOCAL
  awslite s3 cp LOCAL s3://bucket/key
  awslite s3 cp s3://bucket/a s3://other/b
  tar c dir | awslite s3 cp - s3://bucket/dir.tar
  awslite s3 cp s3://bucket/dir.tar - | tar x

Notes:
  - Uploads are a single put_object. The request body must be seekable, so a
    non-seekable source (an S3 download, a stdin pipe) is read fully into
    memory first. Not suitable for objects that do not fit in RAM.
  - Local destination files are created or truncated; a failed copy removes
    the partial file. Copying a local file onto itself is refused.
"""

# ── Stdlib imports ────────────────────────────────────────────────────────────
import contextlib
import io
import logging
import mimetypes
import os
import sys
from typing import BinaryIO, Optional

from . import config
from .errors import ConfigError, UsageError, aws_call, local_io
from .paths import Endpoint, LocalFile, RemoteObject, StandardStream, classify
from .session import make_client

log = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────
def chunk_size_setting() -> int:
    size = config.COPY_CHUNK_SIZE
    if size <= 0:
        raise ConfigError(f"AWSLITE_COPY_CHUNK_SIZE must be a positive number of bytes, got {size}")
    return size


def pump(reader: BinaryIO, writer: BinaryIO, chunk_size: Optional[int] = None) -> int:
    """Copy reader to writer until EOF. Returns the number of bytes copied."""
    if chunk_size is None:
        chunk_size = chunk_size_setting()
    elif chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    total = 0
    while True:
        chunk = reader.read(chunk_size)
        if not chunk:
            break
        writer.write(chunk)
        total += len(chunk)
    return total


def dot_target(src_path: str, src: Endpoint) -> str:
    """Resolve the "." destination alias to the source's last path segment."""
    if isinstance(src, StandardStream):
        raise UsageError("cannot use '.' as destination when reading from stdin")
    name = src_path.split("/")[-1]
    if not name:
        raise UsageError(f"cannot derive a file name from {src_path}")
    return name


def _seekable(stream: BinaryIO) -> BinaryIO:
    seekable = getattr(stream, "seekable", None)
    if seekable is not None and seekable():
        return stream
    buf = io.BytesIO()
    size = pump(stream, buf)
    buf.seek(0)
    log.info(f"Buffered {size} bytes in memory for upload")
    return buf


def _remaining(stream: BinaryIO) -> int:
    start = stream.tell()
    end = stream.seek(0, io.SEEK_END)
    stream.seek(start)
    return end - start


@contextlib.contextmanager
def open_source(src: Endpoint, client, stdin: Optional[BinaryIO] = None):
    """Yield a readable binary stream for src and release it afterwards."""
    if isinstance(src, RemoteObject):
        with aws_call(f"get {src.uri}"):
            resp = client.get_object(Bucket=src.bucket, Key=src.key)
            body = resp["Body"]
            try:
                yield body
            finally:
                body.close()
    elif isinstance(src, StandardStream):
        yield stdin if stdin is not None else sys.stdin.buffer
    else:
        with local_io(f"open {src.path}"):
            f = open(src.path, "rb")
        with f:
            yield f


def same_local_file(src: Endpoint, dst: Endpoint) -> bool:
    """True when both operands name one existing local file."""
    if not (isinstance(src, LocalFile) and isinstance(dst, LocalFile)):
        return False
    return os.path.exists(src.path) and os.path.exists(dst.path) and os.path.samefile(src.path, dst.path)


def _write_local(reader: BinaryIO, path: str) -> int:
    # Removes the partial file if the copy fails.
    with local_io(f"write {path}"):
        f = open(path, "wb")
    try:
        with f, local_io(f"write {path}"):
            return pump(reader, f)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(path)
        raise


def _upload(reader: BinaryIO, dst: RemoteObject, client) -> int:
    with local_io("read source"):
        body = _seekable(reader)
        size = _remaining(body)
    content_type = mimetypes.guess_type(dst.key)[0] or "application/octet-stream"
    with aws_call(f"put {dst.uri}"):
        client.put_object(Bucket=dst.bucket, Key=dst.key, Body=body, ContentType=content_type)
    return size


# ─────────────────────────────────────────────────────────────────────────────
# copy(src_path, dst_path)
# ─────────────────────────────────────────────────────────────────────────────
def copy(
    src_path: str,
    dst_path: str,
    client=None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """
    Copy src_path to dst_path and return the number of bytes transferred.

    client defaults to a fresh boto3 S3 client, created only when one of the
    operands is an S3 path. stdin/stdout default to the process's binary
    standard streams; they are flushed but never closed.
    """
    src = classify(src_path)
    dst = classify(dst_path)
    if isinstance(dst, LocalFile) and dst.path == ".":
        dst = LocalFile(dot_target(src_path, src))
    if same_local_file(src, dst):
        raise UsageError(f"{src_path} and {dst.path} are the same file")
    chunk_size_setting()

    if client is None and (isinstance(src, RemoteObject) or isinstance(dst, RemoteObject)):
        client = make_client("s3")

    with open_source(src, client, stdin) as reader:
        if isinstance(dst, RemoteObject):
            size = _upload(reader, dst, client)
        elif isinstance(dst, StandardStream):
            stdout = stdout if stdout is not None else sys.stdout.buffer
            with local_io("write stdout"):
                size = pump(reader, stdout)
                stdout.flush()
        else:
            size = _write_local(reader, dst.path)

    log.info(f"Copied {size} bytes: {src_path} -> {dst_path}")
    return size
