"""
Shared pytest fixtures and helpers for the awslite test suite.

No test talks to AWS: S3 is replaced by FakeS3 (an in-memory bucket map) and
wire-level checks use botocore's Stubber on a real client.
"""

import base64
import io
import pathlib
import sys

import boto3
import pytest
from botocore.exceptions import ClientError
from botocore.response import StreamingBody

# Make ``import awslite`` work without an editable install.
_PROJECT_ROOT = pathlib.Path(__file__).parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_token(user: str, password: str) -> str:
    """Encode user:password the way ECR returns authorization tokens."""
    return base64.b64encode(f"{user}:{password}".encode()).decode()


class FakeS3:
    """Minimal stand-in for a boto3 S3 client: get_object and put_object only."""

    def __init__(self, objects=None):
        self.objects = dict(objects or {})
        self.uploads = []
        self.raw_bodies = []

    def get_object(self, Bucket, Key):
        try:
            data = self.objects[(Bucket, Key)]
        except KeyError:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}},
                "GetObject",
            )
        raw = io.BytesIO(data)
        self.raw_bodies.append(raw)
        return {"Body": StreamingBody(raw, len(data)), "ContentLength": len(data)}

    def put_object(self, Bucket, Key, Body, ContentType):
        self.uploads.append({"Bucket": Bucket, "Key": Key, "Body": Body, "ContentType": ContentType})
        self.objects[(Bucket, Key)] = Body.read()
        return {"ETag": '"fake"'}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def aws_env(monkeypatch, tmp_path):
    """Point boto3 at dummy credentials and a fixed region; never at ~/.aws."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws-credentials"))
    for var in ("AWS_PROFILE", "AWS_DEFAULT_PROFILE", "AWS_SESSION_TOKEN", "AWS_REGION"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_s3():
    return FakeS3()


@pytest.fixture
def ecr_client():
    return boto3.client("ecr", region_name="us-east-1")


@pytest.fixture
def s3_client():
    return boto3.client("s3", region_name="us-east-1")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from inside a fresh temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def token():
    return make_token
