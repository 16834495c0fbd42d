from __future__ import annotations

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, NoCredentialsError, ReadTimeoutError

from awslite.errors import (
    AwsliteError,
    ConfigError,
    DecodeError,
    LocalIOError,
    RemoteRequestError,
    UsageError,
    aws_call,
    local_io,
)
from awslite.session import make_client


@pytest.mark.unit
def test_exit_codes_are_distinct_per_error_kind() -> None:
    kinds = [UsageError, ConfigError, RemoteRequestError, DecodeError, LocalIOError]
    codes = [k.exit_code for k in kinds]
    assert codes == [2, 3, 4, 5, 6]
    assert all(issubclass(k, AwsliteError) for k in kinds)


@pytest.mark.unit
def test_aws_call_maps_missing_credentials_to_config_error() -> None:
    with pytest.raises(ConfigError, match="s3 get") as info:
        with aws_call("s3 get"):
            raise NoCredentialsError()
    assert isinstance(info.value.__cause__, NoCredentialsError)


@pytest.mark.unit
def test_aws_call_maps_client_error_with_code() -> None:
    err = ClientError({"Error": {"Code": "NoSuchBucket", "Message": "gone"}}, "GetObject")
    with pytest.raises(RemoteRequestError, match="NoSuchBucket"):
        with aws_call("get s3://gone/key"):
            raise err


@pytest.mark.unit
def test_aws_call_maps_transport_errors() -> None:
    with pytest.raises(RemoteRequestError, match="Could not connect"):
        with aws_call("put s3://b/k"):
            raise EndpointConnectionError(endpoint_url="https://s3.example.invalid")


@pytest.mark.unit
def test_aws_call_leaves_other_errors_alone() -> None:
    with pytest.raises(KeyError):
        with aws_call("x"):
            raise KeyError("authorizationData")


@pytest.mark.unit
def test_local_io_wraps_os_errors(tmp_path) -> None:
    with pytest.raises(LocalIOError, match="open missing"):
        with local_io("open missing"):
            open(tmp_path / "missing", "rb")


@pytest.mark.unit
def test_local_io_lets_sdk_transport_errors_through() -> None:
    with pytest.raises(RemoteRequestError, match="Read timeout"):
        with aws_call("get s3://b/k"):
            with local_io("write out.bin"):
                raise ReadTimeoutError(endpoint_url="https://b.s3.amazonaws.com/k")


@pytest.mark.unit
def test_make_client_region_override() -> None:
    assert make_client("ecr", region="eu-west-1").meta.region_name == "eu-west-1"
    assert make_client("ecr").meta.region_name == "us-east-1"


@pytest.mark.unit
def test_make_client_without_region_is_config_error(monkeypatch) -> None:
    monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
    with pytest.raises(ConfigError, match="ecr session"):
        make_client("ecr")


@pytest.mark.unit
def test_make_client_unknown_profile_is_config_error(monkeypatch) -> None:
    monkeypatch.setenv("AWS_PROFILE", "does-not-exist")
    with pytest.raises(ConfigError):
        make_client("s3")
