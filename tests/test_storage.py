"""Tests for the document storage backends."""

import io
from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from lavender_stays.storage import (
    FileStorage,
    InMemoryStorage,
    S3Storage,
    StorageReadError,
    StorageWriteError,
    build_storage,
)
from lavender_stays.storage.client_factory import get_boto3_client_kwargs
from lavender_stays.store import RecordStore


def client_error(code: str, operation: str = "GetObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class TestFileStorage:
    """Tests for local file storage."""

    def test_missing_file_reads_as_none(self, tmp_path):
        assert FileStorage(tmp_path / "data.json").read() is None

    def test_write_creates_parent_directories(self, tmp_path):
        path = tmp_path / "data" / "data.json"
        storage = FileStorage(path)

        storage.write('{"rooms": []}')

        assert path.read_text(encoding="utf-8") == '{"rooms": []}'
        assert storage.read() == '{"rooms": []}'

    def test_write_replaces_without_leftovers(self, tmp_path):
        """Only the data file remains after repeated writes."""
        storage = FileStorage(tmp_path / "data.json")

        storage.write("first")
        storage.write("second ₹")

        assert storage.read() == "second ₹"
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_failed_replace_keeps_old_document(self, tmp_path):
        storage = FileStorage(tmp_path / "data.json")
        storage.write("original")

        with patch(
            "lavender_stays.storage.file_storage.os.replace",
            side_effect=OSError("device busy"),
        ):
            with pytest.raises(StorageWriteError):
                storage.write("replacement")

        assert storage.read() == "original"
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_unreadable_path_raises(self, tmp_path):
        with pytest.raises(StorageReadError):
            FileStorage(tmp_path).read()

    def test_store_seeds_a_new_file(self, tmp_path, clock):
        path = tmp_path / "data.json"

        RecordStore(FileStorage(path), clock=clock).initialize()

        assert '"bookingRequests"' in path.read_text(encoding="utf-8")


class TestS3Storage:
    """Tests for S3 storage with a mocked boto3 client."""

    def test_read(self):
        s3 = Mock()
        s3.get_object.return_value = {"Body": io.BytesIO('{"rooms": []}'.encode("utf-8"))}

        content = S3Storage("hotel-bucket", "lavender/data.json", s3_client=s3).read()

        assert content == '{"rooms": []}'
        s3.get_object.assert_called_once_with(Bucket="hotel-bucket", Key="lavender/data.json")

    @pytest.mark.parametrize("code", ["NoSuchKey", "404"])
    def test_missing_object_reads_as_none(self, code):
        s3 = Mock()
        s3.get_object.side_effect = client_error(code)

        assert S3Storage("hotel-bucket", "data.json", s3_client=s3).read() is None

    def test_access_denied_raises(self):
        s3 = Mock()
        s3.get_object.side_effect = client_error("AccessDenied")

        with pytest.raises(StorageReadError) as exc_info:
            S3Storage("hotel-bucket", "data.json", s3_client=s3).read()

        assert isinstance(exc_info.value.__cause__, ClientError)

    def test_write(self):
        s3 = Mock()
        storage = S3Storage("hotel-bucket", "data.json", s3_client=s3)

        storage.write('{"rooms": []}')

        kwargs = s3.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "hotel-bucket"
        assert kwargs["Key"] == "data.json"
        assert kwargs["Body"] == b'{"rooms": []}'
        assert kwargs["ContentType"] == "application/json"

    def test_write_failure_raises(self):
        s3 = Mock()
        s3.put_object.side_effect = EndpointConnectionError(endpoint_url="https://s3.test")

        with pytest.raises(StorageWriteError):
            S3Storage("hotel-bucket", "data.json", s3_client=s3).write("{}")

    def test_location(self):
        assert S3Storage("b", "k.json", s3_client=Mock()).location == "s3://b/k.json"

    @patch("boto3.client")
    def test_builds_client_from_settings(self, mock_boto_client):
        S3Storage("hotel-bucket", "data.json")

        args, kwargs = mock_boto_client.call_args
        assert args == ("s3",)
        assert "region_name" in kwargs


class TestClientFactory:
    def test_explicit_credentials_used_when_set(self, monkeypatch):
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIAEXAMPLE")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")

        kwargs = get_boto3_client_kwargs("s3")

        assert kwargs["aws_access_key_id"] == "AKIAEXAMPLE"
        assert kwargs["aws_secret_access_key"] == "secret"

    def test_default_credential_chain(self, monkeypatch):
        monkeypatch.delenv("AWS_ACCESS_KEY_ID", raising=False)
        monkeypatch.delenv("AWS_SECRET_ACCESS_KEY", raising=False)

        kwargs = get_boto3_client_kwargs("s3")

        assert "aws_access_key_id" not in kwargs
        assert kwargs["config"].retries["mode"] == "standard"


class TestBuildStorage:
    """Tests for backend selection."""

    def test_file_backend(self, tmp_path):
        with patch("lavender_stays.storage.factory.settings") as mock_settings:
            mock_settings.storage.backend = "file"
            mock_settings.storage.data_file = tmp_path / "data.json"

            storage = build_storage()

        assert isinstance(storage, FileStorage)
        assert storage.path == tmp_path / "data.json"

    def test_memory_backend(self):
        with patch("lavender_stays.storage.factory.settings") as mock_settings:
            mock_settings.storage.backend = "memory"

            assert isinstance(build_storage(), InMemoryStorage)

    @patch("boto3.client")
    def test_s3_backend(self, mock_boto_client):
        with patch("lavender_stays.storage.factory.settings") as mock_settings:
            mock_settings.storage.backend = "s3"
            mock_settings.storage.s3_bucket = "hotel-bucket"
            mock_settings.storage.s3_key = "lavender/data.json"

            storage = build_storage()

        assert isinstance(storage, S3Storage)
        assert storage.location == "s3://hotel-bucket/lavender/data.json"
