"""
Tests for artifact upload to blob storage.
"""

import pytest
from unittest.mock import MagicMock, patch

from azure.core.exceptions import HttpResponseError

from spring_deployer.providers.azure.storage import upload_file_to_storage

UPLOAD_URL = "https://store.blob.core.windows.net/container/app.jar?sv=2020&sig=abc"


class TestUploadFileToStorage:

    def test_uploads_file_contents(self, tmp_path):
        artifact = tmp_path / "app.jar"
        artifact.write_bytes(b"jar-bytes")
        blob_client = MagicMock()
        uploaded = {}
        blob_client.upload_blob.side_effect = lambda data, overwrite: uploaded.update(
            data=data.read(), overwrite=overwrite
        )

        with patch("spring_deployer.providers.azure.storage.BlobClient") as blob_client_cls:
            blob_client_cls.from_blob_url.return_value = blob_client
            upload_file_to_storage(artifact, UPLOAD_URL)

        blob_client_cls.from_blob_url.assert_called_once_with(UPLOAD_URL)
        assert uploaded == {"data": b"jar-bytes", "overwrite": True}

    def test_accepts_string_path(self, tmp_path):
        artifact = tmp_path / "app.jar"
        artifact.write_bytes(b"x")

        with patch("spring_deployer.providers.azure.storage.BlobClient") as blob_client_cls:
            upload_file_to_storage(str(artifact), UPLOAD_URL)

        blob_client_cls.from_blob_url.return_value.upload_blob.assert_called_once()

    def test_missing_file_raises(self, tmp_path):
        with patch("spring_deployer.providers.azure.storage.BlobClient"):
            with pytest.raises(OSError):
                upload_file_to_storage(tmp_path / "missing.jar", UPLOAD_URL)

    def test_upload_failure_propagates(self, tmp_path):
        artifact = tmp_path / "app.jar"
        artifact.write_bytes(b"x")

        with patch("spring_deployer.providers.azure.storage.BlobClient") as blob_client_cls:
            blob_client_cls.from_blob_url.return_value.upload_blob.side_effect = HttpResponseError("403")
            with pytest.raises(HttpResponseError):
                upload_file_to_storage(artifact, UPLOAD_URL)
