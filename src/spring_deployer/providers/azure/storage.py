"""
Artifact upload to Azure Blob Storage.

The Spring Apps service hands out a SAS URL for a single blob; the artifact is
written there with azure-storage-blob. No retries: a failed upload raises.
"""

from pathlib import Path
from typing import Union

from azure.storage.blob import BlobClient

from spring_deployer.logger import logger


def upload_file_to_storage(artifact: Union[str, Path], upload_url: str) -> None:
    """
    Upload a local file to the blob addressed by upload_url.
    
    Args:
        artifact: Path of the file to upload
        upload_url: Blob URL including its SAS token
    
    Raises:
        OSError: If the file cannot be read
        azure.core.exceptions.AzureError: If the upload fails
    """
    artifact = Path(artifact)
    blob_client = BlobClient.from_blob_url(upload_url)
    
    logger.info(f"Uploading {artifact.name} ({artifact.stat().st_size} bytes) to storage...")
    with open(artifact, "rb") as data:
        blob_client.upload_blob(data, overwrite=True)
    logger.info(f"✓ Uploaded {artifact.name}")
