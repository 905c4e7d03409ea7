"""AWS S3 storage for the hotel data document."""

from datetime import datetime, timezone
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from structlog import get_logger

from lavender_stays.storage.base import DocumentStorage, StorageReadError, StorageWriteError
from lavender_stays.storage.client_factory import get_boto3_client_kwargs

logger = get_logger(__name__)

_MISSING_OBJECT_CODES = {"NoSuchKey", "404", "NotFound"}


class S3Storage(DocumentStorage):
    """Stores the document as a single S3 object.

    ``put_object`` replaces the object in one request, so readers never see
    a partially uploaded document.
    """

    def __init__(self, bucket: str, key: str, s3_client: Optional[Any] = None):
        """Initialize S3 storage.

        Uses AWS_ACCESS_KEY_ID/AWS_SECRET_ACCESS_KEY if set; otherwise
        boto3 default credential provider (SSO, role, etc.).

        Args:
            bucket: S3 bucket name
            key: Object key of the data document
            s3_client: Optional pre-built boto3 S3 client
        """
        self.bucket = bucket
        self.key = key
        self.s3_client = s3_client or boto3.client("s3", **get_boto3_client_kwargs("s3"))

    @property
    def location(self) -> str:
        return f"s3://{self.bucket}/{self.key}"

    def read(self) -> Optional[str]:
        logger.debug("Retrieving data document from S3", url=self.location)

        try:
            response = self.s3_client.get_object(Bucket=self.bucket, Key=self.key)
            return response["Body"].read().decode("utf-8")

        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code in _MISSING_OBJECT_CODES:
                logger.info("Data document not found in S3", url=self.location)
                return None
            logger.error(
                "Failed to retrieve data document from S3",
                url=self.location,
                error=str(e),
            )
            raise StorageReadError(
                f"Failed to retrieve {self.location}: {str(e)}"
            ) from e
        except (BotoCoreError, UnicodeDecodeError) as e:
            logger.error(
                "Unexpected error retrieving data document",
                url=self.location,
                error=str(e),
            )
            raise StorageReadError(
                f"Unexpected error retrieving {self.location}: {str(e)}"
            ) from e

    def write(self, content: str) -> None:
        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=self.key,
                Body=content.encode("utf-8"),
                ContentType="application/json",
                Metadata={
                    "upload-timestamp": datetime.now(timezone.utc).isoformat(),
                },
            )
            logger.debug("Uploaded data document", url=self.location)

        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Failed to upload data document to S3",
                url=self.location,
                error=str(e),
            )
            raise StorageWriteError(
                f"Failed to upload {self.location}: {str(e)}"
            ) from e
