"""S3 storage service for photo uploads."""
from typing import Any, Dict, Optional
import logging

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from photothing.app.config import Settings

logger = logging.getLogger(__name__)


class S3ServiceError(Exception):
    """Custom exception for S3 service errors."""
    pass


class S3Service:
    """
    Presigns uploads into the photo bucket and builds public CDN URLs.

    Objects live at ``<owner uuid>/<photo uuid>``.
    """

    def __init__(
        self,
        bucket: str,
        region: str,
        cdn_url: str,
        cdn_prefix: Optional[str] = None,
        upload_expires_in: int = 3600,
        client: Any = None,
        **client_kwargs,
    ):
        self.bucket_name = bucket
        self.region = region
        self.cdn_url = cdn_url.rstrip("/")
        self.cdn_prefix = cdn_prefix.strip("/") if cdn_prefix else None
        self.upload_expires_in = upload_expires_in
        if client is not None:
            self.s3_client = client
            return
        try:
            self.s3_client = boto3.client(
                's3',
                region_name=region,
                config=Config(
                    signature_version='s3v4',
                    s3={'addressing_style': 'virtual'}
                ),
                **client_kwargs,
            )
            logger.info("S3 service initialized for bucket: %s", bucket)
        except (BotoCoreError, ValueError) as e:
            logger.error("Failed to initialize S3 client: %s", e)
            raise S3ServiceError(f"S3 initialization failed: {e}")

    @classmethod
    def from_settings(cls, settings: Settings) -> "S3Service":
        return cls(
            bucket=settings.S3_BUCKET_NAME,
            region=settings.S3_REGION,
            cdn_url=settings.CDN_URL,
            cdn_prefix=settings.CDN_PREFIX,
            upload_expires_in=settings.UPLOAD_URL_EXPIRE_SECONDS,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            endpoint_url=settings.S3_ENDPOINT_URL,
        )

    @staticmethod
    def object_key(directory: str, filename: str) -> str:
        return f"{directory}/{filename}"

    def sign_upload(self, directory: str, filename: str, content_type: str) -> Dict[str, str]:
        """
        Generate a presigned PUT URL for a direct upload.

        Args:
            directory: Key prefix, the owner's uuid
            filename: Object name, the photo's uuid
            content_type: MIME type the client must send

        Returns:
            Dict with url, directory, filename and the public get_url

        Raises:
            S3ServiceError: If URL generation fails
        """
        key = self.object_key(directory, filename)
        try:
            url = self.s3_client.generate_presigned_url(
                'put_object',
                Params={
                    'Bucket': self.bucket_name,
                    'Key': key,
                    'ContentType': content_type,
                },
                ExpiresIn=self.upload_expires_in,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("Error generating presigned URL for %s: %s", key, e)
            raise S3ServiceError(f"Failed to generate upload URL: {e}")

        logger.debug("Generated PUT presigned URL for: %s", key)
        return {
            'url': url,
            'directory': directory,
            'filename': filename,
            'get_url': self.resolve_public_url(directory, filename),
        }

    def resolve_public_url(self, owner_uuid: str, photo_uuid: str) -> str:
        """Public CDN URL of a stored photo."""
        parts = [self.cdn_url]
        if self.cdn_prefix:
            parts.append(self.cdn_prefix)
        parts.append(self.object_key(owner_uuid, photo_uuid))
        return "https://" + "/".join(parts)

    def object_exists(self, key: str) -> bool:
        """
        Check if object exists in S3.

        Returns:
            True if exists, False otherwise
        """
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=key)
            return True
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            if error_code in ('404', 'NoSuchKey', 'NotFound'):
                return False
            logger.error("Error checking object existence: %s", e)
            raise S3ServiceError(f"Failed to check object: {e}")

    def stats(self) -> Dict[str, Optional[str]]:
        return {
            'bucket': self.bucket_name,
            'cdn': self.cdn_url,
            'cdn_prefix': self.cdn_prefix,
        }
