"""S3-compatible storage gateway.

Wraps a boto3 S3 client so the harness can run against S3-compatible
endpoints, including the XML interoperability API of Google Cloud Storage.

S3 has no bucket-level storage class or labels, so the configuration
snapshot is mapped as follows:

- location: the bucket's LocationConstraint ("us-east-1" when empty)
- storage class: always "STANDARD"
- versioning: enabled when the versioning Status is "Enabled"
- labels: the bucket tag set, None when the bucket has no tags
"""

from contextlib import contextmanager
from typing import Any, BinaryIO, Iterator, Optional

from botocore.exceptions import BotoCoreError, ClientError

from bucket_harness.errors import (
    BucketNotFoundError,
    ObjectNotFoundError,
    RemoteAccessError,
)
from bucket_harness.gateways.base import Body, StorageGateway
from bucket_harness.models import BucketConfiguration, BucketSpec

DEFAULT_REGION = "us-east-1"
DEFAULT_STORAGE_CLASS = "STANDARD"

BUCKET_NOT_FOUND_CODES = {"NoSuchBucket"}
OBJECT_NOT_FOUND_CODES = {"NoSuchKey", "404", "NotFound"}


class S3Gateway(StorageGateway):
    """Storage gateway backed by a boto3 S3 client."""

    def __init__(self, client: Any):
        self.client = client

    @contextmanager
    def _remote_call(self, operation: str, bucket: str, path: Optional[str] = None):
        """Translate boto3 errors raised inside the block."""
        location = f"{bucket}/{path}" if path else bucket
        try:
            yield
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            status_code = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            message = e.response.get("Error", {}).get("Message", str(e))

            error_cls = RemoteAccessError
            if error_code in BUCKET_NOT_FOUND_CODES or (
                error_code in OBJECT_NOT_FOUND_CODES and not path
            ):
                error_cls = BucketNotFoundError
            elif error_code in OBJECT_NOT_FOUND_CODES:
                error_cls = ObjectNotFoundError

            raise error_cls(
                f"S3 {operation} failed for {location}: {error_code} - {message}",
                operation=operation,
                bucket=bucket,
                path=path,
                error_code=error_code,
                status_code=status_code,
            ) from e
        except (BotoCoreError, OSError) as e:
            raise RemoteAccessError(
                f"S3 {operation} failed for {location}: {e}",
                operation=operation,
                bucket=bucket,
                path=path,
            ) from e

    def create_bucket(self, project_id: str, name: str, spec: BucketSpec) -> None:
        # project_id has no S3 counterpart
        params: dict[str, Any] = {"Bucket": name}
        if spec.location and spec.location != DEFAULT_REGION:
            params["CreateBucketConfiguration"] = {"LocationConstraint": spec.location}

        with self._remote_call("create_bucket", name):
            self.client.create_bucket(**params)

            if spec.versioning_enabled:
                self.client.put_bucket_versioning(
                    Bucket=name,
                    VersioningConfiguration={"Status": "Enabled"},
                )

            if spec.labels:
                self.client.put_bucket_tagging(
                    Bucket=name,
                    Tagging={
                        "TagSet": [{"Key": k, "Value": v} for k, v in spec.labels.items()]
                    },
                )

    def delete_bucket(self, name: str) -> None:
        with self._remote_call("delete_bucket", name):
            self.client.delete_bucket(Bucket=name)

    def _fetch_labels(self, name: str) -> Optional[dict[str, str]]:
        try:
            response = self.client.get_bucket_tagging(Bucket=name)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "NoSuchTagSet":
                return None
            raise
        labels = {tag["Key"]: tag["Value"] for tag in response.get("TagSet", [])}
        return labels or None

    def fetch_bucket_configuration(self, name: str) -> BucketConfiguration:
        with self._remote_call("get_bucket", name):
            location = self.client.get_bucket_location(Bucket=name).get("LocationConstraint")
            versioning = self.client.get_bucket_versioning(Bucket=name)
            labels = self._fetch_labels(name)

        return BucketConfiguration(
            name=name,
            location=location or DEFAULT_REGION,
            storage_class=DEFAULT_STORAGE_CLASS,
            versioning_enabled=versioning.get("Status") == "Enabled",
            labels=labels,
        )

    def list_objects(self, bucket: str) -> Iterator[str]:
        paginator = self.client.get_paginator("list_objects_v2")
        with self._remote_call("list_objects_v2", bucket):
            for page in paginator.paginate(Bucket=bucket):
                for obj in page.get("Contents", []):
                    yield obj["Key"]

    def open_reader(self, bucket: str, path: str) -> BinaryIO:
        with self._remote_call("get_object", bucket, path):
            return self.client.get_object(Bucket=bucket, Key=path)["Body"]

    def write_object(self, bucket: str, path: str, body: Body, content_type: str) -> None:
        with self._remote_call("put_object", bucket, path):
            if isinstance(body, (bytes, bytearray)):
                self.client.put_object(
                    Bucket=bucket,
                    Key=path,
                    Body=bytes(body),
                    ContentType=content_type,
                )
            else:
                self.client.upload_fileobj(
                    body,
                    bucket,
                    path,
                    ExtraArgs={"ContentType": content_type},
                )

    def delete_object(self, bucket: str, path: str) -> None:
        with self._remote_call("delete_object", bucket, path):
            # S3 reports success for missing keys; check first so emptying
            # sees the same not-found semantics as GCS
            self.client.head_object(Bucket=bucket, Key=path)
            self.client.delete_object(Bucket=bucket, Key=path)
