"""Google Cloud Storage gateway.

Wraps a google.cloud.storage client. Library, transport and stream errors are
translated into the harness error taxonomy so callers never need to know
which client library sits underneath. Every call passes ``retry=None``.
"""

from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

from google.api_core import exceptions as api_exceptions
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

from bucket_harness.errors import (
    BucketNotFoundError,
    ObjectNotFoundError,
    RemoteAccessError,
)
from bucket_harness.gateways.base import Body, StorageGateway
from bucket_harness.models import BucketConfiguration, BucketSpec


class GCSGateway(StorageGateway):
    """Storage gateway backed by google-cloud-storage."""

    def __init__(self, client: storage.Client, timeout: float = 60.0):
        """Initialize the gateway.

        Args:
            client: google.cloud.storage client for this operation
            timeout: Per-request timeout in seconds
        """
        self.client = client
        self.timeout = timeout

    @contextmanager
    def _remote_call(self, operation: str, bucket: str, path: Optional[str] = None):
        """Translate client-library errors raised inside the block."""
        location = f"{bucket}/{path}" if path else bucket
        try:
            yield
        except api_exceptions.NotFound as e:
            error_cls = ObjectNotFoundError if path else BucketNotFoundError
            raise error_cls(
                f"GCS {operation} failed: {location} not found",
                operation=operation,
                bucket=bucket,
                path=path,
                error_code="NotFound",
                status_code=e.code,
            ) from e
        except api_exceptions.GoogleAPICallError as e:
            raise RemoteAccessError(
                f"GCS {operation} failed for {location}: {e.message}",
                operation=operation,
                bucket=bucket,
                path=path,
                error_code=type(e).__name__,
                status_code=e.code,
            ) from e
        except (api_exceptions.GoogleAPIError, GoogleAuthError, OSError) as e:
            raise RemoteAccessError(
                f"GCS {operation} failed for {location}: {e}",
                operation=operation,
                bucket=bucket,
                path=path,
            ) from e

    def create_bucket(self, project_id: str, name: str, spec: BucketSpec) -> None:
        bucket = self.client.bucket(name)
        if spec.storage_class:
            bucket.storage_class = spec.storage_class
        bucket.versioning_enabled = spec.versioning_enabled
        if spec.labels:
            bucket.labels = dict(spec.labels)

        with self._remote_call("create_bucket", name):
            self.client.create_bucket(
                bucket,
                project=project_id,
                location=spec.location,
                timeout=self.timeout,
                retry=None,
            )

    def delete_bucket(self, name: str) -> None:
        with self._remote_call("delete_bucket", name):
            self.client.bucket(name).delete(timeout=self.timeout, retry=None)

    def fetch_bucket_configuration(self, name: str) -> BucketConfiguration:
        with self._remote_call("get_bucket", name):
            bucket = self.client.get_bucket(name, timeout=self.timeout, retry=None)

        return BucketConfiguration(
            name=bucket.name,
            location=bucket.location or "",
            storage_class=bucket.storage_class or "",
            versioning_enabled=bool(bucket.versioning_enabled),
            # The client reports a missing mapping as {}
            labels=dict(bucket.labels) or None,
        )

    def list_objects(self, bucket: str) -> Iterator[str]:
        with self._remote_call("list_blobs", bucket):
            for blob in self.client.list_blobs(bucket, timeout=self.timeout, retry=None):
                yield blob.name

    def open_reader(self, bucket: str, path: str) -> BinaryIO:
        blob = self.client.bucket(bucket).blob(path)
        with self._remote_call("open_reader", bucket, path):
            # BlobReader is lazy; reload so a missing object fails here
            blob.reload(timeout=self.timeout, retry=None)
            return blob.open("rb", retry=None)

    def write_object(self, bucket: str, path: str, body: Body, content_type: str) -> None:
        blob = self.client.bucket(bucket).blob(path)
        with self._remote_call("write_object", bucket, path):
            if isinstance(body, (bytes, bytearray)):
                blob.upload_from_string(
                    bytes(body),
                    content_type=content_type,
                    timeout=self.timeout,
                    retry=None,
                )
            else:
                blob.upload_from_file(
                    body,
                    content_type=content_type,
                    timeout=self.timeout,
                    retry=None,
                )

    def delete_object(self, bucket: str, path: str) -> None:
        with self._remote_call("delete_object", bucket, path):
            self.client.bucket(bucket).blob(path).delete(timeout=self.timeout, retry=None)
