"""Object reads and writes.

Writes always return the public URL of the object in the form
https://storage.googleapis.com/{bucket}/{path}, which callers may store
or parse.
"""

from typing import BinaryIO, Callable

from bucket_harness.gateways import Body, StorageGateway
from bucket_harness.models import StoredObject
from bucket_harness.reporters import Reporter

DEFAULT_CONTENT_TYPE = "application/octet-stream"

PUBLIC_URL = "https://storage.googleapis.com/{bucket}/{path}"


def public_url(bucket_name: str, path: str) -> str:
    return PUBLIC_URL.format(bucket=bucket_name, path=path)


class ObjectIO:
    """Reads and writes objects in a bucket."""

    def __init__(self, connect: Callable[[], StorageGateway], reporter: Reporter):
        self._connect = connect
        self.reporter = reporter

    def read_bucket_object_e(self, bucket_name: str, path: str) -> BinaryIO:
        """Open a reader on an object.

        The caller owns the returned stream and should close it.

        Raises:
            ObjectNotFoundError: If the object does not exist.
            RemoteAccessError: On any other service failure.
        """
        self.reporter.log(f"Reading object from bucket {bucket_name} using path {path}")
        return self._connect().open_reader(bucket_name, path)

    def read_bucket_object_bytes_e(self, bucket_name: str, path: str) -> bytes:
        """Read an object's full contents."""
        reader = self.read_bucket_object_e(bucket_name, path)
        try:
            return reader.read()
        finally:
            reader.close()

    def put_bucket_object_e(
        self,
        bucket_name: str,
        path: str,
        body: Body,
        content_type: str = "",
    ) -> StoredObject:
        """Write an object and describe what was stored.

        Args:
            bucket_name: Target bucket
            path: Object path inside the bucket
            body: Raw bytes or a readable binary stream
            content_type: MIME type; application/octet-stream when empty

        Returns:
            The stored object, including its public URL.

        Raises:
            RemoteAccessError: On any I/O or permission error while streaming.
        """
        if not content_type:
            content_type = DEFAULT_CONTENT_TYPE

        self.reporter.log(
            f"Writing object to bucket {bucket_name} using path {path} "
            f"and content type {content_type}"
        )
        self._connect().write_object(bucket_name, path, body, content_type)

        return StoredObject(
            bucket=bucket_name,
            path=path,
            content_type=content_type,
            url=public_url(bucket_name, path),
        )

    def write_bucket_object_e(
        self,
        bucket_name: str,
        path: str,
        body: Body,
        content_type: str = "",
    ) -> str:
        """Write an object and return its public URL."""
        return self.put_bucket_object_e(bucket_name, path, body, content_type).url
