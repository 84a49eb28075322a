"""Base storage gateway interface."""

from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator, Union

from bucket_harness.models import BucketConfiguration, BucketSpec

# Object bodies may be passed as raw bytes or as a readable binary stream
Body = Union[bytes, BinaryIO]


class StorageGateway(ABC):
    """Abstract connection handle to an object-storage service.

    One instance is opened per harness operation. Every method performs
    blocking remote calls and raises RemoteAccessError (or one of its
    not-found subclasses) when the service call fails.
    """

    @abstractmethod
    def create_bucket(self, project_id: str, name: str, spec: BucketSpec) -> None:
        """Create a bucket with the given configuration."""
        pass

    @abstractmethod
    def delete_bucket(self, name: str) -> None:
        """Delete an empty bucket."""
        pass

    @abstractmethod
    def fetch_bucket_configuration(self, name: str) -> BucketConfiguration:
        """Fetch a snapshot of the bucket's live attributes."""
        pass

    @abstractmethod
    def list_objects(self, bucket: str) -> Iterator[str]:
        """Yield the path of every object in the bucket."""
        pass

    @abstractmethod
    def open_reader(self, bucket: str, path: str) -> BinaryIO:
        """Open a byte-stream reader on an existing object."""
        pass

    @abstractmethod
    def write_object(self, bucket: str, path: str, body: Body, content_type: str) -> None:
        """Stream a body into a new or replaced object."""
        pass

    @abstractmethod
    def delete_object(self, bucket: str, path: str) -> None:
        """Delete a single object."""
        pass
