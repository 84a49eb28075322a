"""Bucket emptying.

Lists every object in a bucket and deletes each one individually; there is
no bulk delete. Deletion carries on past per-object failures, and objects
that disappear between listing and deleting count as deleted.
"""

from typing import Callable

from bucket_harness.errors import EmptyBucketError, ObjectNotFoundError, RemoteAccessError
from bucket_harness.gateways import StorageGateway
from bucket_harness.reporters import Reporter


class BucketEmptier:
    """Deletes every object in a bucket."""

    def __init__(self, connect: Callable[[], StorageGateway], reporter: Reporter):
        self._connect = connect
        self.reporter = reporter

    def empty_storage_bucket_e(self, name: str) -> int:
        """Delete all objects currently in the bucket.

        Args:
            name: The bucket to empty.

        Returns:
            Number of objects deleted (including ones already gone).

        Raises:
            RemoteAccessError: If the listing itself fails.
            EmptyBucketError: If one or more objects could not be deleted.
                             Every other object has still been deleted.
        """
        self.reporter.log(f"Emptying storage bucket {name}")

        gateway = self._connect()
        deleted = 0
        errors: dict[str, Exception] = {}

        for path in gateway.list_objects(name):
            self.reporter.log(f"Deleting storage bucket object {path}")
            try:
                gateway.delete_object(name, path)
            except ObjectNotFoundError:
                self.reporter.log(f"Object {path} already deleted")
            except RemoteAccessError as e:
                self.reporter.log(f"Failed to delete object {path}: {e}")
                errors[path] = e
                continue
            deleted += 1

        if errors:
            raise EmptyBucketError(name, errors)

        return deleted
