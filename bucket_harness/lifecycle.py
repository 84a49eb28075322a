"""Bucket creation, deletion and existence checks."""

from typing import Callable, Optional

from bucket_harness.errors import BucketNotFoundError
from bucket_harness.gateways import StorageGateway
from bucket_harness.models import BucketConfiguration, BucketSpec
from bucket_harness.reporters import Reporter


class BucketLifecycle:
    """Creates, deletes and finds buckets.

    Bucket names must be globally unique in the provider's namespace;
    collisions surface as RemoteAccessError from create.
    """

    def __init__(self, connect: Callable[[], StorageGateway], reporter: Reporter):
        self._connect = connect
        self.reporter = reporter

    def create_storage_bucket_e(
        self,
        project_id: str,
        name: str,
        spec: Optional[BucketSpec] = None,
    ) -> None:
        self.reporter.log(f"Creating bucket {name}")
        self._connect().create_bucket(project_id, name, spec or BucketSpec())

    def delete_storage_bucket_e(self, name: str) -> None:
        self.reporter.log(f"Deleting bucket {name}")
        self._connect().delete_bucket(name)

    def assert_storage_bucket_exists_e(self, name: str) -> BucketConfiguration:
        """Fetch the bucket's configuration to prove it exists.

        Returns:
            The fetched configuration.

        Raises:
            BucketNotFoundError: If the bucket does not exist.
            RemoteAccessError: If the fetch fails for another reason.
        """
        self.reporter.log(f"Finding bucket {name}")
        return self._connect().fetch_bucket_configuration(name)

    def storage_bucket_exists(self, name: str) -> bool:
        """Return False if the bucket is missing; other errors propagate."""
        try:
            self.assert_storage_bucket_exists_e(name)
        except BucketNotFoundError:
            return False
        return True
