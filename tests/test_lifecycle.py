"""Tests for bucket lifecycle operations."""

import pytest

from bucket_harness.errors import BucketNotFoundError, RemoteAccessError
from bucket_harness.lifecycle import BucketLifecycle
from bucket_harness.models import BucketSpec


class TestBucketLifecycle:
    """Tests for BucketLifecycle."""

    @pytest.fixture
    def lifecycle(self, fake_storage, reporter):
        return BucketLifecycle(fake_storage.connect, reporter)

    def test_create_then_find(self, lifecycle):
        """A created bucket can be found and reports its spec."""
        spec = BucketSpec(
            location="us-east1",
            storage_class="NEARLINE",
            versioning_enabled=True,
            labels={"env": "test"},
        )

        lifecycle.create_storage_bucket_e("my-project", "new-bucket", spec)
        config = lifecycle.assert_storage_bucket_exists_e("new-bucket")

        assert config.name == "new-bucket"
        assert config.location == "US-EAST1"
        assert config.storage_class == "NEARLINE"
        assert config.versioning_enabled is True
        assert config.labels == {"env": "test"}

    def test_create_without_spec_uses_defaults(self, lifecycle, fake_storage):
        """A missing spec means an empty BucketSpec."""
        lifecycle.create_storage_bucket_e("my-project", "plain-bucket")

        config = fake_storage.buckets["plain-bucket"]["config"]
        assert config.versioning_enabled is False
        assert config.labels is None

    def test_name_collision_raises(self, lifecycle):
        """Creating an existing bucket surfaces the provider error."""
        lifecycle.create_storage_bucket_e("my-project", "taken")

        with pytest.raises(RemoteAccessError, match="already exists"):
            lifecycle.create_storage_bucket_e("my-project", "taken")

    def test_delete_removes_bucket(self, lifecycle):
        """A deleted bucket no longer exists."""
        lifecycle.create_storage_bucket_e("my-project", "doomed")

        lifecycle.delete_storage_bucket_e("doomed")

        assert lifecycle.storage_bucket_exists("doomed") is False

    def test_delete_missing_bucket_raises(self, lifecycle):
        """Deleting a missing bucket raises BucketNotFoundError."""
        with pytest.raises(BucketNotFoundError):
            lifecycle.delete_storage_bucket_e("ghost")

    def test_assert_exists_on_missing_bucket_raises(self, lifecycle):
        """Existence check fails for a missing bucket."""
        with pytest.raises(BucketNotFoundError):
            lifecycle.assert_storage_bucket_exists_e("ghost")

    def test_storage_bucket_exists_propagates_other_errors(self, lifecycle, fake_storage):
        """Only not-found maps to False."""
        fake_storage.fetch_error = RemoteAccessError("denied")

        with pytest.raises(RemoteAccessError):
            lifecycle.storage_bucket_exists("any")

    def test_operations_are_logged(self, lifecycle, reporter):
        """Create, find and delete each emit a log line."""
        lifecycle.create_storage_bucket_e("my-project", "logged")
        lifecycle.assert_storage_bucket_exists_e("logged")
        lifecycle.delete_storage_bucket_e("logged")

        assert reporter.messages == [
            "Creating bucket logged",
            "Finding bucket logged",
            "Deleting bucket logged",
        ]
