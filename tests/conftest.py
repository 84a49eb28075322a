"""Shared fixtures: an in-memory gateway and a recording reporter."""

import io
from typing import BinaryIO, Iterator, NoReturn, Optional, Union

import pytest

from bucket_harness.errors import (
    BucketNotFoundError,
    HarnessFailure,
    ObjectNotFoundError,
    RemoteAccessError,
)
from bucket_harness.gateways import Body, StorageGateway
from bucket_harness.models import BucketConfiguration, BucketSpec
from bucket_harness.reporters import Reporter


class RecordingReporter(Reporter):
    """Reporter that keeps log lines and failures in memory."""

    def __init__(self):
        self.messages: list[str] = []
        self.failures: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)

    def fail(self, reason: Union[str, BaseException]) -> NoReturn:
        self.failures.append(str(reason))
        raise HarnessFailure(str(reason))


class FakeGateway(StorageGateway):
    """In-memory storage service.

    Buckets and objects live in dicts shared by every gateway opened from
    the same FakeStorage.
    """

    def __init__(self, storage: "FakeStorage"):
        self.storage = storage

    def _bucket(self, name: str) -> dict:
        if self.storage.fetch_error is not None:
            raise self.storage.fetch_error
        if name not in self.storage.buckets:
            raise BucketNotFoundError(f"{name} not found", operation="get_bucket", bucket=name)
        return self.storage.buckets[name]

    def create_bucket(self, project_id: str, name: str, spec: BucketSpec) -> None:
        if name in self.storage.buckets:
            raise RemoteAccessError(
                f"Bucket {name} already exists",
                operation="create_bucket",
                bucket=name,
                error_code="Conflict",
                status_code=409,
            )
        self.storage.buckets[name] = {
            "config": BucketConfiguration(
                name=name,
                location=(spec.location or "US").upper(),
                storage_class=spec.storage_class or "STANDARD",
                versioning_enabled=spec.versioning_enabled,
                labels=dict(spec.labels) or None,
            ),
            "objects": {},
        }

    def delete_bucket(self, name: str) -> None:
        bucket = self._bucket(name)
        if bucket["objects"]:
            raise RemoteAccessError(f"Bucket {name} is not empty", operation="delete_bucket")
        del self.storage.buckets[name]

    def fetch_bucket_configuration(self, name: str) -> BucketConfiguration:
        self.storage.fetch_count += 1
        return self._bucket(name)["config"]

    def list_objects(self, bucket: str) -> Iterator[str]:
        yield from list(self._bucket(bucket)["objects"])

    def open_reader(self, bucket: str, path: str) -> BinaryIO:
        objects = self._bucket(bucket)["objects"]
        if path not in objects:
            raise ObjectNotFoundError(f"{path} not found", bucket=bucket, path=path)
        return io.BytesIO(objects[path][0])

    def write_object(self, bucket: str, path: str, body: Body, content_type: str) -> None:
        data = body if isinstance(body, bytes) else body.read()
        self._bucket(bucket)["objects"][path] = (data, content_type)

    def delete_object(self, bucket: str, path: str) -> None:
        if path in self.storage.broken_paths:
            raise RemoteAccessError(f"Permission denied for {path}", bucket=bucket, path=path)
        objects = self._bucket(bucket)["objects"]
        if path in self.storage.vanishing_paths:
            objects.pop(path, None)
        if path not in objects:
            raise ObjectNotFoundError(f"{path} not found", bucket=bucket, path=path)
        del objects[path]


class FakeStorage:
    """State behind FakeGateway, plus knobs for injecting failures."""

    def __init__(self):
        self.buckets: dict[str, dict] = {}
        self.fetch_error: Optional[Exception] = None
        self.broken_paths: set[str] = set()
        self.vanishing_paths: set[str] = set()
        self.fetch_count = 0
        self.connections = 0

    def connect(self) -> FakeGateway:
        self.connections += 1
        return FakeGateway(self)

    def add_bucket(self, config: BucketConfiguration, objects: Optional[dict] = None) -> None:
        self.buckets[config.name] = {"config": config, "objects": dict(objects or {})}


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def bucket_config() -> BucketConfiguration:
    """A regional, versioned, labelled bucket."""
    return BucketConfiguration(
        name="test-bucket",
        location="US-CENTRAL1",
        storage_class="STANDARD",
        versioning_enabled=True,
        labels={"env": "prod", "team": "infra"},
    )
