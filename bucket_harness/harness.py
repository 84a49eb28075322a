"""Harness facade exposing every operation in lenient and strict form.

Each ``*_e`` method returns a value or a Verdict and raises HarnessError
subclasses on failure. The strict methods with the same name minus the
suffix hand any such error, and any failing Verdict, to
``reporter.fail``, which aborts the current test.

Example:
    >>> harness = StorageHarness.from_config(load_config(), PytestReporter("test_bucket"))
    >>> harness.create_storage_bucket("my-project", "my-unique-bucket")
    >>> harness.check_bucket_attribs("my-unique-bucket", "Location", "us")
"""

from typing import BinaryIO, Callable, Optional, TypeVar

from bucket_harness.clients import connector_for
from bucket_harness.config import HarnessConfig
from bucket_harness.emptying import BucketEmptier
from bucket_harness.errors import HarnessError
from bucket_harness.gateways import Body, StorageGateway
from bucket_harness.lifecycle import BucketLifecycle
from bucket_harness.models import BucketConfiguration, BucketSpec, Verdict
from bucket_harness.objects import ObjectIO
from bucket_harness.reporters import Reporter
from bucket_harness.verification import AttributeVerifier, LabelVerifier

T = TypeVar("T")


class StorageHarness:
    """Bucket lifecycle, object I/O and verification for one test.

    Args:
        connect: Opens a fresh gateway for each operation
        reporter: Test-framework binding for logging and failing
    """

    def __init__(self, connect: Callable[[], StorageGateway], reporter: Reporter):
        self.reporter = reporter
        self.lifecycle = BucketLifecycle(connect, reporter)
        self.objects = ObjectIO(connect, reporter)
        self.emptier = BucketEmptier(connect, reporter)
        self.attributes = AttributeVerifier(connect, reporter)
        self.labels = LabelVerifier(connect, reporter)

    @classmethod
    def from_config(cls, config: HarnessConfig, reporter: Reporter) -> "StorageHarness":
        return cls(connector_for(config), reporter)

    def _strict(self, func: Callable[..., T], *args, **kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except HarnessError as e:
            self.reporter.fail(e)

    def _require(self, verdict: Verdict) -> Verdict:
        if not verdict.passed:
            self.reporter.fail(verdict.message)
        return verdict

    # Bucket lifecycle
    def create_storage_bucket_e(
        self, project_id: str, name: str, spec: Optional[BucketSpec] = None
    ) -> None:
        self.lifecycle.create_storage_bucket_e(project_id, name, spec)

    def create_storage_bucket(
        self, project_id: str, name: str, spec: Optional[BucketSpec] = None
    ) -> None:
        self._strict(self.lifecycle.create_storage_bucket_e, project_id, name, spec)

    def delete_storage_bucket_e(self, name: str) -> None:
        self.lifecycle.delete_storage_bucket_e(name)

    def delete_storage_bucket(self, name: str) -> None:
        self._strict(self.lifecycle.delete_storage_bucket_e, name)

    def assert_storage_bucket_exists_e(self, name: str) -> BucketConfiguration:
        return self.lifecycle.assert_storage_bucket_exists_e(name)

    def assert_storage_bucket_exists(self, name: str) -> BucketConfiguration:
        return self._strict(self.lifecycle.assert_storage_bucket_exists_e, name)

    def storage_bucket_exists(self, name: str) -> bool:
        return self.lifecycle.storage_bucket_exists(name)

    # Object I/O
    def read_bucket_object_e(self, bucket_name: str, path: str) -> BinaryIO:
        return self.objects.read_bucket_object_e(bucket_name, path)

    def read_bucket_object(self, bucket_name: str, path: str) -> BinaryIO:
        return self._strict(self.objects.read_bucket_object_e, bucket_name, path)

    def write_bucket_object_e(
        self, bucket_name: str, path: str, body: Body, content_type: str = ""
    ) -> str:
        return self.objects.write_bucket_object_e(bucket_name, path, body, content_type)

    def write_bucket_object(
        self, bucket_name: str, path: str, body: Body, content_type: str = ""
    ) -> str:
        return self._strict(
            self.objects.write_bucket_object_e, bucket_name, path, body, content_type
        )

    # Emptying
    def empty_storage_bucket_e(self, name: str) -> int:
        return self.emptier.empty_storage_bucket_e(name)

    def empty_storage_bucket(self, name: str) -> int:
        return self._strict(self.emptier.empty_storage_bucket_e, name)

    # Verification
    def check_bucket_attribs_e(
        self, bucket_name: str, attribute_name: str, attribute_value: str
    ) -> Verdict:
        return self.attributes.check_bucket_attribs_e(bucket_name, attribute_name, attribute_value)

    def check_bucket_attribs(
        self, bucket_name: str, attribute_name: str, attribute_value: str
    ) -> Verdict:
        """Check one attribute, failing the test on any error or mismatch."""
        verdict = self._strict(
            self.attributes.check_bucket_attribs_e, bucket_name, attribute_name, attribute_value
        )
        return self._require(verdict)

    def check_bucket_labels_e(self, bucket_name: str, label_name: str, label_value: str) -> Verdict:
        return self.labels.check_bucket_labels_e(bucket_name, label_name, label_value)

    def check_bucket_labels(self, bucket_name: str, label_name: str, label_value: str) -> Verdict:
        """Check one label, failing the test on any error or mismatch."""
        verdict = self._strict(
            self.labels.check_bucket_labels_e, bucket_name, label_name, label_value
        )
        return self._require(verdict)
