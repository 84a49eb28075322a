"""Attribute and label verification for live buckets.

This module contains:
- evaluate_attribute / evaluate_label: pure comparisons of a fetched
  BucketConfiguration against one Expectation
- AttributeVerifier / LabelVerifier: fetch the configuration through a
  fresh gateway and evaluate a single expectation against it

Match rules:
- location: case-insensitive prefix, so "us" accepts "US-CENTRAL1"
- storageclass: case-insensitive equality
- version: the expected value is "enabled" iff it is "true" (any case)
- labels: exact, case-sensitive value equality for one key

Mismatches are returned as failing Verdicts. Errors fetching the
configuration propagate as RemoteAccessError, and a label check against a
bucket without any labels raises LabelsAbsentError.
"""

from typing import Callable

from bucket_harness.errors import LabelsAbsentError
from bucket_harness.gateways import StorageGateway
from bucket_harness.models import (
    AttributeKind,
    BucketConfiguration,
    Expectation,
    Verdict,
)
from bucket_harness.reporters import Reporter


def _check_location(config: BucketConfiguration, expected: str, reporter: Reporter) -> Verdict:
    reporter.log(f"Checking location of bucket {config.name}: {config.location}")
    if config.location.lower().startswith(expected.lower()):
        return Verdict.success()
    return Verdict.mismatch(
        f"Bucket Location and Region must start with {expected} "
        f"but bucket {config.name} is in {config.location}"
    )


def _check_storage_class(config: BucketConfiguration, expected: str, reporter: Reporter) -> Verdict:
    reporter.log(f"Checking storage class of bucket {config.name}: {config.storage_class}")
    actual = config.storage_class.upper()
    if actual == expected.upper():
        return Verdict.success()
    return Verdict.mismatch(
        f"Storage Class is {actual} does not match to what is expected - {expected}"
    )


def _check_version(config: BucketConfiguration, expected: str, reporter: Reporter) -> Verdict:
    reporter.log(f"Checking versioning of bucket {config.name}: enabled={config.versioning_enabled}")
    want_enabled = expected.lower() == "true"

    if want_enabled and not config.versioning_enabled:
        return Verdict.mismatch("Bucket Versioning should be enabled but is not enabled")
    if not want_enabled and config.versioning_enabled:
        return Verdict.mismatch("Bucket Versioning should not be enabled but is enabled")
    return Verdict.success()


def _log_labels(config: BucketConfiguration, expected: str, reporter: Reporter) -> Verdict:
    # Label matching lives in evaluate_label
    reporter.log(f"Labels of bucket {config.name}: {config.labels}")
    return Verdict.success()


def _skip_unrecognized(config: BucketConfiguration, expected: str, reporter: Reporter) -> Verdict:
    reporter.log(f"No check defined for this attribute on bucket {config.name}; passing")
    return Verdict.success()


AttributeHandler = Callable[[BucketConfiguration, str, Reporter], Verdict]

ATTRIBUTE_HANDLERS: dict[AttributeKind, AttributeHandler] = {
    AttributeKind.LOCATION: _check_location,
    AttributeKind.STORAGE_CLASS: _check_storage_class,
    AttributeKind.VERSION: _check_version,
    AttributeKind.LABELS: _log_labels,
    AttributeKind.UNRECOGNIZED: _skip_unrecognized,
}


def evaluate_attribute(
    config: BucketConfiguration,
    expectation: Expectation,
    reporter: Reporter,
) -> Verdict:
    """Compare one attribute of a fetched configuration with an expectation.

    Unrecognized attribute names always pass.

    Args:
        config: The bucket configuration snapshot.
        expectation: Attribute name and expected value.
        reporter: Receives one log line describing the check.

    Returns:
        A passing Verdict, or a failing one naming the field and values.
    """
    handler = ATTRIBUTE_HANDLERS[expectation.kind]
    return handler(config, expectation.value, reporter)


def evaluate_label(
    config: BucketConfiguration,
    expectation: Expectation,
    reporter: Reporter,
) -> Verdict:
    """Compare one label of a fetched configuration with an expectation.

    Args:
        config: The bucket configuration snapshot.
        expectation: Label key and expected value.
        reporter: Receives log lines describing the check.

    Returns:
        A passing Verdict when the key is present with exactly the expected
        value, otherwise a failing Verdict.

    Raises:
        LabelsAbsentError: If the bucket has no labels at all.
    """
    reporter.log(f"Labels of bucket {config.name}: {config.labels}")
    if not config.labels:
        raise LabelsAbsentError(config.name)

    label_name = expectation.name
    if label_name not in config.labels:
        return Verdict.mismatch(f"Label {label_name} not found on bucket {config.name}")

    actual = config.labels[label_name]
    reporter.log(f"Label {label_name} = {actual}")
    if actual == expectation.value:
        reporter.log(f"Matching label found {label_name} = {actual}")
        return Verdict.success()

    return Verdict.mismatch(
        f"Expected value for label {label_name} is {expectation.value} "
        f"but the value is {actual}"
    )


class AttributeVerifier:
    """Checks bucket attributes against expectations.

    Args:
        connect: Opens a fresh gateway for each check
        reporter: Test-framework binding used for log output
    """

    def __init__(self, connect: Callable[[], StorageGateway], reporter: Reporter):
        self._connect = connect
        self.reporter = reporter

    def check_bucket_attribs_e(
        self,
        bucket_name: str,
        attribute_name: str,
        attribute_value: str,
    ) -> Verdict:
        """Fetch the bucket configuration and check one attribute.

        Raises:
            RemoteAccessError: If the configuration cannot be fetched.
        """
        self.reporter.log(
            f"Reading attribute {attribute_name} for bucket {bucket_name} "
            f"with value {attribute_value}"
        )
        config = self._connect().fetch_bucket_configuration(bucket_name)
        return evaluate_attribute(config, Expectation(attribute_name, attribute_value), self.reporter)


class LabelVerifier:
    """Checks bucket labels against expectations."""

    def __init__(self, connect: Callable[[], StorageGateway], reporter: Reporter):
        self._connect = connect
        self.reporter = reporter

    def check_bucket_labels_e(self, bucket_name: str, label_name: str, label_value: str) -> Verdict:
        """Fetch the bucket configuration and check one label.

        Raises:
            RemoteAccessError: If the configuration cannot be fetched.
            LabelsAbsentError: If the bucket has no labels.
        """
        self.reporter.log(
            f"Reading label {label_name} for bucket {bucket_name} with value {label_value}"
        )
        config = self._connect().fetch_bucket_configuration(bucket_name)
        return evaluate_label(config, Expectation(label_name, label_value), self.reporter)
