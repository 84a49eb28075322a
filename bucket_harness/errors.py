"""Error taxonomy for the bucket harness.

Two channels are kept apart:

- ``HarnessError`` and its subclasses are raised by the ``*_e`` operations
  when something went wrong talking to the storage service, or when the
  fetched state cannot be compared at all.
- Mismatches between live configuration and an expectation are *not*
  exceptions; they are returned as ``Verdict`` values.

``HarnessFailure`` is what the console reporter raises when a strict
operation fails the current test.
"""

from typing import Optional


class HarnessError(Exception):
    """Base class for all recoverable harness errors."""

    pass


class RemoteAccessError(HarnessError):
    """Raised when a call to the storage service fails.

    Covers connection failures, authentication failures, permission
    denials, and provider-side rejections (name collisions, invalid
    configuration, non-empty bucket on delete, ...).
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        bucket: Optional[str] = None,
        path: Optional[str] = None,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.bucket = bucket
        self.path = path
        self.error_code = error_code
        self.status_code = status_code


class BucketNotFoundError(RemoteAccessError):
    """Raised when the named bucket does not exist."""

    pass


class ObjectNotFoundError(RemoteAccessError):
    """Raised when the named object does not exist in the bucket."""

    pass


class LabelsAbsentError(HarnessError):
    """Raised when a label check runs against a bucket without labels."""

    def __init__(self, bucket: str):
        super().__init__(f"Bucket {bucket} has no labels")
        self.bucket = bucket


class EmptyBucketError(HarnessError):
    """Raised when some objects could not be deleted while emptying a bucket.

    Deletion continues past individual failures; this error is raised once
    the listing is exhausted and carries every path that failed.
    """

    def __init__(self, bucket: str, errors: dict[str, Exception]):
        paths = ", ".join(sorted(errors))
        super().__init__(
            f"Failed to delete {len(errors)} object(s) from bucket {bucket}: {paths}"
        )
        self.bucket = bucket
        self.errors = errors

    @property
    def failed_paths(self) -> list[str]:
        return sorted(self.errors)


class HarnessFailure(AssertionError):
    """Raised to abort the current test when a strict operation fails."""

    pass
