"""Data models for the bucket harness."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Token carried by a passing verdict
SUCCESS = "success"


class AttributeKind(Enum):
    """Bucket attributes the verification engine knows how to check."""

    LOCATION = "location"
    STORAGE_CLASS = "storageclass"
    VERSION = "version"
    LABELS = "labels"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, name: str) -> "AttributeKind":
        """Map a caller-supplied attribute name to its kind.

        Matching is case-insensitive. Anything outside the recognized set,
        including the literal "unrecognized", maps to UNRECOGNIZED.
        """
        lowered = name.lower()
        for kind in cls:
            if kind is not cls.UNRECOGNIZED and kind.value == lowered:
                return kind
        return cls.UNRECOGNIZED


class VerdictStatus(Enum):
    """Outcome of a single verification."""

    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class BucketConfiguration:
    """Snapshot of a bucket's live attributes at fetch time.

    ``labels`` is None when the service reported no label mapping at all.
    """

    name: str
    location: str
    storage_class: str
    versioning_enabled: bool
    labels: Optional[dict[str, str]] = None


@dataclass
class BucketSpec:
    """Configuration payload used when creating a bucket."""

    location: Optional[str] = None
    storage_class: Optional[str] = None
    versioning_enabled: bool = False
    labels: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Expectation:
    """A single (name, expected value) pair supplied by a test."""

    name: str
    value: str

    @property
    def kind(self) -> AttributeKind:
        return AttributeKind.parse(self.name)


@dataclass(frozen=True)
class Verdict:
    """Result of comparing live configuration against an expectation."""

    status: VerdictStatus
    message: str

    @classmethod
    def success(cls) -> "Verdict":
        return cls(VerdictStatus.PASS, SUCCESS)

    @classmethod
    def mismatch(cls, message: str) -> "Verdict":
        """Build a failing verdict.

        Raises:
            ValueError: If the diagnostic message is empty.
        """
        if not message:
            raise ValueError("A failing verdict needs a diagnostic message")
        return cls(VerdictStatus.FAIL, message)

    @property
    def passed(self) -> bool:
        return self.status == VerdictStatus.PASS


@dataclass(frozen=True)
class StoredObject:
    """An object written into a bucket."""

    bucket: str
    path: str
    content_type: str
    url: str
