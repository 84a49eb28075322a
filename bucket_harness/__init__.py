"""
Cloud storage bucket test harness.

Creates, populates, empties and deletes buckets during infrastructure
integration tests, and asserts that a bucket's live configuration
(location, storage class, versioning, labels) matches expectations.
"""

__version__ = "1.0.0"

from bucket_harness.config import HarnessConfig, load_config
from bucket_harness.harness import StorageHarness
from bucket_harness.models import BucketConfiguration, BucketSpec, Verdict

__all__ = [
    "BucketConfiguration",
    "BucketSpec",
    "HarnessConfig",
    "StorageHarness",
    "Verdict",
    "load_config",
    "__version__",
]
