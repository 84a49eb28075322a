"""pytest fixtures for bucket tests.

Enable in a conftest.py with::

    pytest_plugins = ["bucket_harness.pytest_plugin"]

Then request ``storage_harness`` in a test::

    def test_bucket_is_versioned(storage_harness):
        storage_harness.check_bucket_attribs("my-bucket", "version", "true")
"""

import pytest

from bucket_harness.config import HarnessConfig, load_config
from bucket_harness.harness import StorageHarness
from bucket_harness.reporters import PytestReporter


def pytest_addoption(parser):
    parser.addoption(
        "--bucket-harness-config",
        action="store",
        default=None,
        metavar="PATH",
        help="JSON configuration file for bucket_harness fixtures",
    )


@pytest.fixture(scope="session")
def bucket_harness_config(pytestconfig) -> HarnessConfig:
    return load_config(pytestconfig.getoption("--bucket-harness-config"))


@pytest.fixture
def bucket_reporter(request) -> PytestReporter:
    return PytestReporter(name=request.node.name)


@pytest.fixture
def storage_harness(bucket_harness_config, bucket_reporter) -> StorageHarness:
    return StorageHarness.from_config(bucket_harness_config, bucket_reporter)
