pytest_plugins = ["bucket_harness.pytest_plugin"]
