"""Client factories for the storage gateways.

Creates google-cloud-storage and boto3 clients from a HarnessConfig and
exposes ``connector_for``, which hands the operation layer a zero-argument
callable opening a fresh gateway on every call. Clients are never pooled
or cached here.

Client-side retries are switched off: any transient failure surfaces to
the caller immediately.
"""

from typing import Callable

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError
from google.auth.credentials import AnonymousCredentials
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

from bucket_harness.config import HarnessConfig
from bucket_harness.errors import RemoteAccessError
from bucket_harness.gateways import GCSGateway, S3Gateway, StorageGateway

Connector = Callable[[], StorageGateway]


def build_gcs_client(config: HarnessConfig) -> storage.Client:
    """Build a Google Cloud Storage client for the given configuration.

    Args:
        config: Harness configuration. ``credentials_file`` selects a
               service-account key; otherwise an ``endpoint_url`` means an
               emulator and anonymous credentials, and the default is
               application-default credentials.

    Returns:
        A google.cloud.storage client.
    """
    client_options = None
    if config.endpoint_url:
        client_options = {"api_endpoint": config.endpoint_url}

    if config.credentials_file:
        return storage.Client.from_service_account_json(
            config.credentials_file,
            project=config.project_id,
            client_options=client_options,
        )

    if config.endpoint_url:
        return storage.Client(
            project=config.project_id or "test",
            credentials=AnonymousCredentials(),
            client_options=client_options,
        )

    return storage.Client(project=config.project_id)


def build_s3_client(config: HarnessConfig):
    """Build a boto3 S3 client for the given configuration.

    Args:
        config: Harness configuration containing endpoint, credentials,
               region, addressing style and timeout.

    Returns:
        A boto3 S3 client configured without retries.
    """
    boto_config = Config(
        signature_version="s3v4",
        s3={"addressing_style": config.addressing_style},
        connect_timeout=config.timeout,
        read_timeout=config.timeout,
        retries={"max_attempts": 1, "mode": "standard"},
    )

    return boto3.client(
        "s3",
        endpoint_url=config.endpoint_url,
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        region_name=config.region_name,
        config=boto_config,
    )


def connector_for(config: HarnessConfig) -> Connector:
    """Return a callable that opens a new gateway for each operation.

    Args:
        config: Harness configuration selecting the backend.

    Returns:
        Zero-argument callable returning a fresh StorageGateway.

    Raises:
        RemoteAccessError: From the returned callable, when the client
                          cannot be built (missing credentials, ...).
    """

    def connect() -> StorageGateway:
        try:
            if config.backend == "s3":
                return S3Gateway(build_s3_client(config))
            return GCSGateway(build_gcs_client(config), timeout=config.timeout)
        except (GoogleAuthError, BotoCoreError) as e:
            raise RemoteAccessError(
                f"Failed to open {config.backend} client: {e}",
                operation="connect",
            ) from e

    return connect
