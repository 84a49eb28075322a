"""Storage gateways: the only modules that talk to the storage service."""

from .base import StorageGateway, Body
from .gcs import GCSGateway
from .s3 import S3Gateway

__all__ = ["StorageGateway", "Body", "GCSGateway", "S3Gateway"]
