"""DynamoDB repository for foodie bucks profiles."""

from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from utils.error_handling import StoreError
from utils.logging_config import get_logger
from utils.settings import Settings

logger = get_logger(__name__)

# Reused across warm Lambda invocations.
_dynamodb = None


def get_dynamodb(settings: Settings):
    """Get or create the DynamoDB resource."""
    global _dynamodb
    if _dynamodb is None:
        try:
            _dynamodb = boto3.resource(
                "dynamodb",
                region_name=settings.aws_region,
                endpoint_url=settings.dynamodb_endpoint_url,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StoreError(f"Unable to configure DynamoDB: {exc}") from exc
    return _dynamodb


def reset_dynamodb() -> None:
    """Drop the cached resource so the next call rebuilds it."""
    global _dynamodb
    _dynamodb = None


class ProfileRepository:
    """Single-item reads keyed by pk/sk."""

    def __init__(self, settings: Settings, dynamodb=None):
        self.settings = settings
        self._dynamodb = dynamodb

    @property
    def dynamodb(self):
        if self._dynamodb is None:
            self._dynamodb = get_dynamodb(self.settings)
        return self._dynamodb

    def get_item(self, table_name: str, pk: str, sk: str) -> Optional[Dict[str, Any]]:
        """Return the raw item, or None when the key does not exist."""
        try:
            resp = self.dynamodb.Table(table_name).get_item(Key={"pk": pk, "sk": sk})
        except (BotoCoreError, ClientError) as exc:
            logger.error(
                "Failed to get item",
                extra={"table": table_name, "pk": pk, "sk": sk, "error": str(exc)},
            )
            raise StoreError(f"Failed to get item from {table_name}: {exc}") from exc
        return resp.get("Item")
