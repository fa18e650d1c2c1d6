"""
Runtime settings for the profile Lambda.

Values come from environment variables set by the CDK stack, with defaults
that match the dev deployment.
"""

from dataclasses import dataclass
import os
from typing import Optional

DEFAULT_TABLE_NAME = "dev.glennmeyer.dev-foodiebucks"
DEFAULT_REGION = "us-east-2"


@dataclass(frozen=True)
class Settings:
    """Application settings resolved once per execution context."""

    table_name: str = DEFAULT_TABLE_NAME
    aws_region: str = DEFAULT_REGION

    # Point at DynamoDB Local when set, e.g. http://localhost:8000
    dynamodb_endpoint_url: Optional[str] = None

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            table_name=os.environ.get("PROFILE_TABLE") or DEFAULT_TABLE_NAME,
            aws_region=os.environ.get("AWS_REGION") or DEFAULT_REGION,
            dynamodb_endpoint_url=os.environ.get("DYNAMODB_ENDPOINT_URL") or None,
        )

    def resolve_table_name(self, requested: Optional[str] = None) -> str:
        """Request value wins over the configured table, which wins over the default."""
        return requested or self.table_name or DEFAULT_TABLE_NAME
