"""
Environment-specific configuration settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    # Environment
    environment: str = "dev"
    aws_region: str = "us-east-2"

    # DynamoDB
    table_name: str = "dev.glennmeyer.dev-foodiebucks"

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 10
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("CDK_DEFAULT_REGION", "us-east-2")
        table_name = os.environ.get(
            "PROFILE_TABLE", f"{env}.glennmeyer.{env}-foodiebucks"
        )

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                table_name=table_name,
                lambda_memory_mb=512,
                lambda_timeout_seconds=15,
                log_level="WARNING",
            )

        return cls(environment=env, aws_region=region, table_name=table_name)
