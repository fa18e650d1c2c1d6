"""
Main CDK Stack for the Foodie Bucks profile API.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class FoodieBucksStack(Stack):
    """Main stack wiring the table and the API together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        Tags.of(self).add("Project", "foodie-bucks")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            environment=settings.environment,
            table_name=settings.table_name,
        )

        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            table_name=data_construct.profile_table.table_name,
            log_level=settings.log_level,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
        )

        # Point reads only.
        data_construct.profile_table.grant_read_data(api_construct.profile_lambda)

        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "ProfileTable", value=data_construct.profile_table.table_name)
