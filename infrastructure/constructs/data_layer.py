"""
Data layer construct: DynamoDB table holding foodie bucks profiles.
"""

from aws_cdk import (
    RemovalPolicy,
    aws_dynamodb as dynamodb,
)
from constructs import Construct


class DataLayerConstruct(Construct):
    """Provision the profile table."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        table_name: str,
    ) -> None:
        super().__init__(scope, construct_id)

        # pk holds USER#<id>, sk holds PROFILE#<id>.
        self.profile_table = dynamodb.Table(
            self,
            "FoodieBucksTable",
            table_name=table_name,
            partition_key=dynamodb.Attribute(name="pk", type=dynamodb.AttributeType.STRING),
            sort_key=dynamodb.Attribute(name="sk", type=dynamodb.AttributeType.STRING),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=environment == "prod",
            removal_policy=RemovalPolicy.RETAIN if environment == "prod" else RemovalPolicy.DESTROY,
        )
