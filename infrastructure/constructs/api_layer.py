"""
API layer construct: profile Lambda + HTTP API route.

Every method on /profile is forwarded so the function itself answers 405.
Uses Docker bundling for dependencies (runs in CI/CD pipeline).
"""

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
)
from constructs import Construct


class ApiLayerConstruct(Construct):
    """Expose the profile endpoint via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        table_name: str,
        log_level: str = "INFO",
        lambda_memory_mb: int = 256,
        lambda_timeout_seconds: int = 10,
    ) -> None:
        super().__init__(scope, construct_id)

        # AWS-managed Powertools layer (includes pydantic, boto3 extras)
        powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            f"arn:aws:lambda:{scope.region}:017000801446:layer:AWSLambdaPowertoolsPythonV3-python312-x86:7"
        )

        # Installs python-json-logger next to the handler code
        bundled_code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements-lambda.txt -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )

        self.profile_lambda = _lambda.Function(
            self,
            "ProfileHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.main.lambda_handler",
            code=bundled_code,
            layers=[powertools_layer],
            memory_size=lambda_memory_mb,
            timeout=Duration.seconds(lambda_timeout_seconds),
            architecture=_lambda.Architecture.X86_64,
            environment={
                "ENVIRONMENT": environment,
                "PROFILE_TABLE": table_name,
                "LOG_LEVEL": log_level,
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"foodie-bucks-api-{environment}",
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.profile_lambda
        )

        self.api.add_routes(
            path="/profile",
            methods=[apigw.HttpMethod.ANY],
            integration=integration,
        )
