from aws_cdk import Stack
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# AWS 公式の Powertools for AWS Lambda (Python) レイヤー（pydantic を含む）
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:7"
)


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(self, scope: Construct, id: str, dry_run: bool = False) -> None:
        super().__init__(scope, id)

        powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(region=Stack.of(self).region),
        )

        self.ticket_purchase = self._create_function(
            "TicketPurchaseLambda",
            "cinema_tickets.ticket.handlers.purchase.lambda_handler",
            "ticket-service",
            powertools_layer,
            dry_run,
        )

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        layer: _lambda.ILayerVersion,
        dry_run: bool,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[layer],
            environment={
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DRY_RUN": "true" if dry_run else "false",
            },
        )
