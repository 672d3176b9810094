"""Lambda Example Stack - two greeting functions and their name outputs."""

from aws_cdk import BundlingOptions, CfnOutput, Duration, Stack
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

from .definitions import FUNCTIONS, FUNCTIONS_DIR, FunctionDefinition

RUNTIME = lambda_.Runtime.PYTHON_3_12

ARCHITECTURES = {
    "x86_64": lambda_.Architecture.X86_64,
    "arm64": lambda_.Architecture.ARM_64,
}


class AwsLambdaExampleStack(Stack):
    """Lambda functions declared from the function definitions."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        definitions: tuple[FunctionDefinition, ...] = FUNCTIONS,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Third-party packages for functions whose code is not bundled
        self.dependencies_layer = None
        if any(d.bundling is None for d in definitions):
            self.dependencies_layer = lambda_.LayerVersion(
                self,
                "DependenciesLayer",
                code=lambda_.Code.from_asset(
                    str(FUNCTIONS_DIR),
                    exclude=[
                        path.name
                        for path in FUNCTIONS_DIR.iterdir()
                        if path.name != "requirements.txt"
                    ],
                    bundling=BundlingOptions(
                        image=RUNTIME.bundling_image,
                        command=[
                            "bash",
                            "-c",
                            "pip install -r requirements.txt -t /asset-output/python --quiet",
                        ],
                    ),
                ),
                compatible_runtimes=[RUNTIME],
                description="Python dependencies of the example functions",
            )

        self.functions: dict[str, lambda_.Function] = {}

        for definition in definitions:
            function = self._create_function(definition)
            self.functions[definition.function_name] = function

            # Output the Lambda function name
            CfnOutput(
                self,
                definition.output_id,
                value=function.function_name,
                description=definition.output_description,
            )

    def _create_function(self, definition: FunctionDefinition) -> lambda_.Function:
        bundling = None
        if definition.bundling is not None:
            bundling = BundlingOptions(
                image=RUNTIME.bundling_image,
                command=definition.bundling.command(definition.packages),
            )

        options = {}
        if definition.timeout_seconds is not None:
            options["timeout"] = Duration.seconds(definition.timeout_seconds)
        if definition.architecture is not None:
            options["architecture"] = ARCHITECTURES[definition.architecture]
        if definition.bundling is None and self.dependencies_layer is not None:
            options["layers"] = [self.dependencies_layer]

        return lambda_.Function(
            self,
            definition.construct_id,
            function_name=definition.function_name,
            runtime=RUNTIME,
            handler=definition.handler,
            code=lambda_.Code.from_asset(
                str(FUNCTIONS_DIR),
                exclude=definition.asset_excludes(),
                bundling=bundling,
            ),
            memory_size=definition.memory_size,
            environment=dict(definition.environment),
            **options,
        )
