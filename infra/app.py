#!/usr/bin/env python3
"""CDK App for the Lambda example functions."""

import os

import aws_cdk as cdk

from stacks.lambda_example_stack import AwsLambdaExampleStack

app = cdk.App()

env = cdk.Environment(
    account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
    region=os.environ.get("CDK_DEFAULT_REGION"),
)

AwsLambdaExampleStack(app, "AwsLambdaExampleStack", env=env)

app.synth()
