"""Declarative description of the example Lambda functions."""

import shlex
from dataclasses import dataclass, field
from pathlib import Path

FUNCTIONS_DIR = Path(__file__).resolve().parents[2] / "functions"

ASSET_OUTPUT = "/asset-output"

COMMON_ENVIRONMENT = {
    "APP_ENV": "production",
    "LOG_LEVEL": "info",
}


@dataclass(frozen=True)
class BundlingDefinition:
    """How a function's code and dependencies are packaged in the bundling container."""

    minify: bool = True
    source_map: bool = True
    target: str = "3.12"
    external_modules: tuple[str, ...] = ()

    def command(self, packages: tuple[str, ...]) -> list[str]:
        """Shell command run from the asset directory inside the bundling image."""
        steps = [
            "pip install -r requirements.txt"
            f" --target {ASSET_OUTPUT}"
            f" --python-version {shlex.quote(self.target)}"
            " --only-binary=:all: --no-compile --quiet",
            "cp -r " + " ".join(shlex.quote(p) for p in packages) + f" {ASSET_OUTPUT}/",
        ]

        # Provided by the Lambda runtime
        for module in self.external_modules:
            m = shlex.quote(module)
            steps.append(f"rm -rf {ASSET_OUTPUT}/{m} {ASSET_OUTPUT}/{m}-*.dist-info")

        if self.minify:
            steps.append(
                f"find {ASSET_OUTPUT} -depth -type d"
                " \\( -name __pycache__ -o -name tests \\) -exec rm -rf {} +"
            )
            steps.append(f"find {ASSET_OUTPUT} -name '*.pyi' -delete")

        if not self.source_map:
            steps.append(f"python -m compileall -b -q {ASSET_OUTPUT}")
            steps.append(f"find {ASSET_OUTPUT} -name '*.py' -delete")

        return ["bash", "-c", " && ".join(steps)]


@dataclass(frozen=True)
class FunctionDefinition:
    """Runtime parameters of one Lambda function."""

    construct_id: str
    function_name: str
    handler: str
    packages: tuple[str, ...]
    memory_size: int
    output_id: str
    output_description: str
    environment: dict[str, str] = field(default_factory=lambda: dict(COMMON_ENVIRONMENT))
    timeout_seconds: int | None = None
    bundling: BundlingDefinition | None = None
    architecture: str | None = None

    def asset_excludes(self, source_dir: Path = FUNCTIONS_DIR) -> list[str]:
        """Entries of the source directory that do not belong in this function's asset."""
        keep = set(self.packages)
        if self.bundling is not None:
            keep.add("requirements.txt")
        excludes = sorted(path.name for path in source_dir.iterdir() if path.name not in keep)
        return excludes + ["**/__pycache__"]


FUNCTION_01 = FunctionDefinition(
    construct_id="function-01",
    function_name="function-01",
    handler="function01.main.handler",
    packages=("common", "function01"),
    timeout_seconds=30,
    memory_size=128,
    bundling=BundlingDefinition(
        minify=True,
        source_map=True,
        target="3.12",
        external_modules=("boto3",),
    ),
    output_id="function01-output",
    output_description="Name of the Lambda function #1",
)

FUNCTION_02 = FunctionDefinition(
    construct_id="function-02",
    function_name="function-02",
    handler="function02.main.handler",
    packages=("common", "function02"),
    memory_size=128,
    architecture="x86_64",
    output_id="function02-output",
    output_description="Name of the Lambda function #2",
)

FUNCTIONS: tuple[FunctionDefinition, ...] = (FUNCTION_01, FUNCTION_02)
