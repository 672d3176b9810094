from .definitions import FUNCTIONS, BundlingDefinition, FunctionDefinition

__all__ = [
    "BundlingDefinition",
    "FunctionDefinition",
    "FUNCTIONS",
]
