"""
Contributions that set engine arguments.
"""

from typing import Any, Union

from ..core.execution import ExecutionId, ExecutionInput, ExecutionInputBuilder
from .base import ExecutionInputContribution


class ContextValueContribution(ExecutionInputContribution):
    """Set the value resolvers receive as ``info.context``."""

    name = "context_value"

    def __init__(self, value: Any):
        self.value = value

    def contribute(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        return builder.context_value(self.value).build()


class RootValueContribution(ExecutionInputContribution):
    """Set the root value for top level resolvers."""

    name = "root_value"

    def __init__(self, value: Any):
        self.value = value

    def contribute(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        return builder.root_value(self.value).build()


class MiddlewareContribution(ExecutionInputContribution):
    """Append engine middleware after any already contributed."""

    name = "middleware"

    def __init__(self, *middleware: Any):
        self.middleware = middleware

    def contribute(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        for item in self.middleware:
            builder.add_middleware(item)
        return builder.build()


class ExecutionIdContribution(ExecutionInputContribution):
    """
    Overwrite the resolved execution id from inside the pipeline.

    Contributions have the last word on the execution input, so this replaces
    both an assigned execution id and the request id fallback.
    """

    name = "execution_id"

    def __init__(self, execution_id: Union[str, ExecutionId]):
        self.execution_id = ExecutionId.from_value(execution_id)

    def contribute(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        return builder.execution_id(self.execution_id).build()


def with_context_value(value: Any) -> ContextValueContribution:
    return ContextValueContribution(value)


def with_root_value(value: Any) -> RootValueContribution:
    return RootValueContribution(value)


def with_middleware(*middleware: Any) -> MiddlewareContribution:
    return MiddlewareContribution(*middleware)


def with_execution_id(execution_id: Union[str, ExecutionId]) -> ExecutionIdContribution:
    return ExecutionIdContribution(execution_id)
