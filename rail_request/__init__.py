"""
Rail Request - GraphQL request inputs and execution input pipelines.

Usage:
    from rail_request import RequestInput
    from rail_request.contributions import with_trace_id

    request_input = RequestInput("{ ping }", request_id="req-1")
    request_input.configure_execution_input(with_trace_id())
    execution_input = request_input.to_execution_input(use_request_id=True)
"""

from .core import (
    ExecutionId,
    ExecutionIdAlreadyAssigned,
    ExecutionInput,
    ExecutionInputBuilder,
    InvalidArgument,
    PipelineContributionFailed,
    RequestInput,
    RequestInputError,
    RequestInputFrozen,
    build_execution_input,
)
from .defaults import LIBRARY_VERSION as __version__

__all__ = [
    "RequestInput",
    "ExecutionId",
    "ExecutionInput",
    "ExecutionInputBuilder",
    "build_execution_input",
    "RequestInputError",
    "InvalidArgument",
    "RequestInputFrozen",
    "ExecutionIdAlreadyAssigned",
    "PipelineContributionFailed",
]
