"""Core module for Rail Request.

This module contains the request input, the execution input it is converted
into, the contribution pipeline performing the conversion, settings, and
error types.
"""

from .exceptions import (
    ExecutionIdAlreadyAssigned,
    InvalidArgument,
    PipelineContributionFailed,
    RequestInputError,
    RequestInputFrozen,
)
from .execution import ExecutionId, ExecutionInput, ExecutionInputBuilder
from .pipeline import (
    ExecutionInputPipeline,
    apply_contributions,
    as_contribution,
    build_execution_input,
)
from .request_input import RequestInput
from .settings import RequestInputSettings

__all__ = [
    # Request and execution inputs
    "RequestInput",
    "ExecutionId",
    "ExecutionInput",
    "ExecutionInputBuilder",
    # Pipeline
    "ExecutionInputPipeline",
    "apply_contributions",
    "as_contribution",
    "build_execution_input",
    # Settings
    "RequestInputSettings",
    # Error handling
    "RequestInputError",
    "InvalidArgument",
    "RequestInputFrozen",
    "ExecutionIdAlreadyAssigned",
    "PipelineContributionFailed",
]
