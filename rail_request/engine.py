"""
Execution engine adapter.

Hands ExecutionInput values built from a RequestInput to a graphene schema.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import graphene

from .core.execution import ExecutionId, ExecutionInput
from .core.request_input import RequestInput

logger = logging.getLogger(__name__)


@dataclass
class ExecutionContextValue:
    """
    Default ``info.context`` when no contribution supplied a context value.

    Exposes the execution-only parts of an ExecutionInput to resolvers.
    """

    request_id: str
    execution_id: Optional[ExecutionId] = None
    locale: Optional[str] = None
    graphql_context: Mapping[str, Any] = field(default_factory=dict)
    extensions: Mapping[str, Any] = field(default_factory=dict)


def execute_execution_input(
    schema: graphene.Schema,
    execution_input: ExecutionInput,
    request_id: Optional[str] = None,
    **kwargs: Any,
):
    """
    Execute an ExecutionInput against a graphene schema.

    Args:
        schema: graphene Schema to execute against
        execution_input: Input to execute
        request_id: Request id exposed on the default context value
        **kwargs: Extra keyword arguments forwarded to ``Schema.execute``

    Returns:
        graphql ExecutionResult
    """
    execute_kwargs = execution_input.to_execute_kwargs()
    if execute_kwargs["context_value"] is None:
        execute_kwargs["context_value"] = ExecutionContextValue(
            request_id=request_id or str(execution_input.execution_id or ""),
            execution_id=execution_input.execution_id,
            locale=execution_input.locale,
            graphql_context=execution_input.graphql_context,
            extensions=execution_input.extensions,
        )
    execute_kwargs.update(kwargs)

    logger.debug(
        "Executing operation '%s' (request_id=%s, execution_id=%s)",
        execution_input.operation_name,
        request_id,
        execution_input.execution_id,
    )
    result = schema.execute(**execute_kwargs)
    if result.errors:
        logger.debug(
            "Operation '%s' (execution_id=%s) returned %d error(s)",
            execution_input.operation_name,
            execution_input.execution_id,
            len(result.errors),
        )
    return result


def execute_request_input(
    schema: graphene.Schema,
    request_input: RequestInput,
    use_request_id: Optional[bool] = None,
    **kwargs: Any,
):
    """
    Build the ExecutionInput for a request and execute it.

    Args:
        schema: graphene Schema to execute against
        request_input: The request to execute
        use_request_id: Whether the request id is the fallback execution id;
            defaults to the ``use_request_id_as_execution_id`` setting
        **kwargs: Extra keyword arguments forwarded to ``Schema.execute``

    Returns:
        graphql ExecutionResult

    Raises:
        PipelineContributionFailed: If a contribution fails; nothing is executed
    """
    execution_input = request_input.to_execution_input(use_request_id=use_request_id)
    return execute_execution_input(
        schema, execution_input, request_id=request_input.id, **kwargs
    )
