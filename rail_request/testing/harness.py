"""
Testing helpers for rail-request.

This module provides small helpers for building request inputs, recording
contributions, a minimal graphene schema, and settings overrides in
unit/integration tests.
"""

from __future__ import annotations

import itertools
from contextlib import contextmanager
from typing import Any, Iterable, Mapping, Optional

import graphene
from django.test.utils import override_settings

from rail_request.core.execution import ExecutionInput, ExecutionInputBuilder
from rail_request.core.request_input import RequestInput
from rail_request.engine import execute_request_input

_request_ids = itertools.count(1)


def build_request_input(
    query: str = "{ ping }",
    *,
    operation_name: Optional[str] = None,
    variables: Optional[Mapping[str, Any]] = None,
    locale: Optional[str] = None,
    request_id: Optional[str] = None,
    contributions: Optional[Iterable[Any]] = None,
) -> RequestInput:
    request_input = RequestInput(
        query,
        operation_name=operation_name,
        variables=variables,
        locale=locale,
        request_id=request_id or f"test-request-{next(_request_ids)}",
    )
    for contribution in contributions or ():
        request_input.configure_execution_input(contribution)
    return request_input


class RecordingContribution:
    """
    Contribution that records what it observed and tags the context.

    Each call appends the received input to ``calls`` and, when ``key`` is
    set, stores ``value`` under ``key`` in graphql_context.
    """

    def __init__(self, name: str = "recording", key: Optional[str] = None, value: Any = None):
        self.name = name
        self.key = key
        self.value = value
        self.calls: list[ExecutionInput] = []

    def __call__(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        self.calls.append(current)
        if self.key is not None:
            builder.context_entry(self.key, self.value)
        return builder.build()


class FailingContribution:
    """Contribution that raises ``error`` when applied."""

    def __init__(self, error: Optional[Exception] = None, name: str = "failing"):
        self.name = name
        self.error = error or RuntimeError("contribution failed")

    def __call__(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        raise self.error


class PingQuery(graphene.ObjectType):
    class Meta:
        name = "Query"

    ping = graphene.String()
    echo = graphene.String(message=graphene.String(required=True))
    execution_id = graphene.String()
    locale = graphene.String()
    trace_id = graphene.String()

    def resolve_ping(root, info):
        return "pong"

    def resolve_echo(root, info, message):
        return message

    def resolve_execution_id(root, info):
        execution_id = getattr(info.context, "execution_id", None)
        return str(execution_id) if execution_id is not None else None

    def resolve_locale(root, info):
        return getattr(info.context, "locale", None)

    def resolve_trace_id(root, info):
        return getattr(info.context, "graphql_context", {}).get("traceId")


def build_ping_schema() -> graphene.Schema:
    """Return a small schema exposing ping, echo and execution details."""
    return graphene.Schema(query=PingQuery)


class RailRequestTestClient:
    def __init__(
        self,
        schema: Optional[graphene.Schema] = None,
        *,
        contributions: Optional[Iterable[Any]] = None,
    ):
        self.schema = schema or build_ping_schema()
        self.contributions = list(contributions or ())

    def execute(
        self,
        query: str,
        *,
        variables: Optional[Mapping[str, Any]] = None,
        operation_name: Optional[str] = None,
        locale: Optional[str] = None,
        request_id: Optional[str] = None,
        use_request_id: Optional[bool] = None,
    ):
        request_input = build_request_input(
            query,
            operation_name=operation_name,
            variables=variables,
            locale=locale,
            request_id=request_id,
            contributions=self.contributions,
        )
        return execute_request_input(self.schema, request_input, use_request_id=use_request_id)


@contextmanager
def override_rail_request_settings(**request_input_settings: Any):
    """
    Override request_input_settings for the duration of the block.
    Runtime overrides are cleared while the block runs.
    """
    from rail_request.config_proxy import _RUNTIME_SETTINGS

    original_runtime = _RUNTIME_SETTINGS.copy()
    _RUNTIME_SETTINGS.clear()

    with override_settings(RAIL_REQUEST={"request_input_settings": request_input_settings}):
        try:
            yield
        finally:
            _RUNTIME_SETTINGS.clear()
            _RUNTIME_SETTINGS.update(original_runtime)
