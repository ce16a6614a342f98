"""
Contributions that attach extra entries to the execution input.
"""

import logging
import uuid
from typing import Any, Mapping, Optional

from ..core.execution import ExecutionInput, ExecutionInputBuilder
from .base import ExecutionInputContribution

logger = logging.getLogger(__name__)


def _collect_entries(
    entries: Optional[Mapping[str, Any]], extra: Mapping[str, Any]
) -> dict[str, Any]:
    collected = dict(entries or {})
    collected.update(extra)
    return collected


class ExtensionsContribution(ExecutionInputContribution):
    """
    Merge protocol extensions into the execution input.

    Entries are given as a mapping, so any key a client sends is accepted.
    Keyword arguments are merged on top of the mapping.
    """

    name = "extensions"

    def __init__(self, entries: Optional[Mapping[str, Any]] = None, /, **extra: Any):
        self.entries = _collect_entries(entries, extra)

    def contribute(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        for key, value in self.entries.items():
            builder.extension(key, value)
        return builder.build()


class GraphQLContextContribution(ExecutionInputContribution):
    """Merge entries into the execution input's graphql_context."""

    name = "graphql_context"

    def __init__(self, entries: Optional[Mapping[str, Any]] = None, /, **extra: Any):
        self.entries = _collect_entries(entries, extra)

    def contribute(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        for key, value in self.entries.items():
            builder.context_entry(key, value)
        return builder.build()


class TraceIdContribution(ExecutionInputContribution):
    """
    Store a trace id in graphql_context.

    A random trace id is generated when none is given. An id already
    present under the same key is kept.
    """

    name = "trace_id"

    def __init__(self, trace_id: Optional[str] = None, key: str = "traceId"):
        self.trace_id = trace_id
        self.key = key

    def contribute(self, current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        existing = current.graphql_context.get(self.key)
        if existing:
            logger.debug("Keeping existing trace id '%s'", existing)
            return current
        trace_id = self.trace_id or uuid.uuid4().hex
        return builder.context_entry(self.key, trace_id).build()


def with_extensions(
    entries: Optional[Mapping[str, Any]] = None, /, **extra: Any
) -> ExtensionsContribution:
    return ExtensionsContribution(entries, **extra)


def with_graphql_context(
    entries: Optional[Mapping[str, Any]] = None, /, **extra: Any
) -> GraphQLContextContribution:
    return GraphQLContextContribution(entries, **extra)


def with_trace_id(trace_id: Optional[str] = None, key: str = "traceId") -> TraceIdContribution:
    return TraceIdContribution(trace_id=trace_id, key=key)
