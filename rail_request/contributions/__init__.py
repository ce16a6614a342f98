"""
Reusable execution input contributions.

Each contribution is a callable taking (current input, seeded builder) and
returning the next input, ready for ``RequestInput.configure_execution_input``:

- Engine arguments: context value, root value, middleware, execution id
- Extra entries: protocol extensions, graphql_context entries, trace ids
"""

from .base import ExecutionInputContribution
from .context import (
    ContextValueContribution,
    ExecutionIdContribution,
    MiddlewareContribution,
    RootValueContribution,
    with_context_value,
    with_execution_id,
    with_middleware,
    with_root_value,
)
from .extensions import (
    ExtensionsContribution,
    GraphQLContextContribution,
    TraceIdContribution,
    with_extensions,
    with_graphql_context,
    with_trace_id,
)

__all__ = [
    "ExecutionInputContribution",
    # Engine arguments
    "ContextValueContribution",
    "RootValueContribution",
    "MiddlewareContribution",
    "ExecutionIdContribution",
    "with_context_value",
    "with_root_value",
    "with_middleware",
    "with_execution_id",
    # Extra entries
    "ExtensionsContribution",
    "GraphQLContextContribution",
    "TraceIdContribution",
    "with_extensions",
    "with_graphql_context",
    "with_trace_id",
]
