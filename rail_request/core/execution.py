"""
ExecutionInput - The engine-facing value produced from a request input.

An ExecutionInput is immutable. Changes are made through an
ExecutionInputBuilder seeded from an existing input, which produces a new
ExecutionInput on build().
"""

import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union

from .exceptions import InvalidArgument


def _frozen_mapping(values: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class ExecutionId:
    """
    Identity the execution engine uses to track one execution.

    Example:
        ExecutionId.from_value("req-1")
        ExecutionId.generate()
    """

    value: str

    def __post_init__(self):
        if not self.value:
            raise InvalidArgument("'execution_id' must not be empty", argument="execution_id")

    @classmethod
    def from_value(cls, value: Union[str, "ExecutionId"]) -> "ExecutionId":
        if isinstance(value, ExecutionId):
            return value
        if value is None:
            raise InvalidArgument("'execution_id' is required", argument="execution_id")
        return cls(str(value))

    @classmethod
    def generate(cls) -> "ExecutionId":
        return cls(uuid.uuid4().hex)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExecutionInput:
    """
    Input handed to the execution engine for one request.

    Attributes:
        query: The query, mutation, or subscription text
        operation_name: Operation to run when the query holds several
        variables: Variable values referenced by the query
        locale: Locale tag associated with the request
        execution_id: Resolved execution identity, if any
        context_value: Value passed to resolvers as ``info.context``
        root_value: Root value for top level resolvers
        extensions: Protocol extensions (e.g. persisted query hashes)
        graphql_context: Arbitrary entries contributed for downstream consumers
        middleware: Engine middleware applied to this execution
    """

    query: str
    operation_name: Optional[str] = None
    variables: Mapping[str, Any] = field(default_factory=_frozen_mapping)
    locale: Optional[str] = None
    execution_id: Optional[ExecutionId] = None
    context_value: Any = None
    root_value: Any = None
    extensions: Mapping[str, Any] = field(default_factory=_frozen_mapping)
    graphql_context: Mapping[str, Any] = field(default_factory=_frozen_mapping)
    middleware: tuple = ()

    def __post_init__(self):
        if not self.query:
            raise InvalidArgument("'query' is required", argument="query")
        if not isinstance(self.query, str):
            raise InvalidArgument("'query' must be a string", argument="query")
        object.__setattr__(self, "variables", _frozen_mapping(self.variables))
        object.__setattr__(self, "extensions", _frozen_mapping(self.extensions))
        object.__setattr__(self, "graphql_context", _frozen_mapping(self.graphql_context))
        object.__setattr__(self, "middleware", tuple(self.middleware or ()))

    @staticmethod
    def new_builder() -> "ExecutionInputBuilder":
        """Return an empty builder."""
        return ExecutionInputBuilder()

    def to_builder(self) -> "ExecutionInputBuilder":
        """Return a builder seeded with every field of this input."""
        return ExecutionInputBuilder.from_input(self)

    def transform(
        self, configure: Callable[["ExecutionInputBuilder"], Any]
    ) -> "ExecutionInput":
        """
        Create a modified copy of this input.

        Args:
            configure: Callable receiving a builder seeded from this input

        Returns:
            New ExecutionInput built after ``configure`` ran
        """
        builder = self.to_builder()
        configure(builder)
        return builder.build()

    def to_execute_kwargs(self) -> dict[str, Any]:
        """
        Keyword arguments accepted by ``graphene.Schema.execute``.

        Returns:
            Dictionary of execution arguments
        """
        kwargs: dict[str, Any] = {
            "source": self.query,
            "operation_name": self.operation_name,
            "variable_values": dict(self.variables),
            "context_value": self.context_value,
            "root_value": self.root_value,
        }
        if self.middleware:
            kwargs["middleware"] = list(self.middleware)
        return kwargs


class ExecutionInputBuilder:
    """
    Fluent builder for ExecutionInput.

    Every setter returns the builder so calls can be chained. Mappings are
    copied when the builder is seeded and when it builds, so built inputs never
    share mutable state with the builder.

    Example:
        execution_input = (
            ExecutionInput.new_builder()
            .query("{ ping }")
            .variables({"limit": 10})
            .build()
        )
    """

    def __init__(self):
        self._query: Optional[str] = None
        self._operation_name: Optional[str] = None
        self._variables: dict[str, Any] = {}
        self._locale: Optional[str] = None
        self._execution_id: Optional[ExecutionId] = None
        self._context_value: Any = None
        self._root_value: Any = None
        self._extensions: dict[str, Any] = {}
        self._graphql_context: dict[str, Any] = {}
        self._middleware: list[Any] = []

    @classmethod
    def from_input(cls, execution_input: ExecutionInput) -> "ExecutionInputBuilder":
        builder = cls()
        builder._query = execution_input.query
        builder._operation_name = execution_input.operation_name
        builder._variables = dict(execution_input.variables)
        builder._locale = execution_input.locale
        builder._execution_id = execution_input.execution_id
        builder._context_value = execution_input.context_value
        builder._root_value = execution_input.root_value
        builder._extensions = dict(execution_input.extensions)
        builder._graphql_context = dict(execution_input.graphql_context)
        builder._middleware = list(execution_input.middleware)
        return builder

    def query(self, query: str) -> "ExecutionInputBuilder":
        self._query = query
        return self

    def operation_name(self, operation_name: Optional[str]) -> "ExecutionInputBuilder":
        self._operation_name = operation_name
        return self

    def variables(self, variables: Optional[Mapping[str, Any]]) -> "ExecutionInputBuilder":
        self._variables = dict(variables or {})
        return self

    def variable(self, name: str, value: Any) -> "ExecutionInputBuilder":
        self._variables[name] = value
        return self

    def locale(self, locale: Optional[str]) -> "ExecutionInputBuilder":
        self._locale = locale
        return self

    def execution_id(
        self, execution_id: Optional[Union[str, ExecutionId]]
    ) -> "ExecutionInputBuilder":
        self._execution_id = (
            ExecutionId.from_value(execution_id) if execution_id is not None else None
        )
        return self

    def context_value(self, context_value: Any) -> "ExecutionInputBuilder":
        self._context_value = context_value
        return self

    def root_value(self, root_value: Any) -> "ExecutionInputBuilder":
        self._root_value = root_value
        return self

    def extensions(self, extensions: Optional[Mapping[str, Any]]) -> "ExecutionInputBuilder":
        self._extensions = dict(extensions or {})
        return self

    def extension(self, key: str, value: Any) -> "ExecutionInputBuilder":
        self._extensions[key] = value
        return self

    def graphql_context(
        self, entries: Optional[Mapping[str, Any]]
    ) -> "ExecutionInputBuilder":
        self._graphql_context = dict(entries or {})
        return self

    def context_entry(self, key: str, value: Any) -> "ExecutionInputBuilder":
        self._graphql_context[key] = value
        return self

    def middleware(self, *middleware: Any) -> "ExecutionInputBuilder":
        self._middleware = list(middleware)
        return self

    def add_middleware(self, middleware: Any) -> "ExecutionInputBuilder":
        self._middleware.append(middleware)
        return self

    def build(self) -> ExecutionInput:
        """
        Build a new ExecutionInput.

        Raises:
            InvalidArgument: If no query was set
        """
        if not self._query:
            raise InvalidArgument("'query' is required", argument="query")
        return ExecutionInput(
            query=self._query,
            operation_name=self._operation_name,
            variables=self._variables,
            locale=self._locale,
            execution_id=self._execution_id,
            context_value=self._context_value,
            root_value=self._root_value,
            extensions=self._extensions,
            graphql_context=self._graphql_context,
            middleware=tuple(self._middleware),
        )

    def __repr__(self) -> str:
        return f"<ExecutionInputBuilder query={self._query!r} execution_id={self._execution_id}>"
