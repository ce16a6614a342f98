"""
RequestInput - Common representation of one GraphQL request.

A RequestInput is created once per inbound request by the transport. Its
request fields are read-only. Collaborators (tracing, security,
instrumentation) customize the eventual ExecutionInput by registering
contributions, and may assign an explicit execution id, until the input is
frozen or converted.

Usage:
    request_input = RequestInput("{ ping }", request_id="req-1")
    request_input.configure_execution_input(
        lambda current, builder: builder.context_entry("traceId", "abc").build()
    )
    execution_input = request_input.to_execution_input(use_request_id=True)
"""

import json
import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from .exceptions import (
    ExecutionIdAlreadyAssigned,
    InvalidArgument,
    RequestInputFrozen,
)
from .execution import ExecutionId, ExecutionInput
from .pipeline import (
    Contribution,
    ExecutionInputPipeline,
    Transform,
    as_contribution,
    build_execution_input,
)
from .settings import RequestInputSettings

logger = logging.getLogger(__name__)


class RequestInput:
    """
    Request fields plus the contributions that shape its ExecutionInput.

    Attributes:
        query: The query, mutation, or subscription, never empty
        operation_name: Explicit name of the operation to run, if any
        variables: Read-only variable values, empty when none were given
        locale: Locale tag associated with the request, if any
        id: Request id used for request/response correlation and as the
            fallback execution id
    """

    def __init__(
        self,
        query: str,
        operation_name: Optional[str] = None,
        variables: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        """
        Create an instance.

        Args:
            query: The query, mutation, or subscription for the request
            operation_name: An optional, explicit name assigned to the query
            variables: Variables by which the query is parameterized
            locale: The locale associated with the request, if any
            request_id: The request id, used as the execution id fallback

        Raises:
            InvalidArgument: If ``query`` or ``request_id`` is missing or empty,
                or a text field is not a string
        """
        if not query:
            raise InvalidArgument("'query' is required", argument="query", request_id=request_id)
        if not isinstance(query, str):
            raise InvalidArgument(
                f"'query' must be a string, got {type(query).__name__}",
                argument="query",
                request_id=request_id,
            )
        if operation_name is not None and not isinstance(operation_name, str):
            raise InvalidArgument(
                f"'operation_name' must be a string, got {type(operation_name).__name__}",
                argument="operation_name",
                request_id=request_id,
            )
        if not request_id:
            raise InvalidArgument("'request_id' is required", argument="request_id")

        self._query = query
        self._operation_name = operation_name
        self._variables = MappingProxyType(dict(variables) if variables is not None else {})
        self._locale = locale
        self._id = request_id
        self._pipeline = ExecutionInputPipeline()
        self._execution_id: Optional[ExecutionId] = None

    @classmethod
    def from_dict(
        cls,
        payload: Mapping[str, Any],
        request_id: str,
        locale: Optional[str] = None,
    ) -> "RequestInput":
        """
        Create an instance from a GraphQL request body.

        Accepts the standard ``query``, ``operationName``, ``variables`` and
        ``extensions`` keys. ``variables`` may be a JSON encoded string, as
        sent in GET query strings. Protocol extensions are forwarded to the
        ExecutionInput through a registered contribution.

        Args:
            payload: Decoded request body
            request_id: The request id
            locale: The locale associated with the request, if any

        Raises:
            InvalidArgument: If required values are missing or malformed
        """
        if not isinstance(payload, Mapping):
            raise InvalidArgument(
                "Request payload must be a mapping", argument="payload", request_id=request_id
            )

        variables = _decode_json_object(payload.get("variables"), "variables", request_id)
        extensions = _decode_json_object(payload.get("extensions"), "extensions", request_id)

        request_input = cls(
            payload.get("query"),
            operation_name=payload.get("operationName") or None,
            variables=variables,
            locale=locale,
            request_id=request_id,
        )
        if extensions:
            from ..contributions import with_extensions

            request_input.configure_execution_input(with_extensions(extensions))
        return request_input

    @property
    def id(self) -> str:
        """
        Return the request id.

        For multiplexed transports (e.g. GraphQL over WebSocket) this id
        correlates request and response messages. It is used as the execution
        id when none was assigned and the caller opts in.
        """
        return self._id

    @property
    def query(self) -> str:
        return self._query

    @property
    def operation_name(self) -> Optional[str]:
        return self._operation_name

    @property
    def variables(self) -> Mapping[str, Any]:
        return self._variables

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    @property
    def assigned_execution_id(self) -> Optional[ExecutionId]:
        """Return the explicitly assigned execution id, or None."""
        return self._execution_id

    @property
    def pipeline(self) -> ExecutionInputPipeline:
        return self._pipeline

    @property
    def is_frozen(self) -> bool:
        return self._pipeline.is_frozen

    def assign_execution_id(self, execution_id: Union[str, ExecutionId]) -> None:
        """
        Set the execution id to use for the ExecutionInput.

        Takes precedence over the request id. By default a later assignment
        replaces an earlier one; with ``allow_execution_id_reassignment``
        disabled a second assignment is rejected.

        Args:
            execution_id: The execution id to use

        Raises:
            InvalidArgument: If ``execution_id`` is missing or empty
            RequestInputFrozen: If the request input is frozen
            ExecutionIdAlreadyAssigned: If reassignment is disabled
        """
        if self.is_frozen:
            raise RequestInputFrozen(
                "Cannot assign an execution id to a frozen request input", request_id=self._id
            )
        if not execution_id:
            raise InvalidArgument(
                "'execution_id' should not be empty", argument="execution_id", request_id=self._id
            )

        new_execution_id = ExecutionId.from_value(execution_id)
        if self._execution_id is not None:
            settings = RequestInputSettings.from_settings()
            if not settings.allow_execution_id_reassignment:
                raise ExecutionIdAlreadyAssigned(
                    f"Execution id already assigned for request '{self._id}'",
                    current=str(self._execution_id),
                    request_id=self._id,
                )
            logger.debug(
                "Replacing execution id '%s' with '%s' for request '%s'",
                self._execution_id,
                new_execution_id,
                self._id,
            )
        self._execution_id = new_execution_id

    def configure_execution_input(self, configurer: Contribution) -> "RequestInput":
        """
        Register a contribution to customize the ExecutionInput.

        The contribution receives the current ExecutionInput and a builder
        seeded from it, and returns the next ExecutionInput. Contributions run
        in registration order.

        Args:
            configurer: Callable taking (current input, builder)

        Returns:
            Self for method chaining
        """
        if self.is_frozen:
            raise RequestInputFrozen(
                "Cannot configure a frozen request input", request_id=self._id
            )
        self._pipeline.add(configurer)
        return self

    def transform_execution_input(self, transform: Transform) -> "RequestInput":
        """
        Register a single-argument transform of the ExecutionInput.

        Shorthand for contributions that do not need the builder, e.g.
        ``lambda current: current.transform(lambda b: b.locale("fr"))``.

        Args:
            transform: Callable taking the current input and returning the next

        Returns:
            Self for method chaining
        """
        return self.configure_execution_input(as_contribution(transform))

    def freeze(self) -> "RequestInput":
        """
        End the assembly phase.

        After freezing, contributions can no longer be registered and the
        execution id can no longer be assigned. Conversion is still allowed.
        """
        self._pipeline.freeze()
        return self

    def to_execution_input(self, use_request_id: Optional[bool] = None) -> ExecutionInput:
        """
        Create the ExecutionInput for request execution.

        The input is populated from the query, operation name, variables and
        locale, then customized by the registered contributions.

        Args:
            use_request_id: Whether the request id should be used as a
                fallback execution id. Defaults to the
                ``use_request_id_as_execution_id`` setting.

        Returns:
            A new ExecutionInput

        Raises:
            PipelineContributionFailed: If a contribution fails
        """
        settings = RequestInputSettings.from_settings()
        if use_request_id is None:
            use_request_id = settings.use_request_id_as_execution_id
        return build_execution_input(self, use_request_id, settings=settings)

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dict representation of the request input.

        ``query`` is always present; ``operationName`` and ``variables`` only
        when set and non-empty. Locale and execution id are not part of the
        wire representation.
        """
        data: dict[str, Any] = {"query": self._query}
        if self._operation_name:
            data["operationName"] = self._operation_name
        if self._variables:
            data["variables"] = dict(self._variables)
        return data

    def __str__(self) -> str:
        parts = [f"Query='{self._query}'"]
        if self._operation_name:
            parts.append(f"Operation='{self._operation_name}'")
        if self._variables:
            rendered = str(dict(self._variables))
            max_length = RequestInputSettings.from_settings().repr_max_variables_length
            if max_length and len(rendered) > max_length:
                rendered = rendered[:max_length] + "..."
            parts.append(f"Variables={rendered}")
        if self._locale:
            parts.append(f"Locale={self._locale}")
        return ", ".join(parts)

    def __repr__(self) -> str:
        return (
            f"<RequestInput id={self._id!r} operation={self._operation_name!r} "
            f"contributions={len(self._pipeline)} frozen={self.is_frozen}>"
        )


def _decode_json_object(
    value: Any, argument: str, request_id: Optional[str]
) -> Optional[dict[str, Any]]:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError as exc:
            raise InvalidArgument(
                f"'{argument}' is not valid JSON: {exc}",
                argument=argument,
                request_id=request_id,
            ) from exc
        if value is None:
            return None
    if not isinstance(value, Mapping):
        raise InvalidArgument(
            f"'{argument}' must be an object", argument=argument, request_id=request_id
        )
    return dict(value)
