"""
Execution input pipeline.

Turns a RequestInput into an ExecutionInput by building a baseline from the
request fields, resolving the execution id, then folding the registered
contributions over that baseline in registration order.

Usage:
    from rail_request.core.pipeline import build_execution_input

    execution_input = build_execution_input(request_input, use_request_id=True)
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, Optional

from .exceptions import InvalidArgument, PipelineContributionFailed, RequestInputFrozen
from .execution import ExecutionId, ExecutionInput, ExecutionInputBuilder

if TYPE_CHECKING:
    from .request_input import RequestInput
    from .settings import RequestInputSettings

logger = logging.getLogger(__name__)

# (current input, builder seeded from current) -> next input
Contribution = Callable[[ExecutionInput, ExecutionInputBuilder], ExecutionInput]
Transform = Callable[[ExecutionInput], ExecutionInput]


def get_contribution_name(contribution: Any) -> str:
    """Return a readable name for a contribution, used in logs and errors."""
    name = getattr(contribution, "name", None)
    if isinstance(name, str) and name:
        return name
    name = getattr(contribution, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return contribution.__class__.__name__


def as_contribution(transform: Transform) -> Contribution:
    """
    Adapt a single-argument transform into a contribution.

    The adapted contribution ignores the builder and returns whatever the
    transform returns for the current input.
    """
    if not callable(transform):
        raise InvalidArgument("'transform' must be callable", argument="transform")

    def contribution(current: ExecutionInput, builder: ExecutionInputBuilder) -> ExecutionInput:
        return transform(current)

    contribution.name = get_contribution_name(transform)
    return contribution


class ExecutionInputPipeline:
    """
    Append-only, ordered registry of contributions.

    Registration order is application order. Contributions are never sorted,
    deduplicated, or skipped. Once frozen, the pipeline refuses new
    registrations.

    Example:
        pipeline = ExecutionInputPipeline()
        pipeline.add(lambda current, builder: builder.extension("a", 1).build())
        result = pipeline.apply(baseline)
    """

    def __init__(self, contributions: Optional[Iterable[Contribution]] = None):
        self._contributions: list[Contribution] = []
        self._frozen = False
        for contribution in contributions or ():
            self.add(contribution)

    def add(self, contribution: Contribution) -> "ExecutionInputPipeline":
        """
        Append a contribution.

        Args:
            contribution: Callable taking (current input, seeded builder)

        Returns:
            Self for method chaining
        """
        if self._frozen:
            raise RequestInputFrozen("Cannot register a contribution on a frozen pipeline")
        if not callable(contribution):
            raise InvalidArgument("'contribution' must be callable", argument="contribution")
        self._contributions.append(contribution)
        return self

    def freeze(self) -> None:
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def snapshot(self) -> tuple[Contribution, ...]:
        """Return the contributions registered so far, as an immutable sequence."""
        return tuple(self._contributions)

    def names(self) -> list[str]:
        return [get_contribution_name(c) for c in self._contributions]

    def apply(
        self,
        execution_input: ExecutionInput,
        request_id: Optional[str] = None,
        log_contributions: bool = False,
    ) -> ExecutionInput:
        """Fold the current contributions over ``execution_input``."""
        return apply_contributions(
            execution_input,
            self.snapshot(),
            request_id=request_id,
            log_contributions=log_contributions,
        )

    def __len__(self) -> int:
        return len(self._contributions)

    def __iter__(self) -> Iterator[Contribution]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"<ExecutionInputPipeline contributions={self.names()} frozen={self._frozen}>"


def apply_contributions(
    execution_input: ExecutionInput,
    contributions: Iterable[Contribution],
    request_id: Optional[str] = None,
    log_contributions: bool = False,
) -> ExecutionInput:
    """
    Apply contributions left to right.

    Each contribution receives the result of the previous one together with a
    fresh builder seeded from that result. A contribution may return the
    builder instead of a built input; it is built on its behalf.

    Raises:
        PipelineContributionFailed: If a contribution raises or returns
            something other than an ExecutionInput. Results of earlier
            contributions are discarded.
    """
    current = execution_input
    for position, contribution in enumerate(contributions):
        name = get_contribution_name(contribution)
        if log_contributions:
            logger.info("Applying execution input contribution %d (%s)", position, name)
        else:
            logger.debug("Applying execution input contribution %d (%s)", position, name)

        try:
            result = contribution(current, ExecutionInputBuilder.from_input(current))
            if isinstance(result, ExecutionInputBuilder):
                result = result.build()
            if not isinstance(result, ExecutionInput):
                raise TypeError(
                    f"Contribution '{name}' returned {type(result).__name__}, "
                    "expected ExecutionInput"
                )
        except Exception as exc:
            logger.warning(
                "Execution input contribution %d (%s) failed for request '%s': %s",
                position,
                name,
                request_id,
                exc,
            )
            raise PipelineContributionFailed(
                f"Contribution {position} ({name}) failed: {exc}",
                position=position,
                cause=exc,
                contribution_name=name,
                request_id=request_id,
            ) from exc

        current = result

    return current


def build_execution_input(
    request_input: "RequestInput",
    use_request_id: bool,
    settings: Optional["RequestInputSettings"] = None,
) -> ExecutionInput:
    """
    Create the ExecutionInput for a request input.

    The contributions and the assigned execution id are captured when the call
    starts; registrations made while contributions run apply to later builds
    only. The request input itself is never modified.

    Args:
        request_input: The request to convert
        use_request_id: Whether the request id is used as the execution id
            when none was assigned explicitly
        settings: Optional RequestInputSettings, loaded from Django settings
            when omitted

    Returns:
        A new ExecutionInput owned by the caller
    """
    if settings is None:
        from .settings import RequestInputSettings

        settings = RequestInputSettings.from_settings()

    contributions = request_input.pipeline.snapshot()
    assigned_execution_id = request_input.assigned_execution_id

    builder = (
        ExecutionInput.new_builder()
        .query(request_input.query)
        .operation_name(request_input.operation_name)
        .variables(request_input.variables)
        .locale(request_input.locale)
    )
    if assigned_execution_id is not None:
        builder.execution_id(assigned_execution_id)
    elif use_request_id:
        builder.execution_id(ExecutionId.from_value(request_input.id))

    baseline = builder.build()
    logger.debug(
        "Built baseline execution input for request '%s' (execution_id=%s, contributions=%d)",
        request_input.id,
        baseline.execution_id,
        len(contributions),
    )

    return apply_contributions(
        baseline,
        contributions,
        request_id=request_input.id,
        log_contributions=settings.log_contributions,
    )
