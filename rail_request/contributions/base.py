"""
Base class for reusable execution input contributions.
"""

from abc import ABC, abstractmethod

from ..core.execution import ExecutionInput, ExecutionInputBuilder


class ExecutionInputContribution(ABC):
    """
    Base class for contributions shipped with the library.

    Instances are callables with the contribution signature, so they can be
    passed straight to ``RequestInput.configure_execution_input``.

    Attributes:
        name: String identifier for debugging and logging

    Example:
        class TenantContribution(ExecutionInputContribution):
            name = "tenant"

            def contribute(self, current, builder):
                return builder.context_entry("tenant", "acme").build()
    """

    name: str = "base"

    @abstractmethod
    def contribute(
        self, current: ExecutionInput, builder: ExecutionInputBuilder
    ) -> ExecutionInput:
        """
        Produce the next execution input.

        Args:
            current: Result of the previous contribution
            builder: Builder seeded from ``current``

        Returns:
            The next execution input
        """
        pass

    def __call__(
        self, current: ExecutionInput, builder: ExecutionInputBuilder
    ) -> ExecutionInput:
        return self.contribute(current, builder)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name}>"
