"""
Custom exceptions for request inputs.

This module defines specific exception types raised while assembling a
request input and converting it into an execution input.
"""

from typing import Optional


class RequestInputError(Exception):
    """Base exception for request input errors."""

    def __init__(self, message: str, request_id: Optional[str] = None):
        self.request_id = request_id
        super().__init__(message)


class InvalidArgument(RequestInputError, ValueError):
    """Raised when a required value is missing or empty."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        self.argument = argument
        super().__init__(message, request_id)


class RequestInputFrozen(RequestInputError):
    """Raised when a frozen request input is modified."""


class ExecutionIdAlreadyAssigned(RequestInputError):
    """Raised when reassignment of the execution id is disabled."""

    def __init__(
        self,
        message: str,
        current: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        self.current = current
        super().__init__(message, request_id)


class PipelineContributionFailed(RequestInputError):
    """Raised when a registered contribution fails during conversion."""

    def __init__(
        self,
        message: str,
        position: int,
        cause: BaseException,
        contribution_name: Optional[str] = None,
        request_id: Optional[str] = None,
    ):
        self.position = position
        self.cause = cause
        self.contribution_name = contribution_name
        super().__init__(message, request_id)
