"""
Public test utilities for rail-request.
"""

from .harness import (
    FailingContribution,
    RailRequestTestClient,
    RecordingContribution,
    build_ping_schema,
    build_request_input,
    override_rail_request_settings,
)

__all__ = [
    "FailingContribution",
    "RailRequestTestClient",
    "RecordingContribution",
    "build_ping_schema",
    "build_request_input",
    "override_rail_request_settings",
]
