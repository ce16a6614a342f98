"""
RequestInputSettings implementation.
"""

from dataclasses import dataclass
from typing import Optional

from ..config_proxy import get_settings_proxy


@dataclass
class RequestInputSettings:
    """Settings controlling how request inputs become execution inputs."""

    use_request_id_as_execution_id: bool = True
    allow_execution_id_reassignment: bool = True
    log_contributions: bool = False
    repr_max_variables_length: Optional[int] = None

    @classmethod
    def from_settings(cls) -> "RequestInputSettings":
        section = get_settings_proxy().get_section("request_input_settings")
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in section.items() if k in valid_fields})
