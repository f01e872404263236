# -*- coding: utf-8 -*-
"""
Messages exchanged between the navigator and the active step.

The navigator sends RequestSubmit; the step answers Submitted (with the
fields to store) or Rejected (with the validation errors). A Rejected
reply leaves the store and the position untouched.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class RequestSubmit:
    """Ask the active step to validate and hand over its data."""
    step_id: str


@dataclass
class Submitted:
    """Step data is valid and ready to merge into the store."""
    data: Dict[str, Any] = field(default_factory=dict)
    section_id: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return True


@dataclass
class Rejected:
    """Step data failed validation."""
    errors: List[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return False


StepResult = Union[Submitted, Rejected]


def has_submit_handle(handle: Any) -> bool:
    """True when the object can answer RequestSubmit."""
    return handle is not None and callable(getattr(handle, "submit_form", None))
