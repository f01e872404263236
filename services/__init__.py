# -*- coding: utf-8 -*-
"""
Self-Assessment Wizard Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "FormDataStore",
    "StepRegistry",
    "sequence_steps",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "FormDataStore":
        from .form_data_store import FormDataStore
        return FormDataStore
    elif name == "StepRegistry":
        from .wizard.step_registry import StepRegistry
        return StepRegistry
    elif name == "sequence_steps":
        from .wizard.step_sequencer import sequence_steps
        return sequence_steps
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
