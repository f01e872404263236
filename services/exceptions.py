# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class StorageException(Exception):
    """Exception raised when the persisted form record cannot be read or written."""

    def __init__(self, message: str, path: str = None,
                 original_error: Exception = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.original_error = original_error
        self.context = context

    def __str__(self):
        if self.path:
            return f"[{self.path}] {self.message}"
        return self.message


class StepRegistryError(KeyError):
    """Raised when a step id or selection token is not in the catalog."""

    def __init__(self, step_id: str):
        super().__init__(step_id)
        self.step_id = step_id

    def __str__(self):
        return f"Unknown wizard step: {self.step_id}"
