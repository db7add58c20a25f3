"""
Forms module.

Create/edit state machine for the idea form.
"""

from idealog.forms.controller import (
    FormController,
    FormData,
    FormMode,
    SubmitResult,
)

__all__ = [
    "FormController",
    "FormData",
    "FormMode",
    "SubmitResult",
]
