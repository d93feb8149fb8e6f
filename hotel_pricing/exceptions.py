"""
Pricing errors.
"""

from django.core.exceptions import ValidationError as DjangoValidationError


class ValidationError(DjangoValidationError):
    """
    Raised when a price cannot be calculated from the given inputs.

    Subclasses Django's ValidationError so model ``clean()`` methods,
    forms and the admin display it like any other field error.
    """

    def __str__(self):
        return "; ".join(self.messages)
