"""
Error types for tailwind-variants.

Unknown variants, unknown values, missing slots and empty fragments are not
errors: they contribute no classes. The types here only cover calls made
with the wrong shape of arguments.
"""


class TailwindVariantsError(Exception):
    """Base exception for all tailwind-variants errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ComponentTypeError(TailwindVariantsError, TypeError):
    """
    Raised when an argument is not something the resolver can work with.

    Examples:
    - class_list() given neither a definition nor a slot resolver
    - props that are not a mapping
    """

    pass
