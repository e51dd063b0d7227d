class ClassNotFoundError(LookupError):
    """Raised when a class name has no declaration in the source model."""

    def __init__(self, class_name: str):
        super().__init__(f"Class not found in source model: {class_name}")
        self.class_name = class_name


class IterationMisuseError(RuntimeError):
    """Raised when an element is requested without confirming one exists."""


class UnsupportedMutationError(TypeError):
    """Raised on any attempt to modify a read-only factory method sequence."""
