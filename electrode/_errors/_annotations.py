class InvalidAnnotationError(TypeError):
    """Raised when an annotation factory does not return a dictionary."""

    def __init__(self, factory: object, fragment: object):
        factory_name = getattr(factory, "__name__", repr(factory))
        super().__init__(
            f"Annotation factory {factory_name!r} must return a dict, "
            f"got {type(fragment).__name__!r}."
        )
