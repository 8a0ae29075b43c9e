"""
This module defines the exception raised by the signature parser when the
parameter names of a callable cannot be recovered from its source text.

`ParseError`:
This `ValueError` is raised by `reflect_arguments` (and therefore by
`decorate`) when the source of a callable is unavailable, e.g. for built-ins
or functions created through `exec`, or when the text matches neither the
bracketed `def name(...)` shape nor the bare `lambda ...:` shape. The parser
never guesses, so the message points the user at the explicit `params=`
argument of `decorate` as the way out.
"""


class ParseError(ValueError):
    """Raised when the parameter list of a callable cannot be parsed."""

    def __init__(self, target: object, reason: str):
        self.target = target
        self.reason = reason

        name = getattr(target, "__qualname__", None) or getattr(
            target, "__name__", repr(target)
        )
        message = (
            f"Cannot reflect the arguments of {name!r}: {reason}"
            f"\n\nSuggestion: Pass the dependency names explicitly, e.g. "
            f"decorate({name}, params=[...])."
        )
        super().__init__(message)
