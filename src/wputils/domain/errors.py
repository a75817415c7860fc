"""Domain-layer error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class WputilsError(Exception):
    """Base class for wputils errors."""


class InvalidArgumentError(WputilsError, TypeError):
    """Raised when a caller-supplied argument has an unusable type.

    Typically a predicate or callback that is not callable.
    """


# ============================================================================
#                           Templating errors
# ============================================================================


class TemplateNotFoundError(WputilsError):
    """Raised when none of the candidate template names can be located."""

    def __init__(self, candidates: list[str]) -> None:
        super().__init__(
            "No template found for candidates: "
            + ", ".join(repr(name) for name in candidates)
        )
        self.candidates = candidates
