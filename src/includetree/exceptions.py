from typing import Sequence

from includetree.types import Rejection


class InvalidIncludeError(ValueError):
    """
    Exception raised when strict validation finds rejected paths in an include parameter.

    The query operations of IncludedResourceParams never raise; they silently drop
    rejected paths. Callers that must refuse such requests outright (a JSON:API
    server answering 400 Bad Request, for instance) call ``validate()``, which
    raises this exception instead.

    Attributes:
        rejected (list[tuple[str, RejectionReason]]): Every rejected entry, in the
            order it appeared, paired with the reason it was rejected.

    Example:
        >>> from includetree.types import RejectionReason
        >>> error = InvalidIncludeError([("foo.*", RejectionReason.WILDCARD)])
        >>> str(error)
        "Unsupported include path(s): 'foo.*' (wildcard)"
        >>> error.rejected[0][1] is RejectionReason.WILDCARD
        True
    """

    def __init__(self, rejected: Sequence[Rejection]) -> None:
        """
        Initialize the exception with the rejected paths.

        Args:
            rejected: Pairs of (raw path, reason) for every rejected entry.
        """
        self.rejected = list(rejected)
        details = ", ".join(f"{path!r} ({reason.value})" for path, reason in self.rejected)
        super().__init__(f"Unsupported include path(s): {details}")
