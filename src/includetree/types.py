from enum import Enum
from os import PathLike
from typing import Dict, List, Tuple, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# External form of one inclusion node: a bare name, or a name mapped to its children
ModelInclude = Union[str, Dict[str, List["ModelInclude"]]]

# A rejected entry of the include parameter, as supplied, with the reason it was dropped
Rejection = Tuple[str, "RejectionReason"]


class RejectionReason(str, Enum):
    """Reason a resource path was dropped from the include parameter.

    Reasons are checked in declaration order and the first one that applies is
    reported.

    Attributes:
        MALFORMED: The path has an empty segment (e.g. ``"foo..bar"`` or ``""``).
        WILDCARD: A segment contains ``*`` or ``?``.
        TOO_DEEP: The path has more segments than the configured maximum depth.
        EXCLUDED: The path matches a configured exclusion rule.
    """

    MALFORMED = "malformed"
    WILDCARD = "wildcard"
    TOO_DEEP = "too_deep"
    EXCLUDED = "excluded"
