from abc import ABC, abstractmethod
from typing import Sequence, Union

from includetree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for resource path exclusion rules.

    Exclusion rules let an application refuse include paths that are well formed but
    must not be eager loaded, such as relations holding sensitive data. A path the
    rules exclude is dropped whole, exactly like a wildcard path.

    Paths are passed in their dotted form (``"author.credentials"``). Loading rules
    from files and adding individual rules are optional capabilities.

    Example:
        >>> class DenyNames(BaseExclusionRules):
        ...     def __init__(self, *names: str) -> None:
        ...         self.names = set(names)
        ...     def exclude(self, path: str) -> bool:
        ...         return any(segment in self.names for segment in path.split("."))
        >>> rules = DenyNames("credentials")
        >>> rules.exclude("author.credentials")
        True
        >>> rules.exclude("author.posts")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a dotted resource path should be excluded.

        Args:
            path (str): The resource path as supplied in the include parameter,
                with segments separated by dots.

        Returns:
            bool: True if the path should be excluded, False if it may be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, in the format of the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
