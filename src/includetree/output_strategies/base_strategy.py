"""Output strategy base class defining the interface for include parameter formatting.

A strategy renders everything known about a parsed include parameter (the accepted
paths, the inclusion tree, and the rejected paths) as one document.
"""

from abc import ABC, abstractmethod

from includetree.include_tree.included_resource_params import IncludedResourceParams


class OutputStrategy(ABC):
    """Abstract base class defining the interface for include parameter output formatting.

    Example:
        >>> class ListStrategy(OutputStrategy):
        ...     def format_includes(self, params: IncludedResourceParams) -> str:
        ...         return "\\n".join(params.included_resources())
        >>> print(ListStrategy().format_includes(IncludedResourceParams("foo,bar.baz")))
        foo
        bar.baz
    """

    @abstractmethod
    def format_includes(self, params: IncludedResourceParams) -> str:
        """Render a parsed include parameter.

        Args:
            params: The parsed include parameter.

        Returns:
            The complete rendered document, without a trailing newline.
        """
        pass
