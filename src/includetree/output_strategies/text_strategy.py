"""Plain text output strategy for include parameters."""

from includetree.include_tree.included_resource_params import IncludedResourceParams

from .base_strategy import OutputStrategy


class TextOutputStrategy(OutputStrategy):
    """Output strategy that renders the inclusion tree as indented text.

    The tree comes first, drawn like the Unix ``tree`` command under an ``include``
    root, followed by one line per rejected path.

    Example:
        >>> strategy = TextOutputStrategy()
        >>> print(strategy.format_includes(IncludedResourceParams("foo.bar,foo.baz,qux.*")))
        include
        └── foo
            ├── bar
            └── baz
        rejected: qux.* (wildcard)
    """

    def format_includes(self, params: IncludedResourceParams) -> str:
        lines = list(params.stream_tree_representation())
        lines.extend(f"rejected: {path} ({reason.value})" for path, reason in params.rejected_resources())
        return "\n".join(lines)
