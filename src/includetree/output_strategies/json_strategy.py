"""JSON output strategy for include parameters."""

import json
from typing import Optional

from includetree.include_tree.included_resource_params import IncludedResourceParams

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that renders a parsed include parameter as a JSON object.

    The object has the following structure:
    {
        "included": ["foo.bar", "foo.baz"],
        "model_includes": [{"foo": ["bar", "baz"]}],
        "rejected": [{"path": "qux.*", "reason": "wildcard"}]
    }

    Encoding nests once per path segment and is bounded by the interpreter recursion
    limit, so parameters from untrusted clients should be parsed with a max_depth.

    Attributes:
        indent: Indentation passed to the JSON encoder, or None for compact output.

    Example:
        >>> strategy = JSONOutputStrategy()
        >>> print(strategy.format_includes(IncludedResourceParams("foo,qux.*")))
        {"included": ["foo"], "model_includes": ["foo"], "rejected": [{"path": "qux.*", "reason": "wildcard"}]}
    """

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent
        self.encoder = json.JSONEncoder(indent=indent, ensure_ascii=False)

    def format_includes(self, params: IncludedResourceParams) -> str:
        data = {
            "included": params.included_resources(),
            "model_includes": params.model_includes(),
            "rejected": [{"path": path, "reason": reason.value} for path, reason in params.rejected_resources()],
        }
        return self.encoder.encode(data)
