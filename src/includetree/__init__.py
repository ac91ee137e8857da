"""Include parameter parsing for eager loading of related resources.

This package turns a comma-separated list of dotted resource paths, such as the
JSON:API ``include`` query parameter, into a nested inclusion tree that an
eager-loading facility can consume.
"""

from importlib.metadata import PackageNotFoundError, version

from includetree.exceptions import InvalidIncludeError
from includetree.include_tree.include_node import Branch, IncludeNode, Leaf
from includetree.include_tree.included_resource_params import IncludedResourceParams
from includetree.types import RejectionReason

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("includetree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "Branch",
    "IncludeNode",
    "IncludedResourceParams",
    "InvalidIncludeError",
    "Leaf",
    "RejectionReason",
    "__version__",
]
