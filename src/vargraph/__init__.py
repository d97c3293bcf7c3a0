"""
vargraph - Named graph variants with node-by-node diffing

vargraph keeps several named copies of a small labeled reference graph,
groups the copies per node by whether they agree, and ranks existing
nodes as reference targets for a partially typed label.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("vargraph")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from vargraph.graph import (
    DEFAULT,
    SAMPLES,
    Graph,
    GraphColor,
    NodeAttributes,
    NodeId,
    group_variants,
    suggest_targets,
)
from vargraph.persistence import decode_collection, encode_collection
from vargraph.workspace import Workspace

__all__ = [
    "__version__",
    "DEFAULT",
    "SAMPLES",
    "Graph",
    "GraphColor",
    "NodeAttributes",
    "NodeId",
    "Workspace",
    "decode_collection",
    "encode_collection",
    "group_variants",
    "suggest_targets",
]
