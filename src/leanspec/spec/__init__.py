"""Spec document package.

This package manages a corpus of spec documents: Markdown files with a YAML
frontmatter header carrying status, priority and relationships.

Key Components:
    - decode / encode: Frontmatter codec
    - merge / enrich: Metadata patching and derived timestamps
    - atomic_write: Write-temp-then-rename file writer
    - build_graph: Relationship graph index
    - DependencyGraph: Bounded, cycle-safe graph queries
    - SpecLoader: Corpus enumeration and loading
    - SpecManager: Write path and query entry point

Example:
    >>> from pathlib import Path
    >>> from leanspec.spec import SpecManager
    >>> manager = SpecManager(Path("specs"))
    >>> graph = manager.query()
    >>> graph.upstream("042-graph-engine", max_depth=3)
"""

from ._frontmatter import (
    decode,
    decode_header,
    encode,
    extract_title,
    format_timestamp,
    from_header,
    parse_timestamp,
    to_header,
)
from ._graph import GraphIndex, build_graph
from ._io import atomic_write, read_text
from ._loader import ARCHIVE_DIR, SpecLoader
from ._metadata import enrich, merge, patch_from_mapping, validate_patch
from ._models import (
    DERIVED_FIELDS,
    KNOWN_FIELDS,
    MAX_NESTING_DEPTH,
    UNSET,
    CompleteDependencyGraph,
    DanglingReference,
    DependencyNode,
    GraphDiagnostics,
    ImpactRadius,
    MetadataPatch,
    RelationshipType,
    SpecFrontmatter,
    SpecInfo,
    SpecPriority,
    SpecStatus,
    StatusTransition,
)
from ._query import DEFAULT_MAX_DEPTH, DependencyGraph
from ._spec_manager import SpecManager

__all__ = [
    "ARCHIVE_DIR",
    "DEFAULT_MAX_DEPTH",
    "DERIVED_FIELDS",
    "KNOWN_FIELDS",
    "MAX_NESTING_DEPTH",
    "UNSET",
    "CompleteDependencyGraph",
    "DanglingReference",
    "DependencyGraph",
    "DependencyNode",
    "GraphDiagnostics",
    "GraphIndex",
    "ImpactRadius",
    "MetadataPatch",
    "RelationshipType",
    "SpecFrontmatter",
    "SpecInfo",
    "SpecLoader",
    "SpecManager",
    "SpecPriority",
    "SpecStatus",
    "StatusTransition",
    "atomic_write",
    "build_graph",
    "decode",
    "decode_header",
    "encode",
    "enrich",
    "extract_title",
    "format_timestamp",
    "from_header",
    "merge",
    "parse_timestamp",
    "patch_from_mapping",
    "read_text",
    "to_header",
    "validate_patch",
]
