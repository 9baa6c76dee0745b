"""Parsing of %%dag diagram definitions."""

from dag_bands.parser.mermaid import parse_dag_mermaid
from dag_bands.parser.model import (
    Band,
    BandStacks,
    DagEdge,
    DagGraph,
    HatchDef,
    Node,
    Orientation,
)

__all__ = [
    "Band",
    "BandStacks",
    "DagEdge",
    "DagGraph",
    "HatchDef",
    "Node",
    "Orientation",
    "parse_dag_mermaid",
]
