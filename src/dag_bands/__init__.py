"""dag-bands: area-proportional node fills and weighted edges for DAG diagrams."""

__version__ = "0.1.0"
