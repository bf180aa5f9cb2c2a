from dataclasses import dataclass

from .node import Node


@dataclass(slots=True, frozen=True)
class ScoredNode:
    """A node paired with its score for a single lookup key."""

    node: Node
    score: float
