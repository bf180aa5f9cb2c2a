from dataclasses import dataclass


@dataclass(slots=True)
class Node:
    """
    A named, weighted ring member.

    Attributes:
        name: Unique identifier, also the sort key within the ring
        hash: 64-bit hash of name, computed once when the node is added
        weight: Relative selection weight. Only weight is ever mutated.
    """

    name: str
    hash: int
    weight: float
