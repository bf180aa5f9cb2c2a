"""
Weighted Rendezvous Ring for deterministic key-to-node assignment.

This implementation provides:
- Deterministic mapping: same key always maps to same node (given same members)
- Weighted distribution: each node receives keys in proportion to its weight
- Minimal disruption: removing a node only remaps the keys it owned
- Full ranking: every member ordered by preference, for fallback chains

Usage:
    ring = Ring()
    ring.add("gate-1:9000")
    ring.add_with_weight("gate-2:9000", 2.0)  # Gets ~2x the keys

    primary = ring.lookup("job-abc123")
    candidates = ring.lookup_top_n("job-abc123", 2)
"""

from __future__ import annotations

import bisect
import heapq
from operator import attrgetter
from typing import Iterable

from rendezvous.env import Env, load_env
from rendezvous.hashing import Hasher, fnv1a_64, get_hasher
from rendezvous.logging import (
    KeyLookup,
    LoggerStream,
    LoggingConfig,
    LogLevel,
    NodeAdded,
    NodeRemoved,
    NodeWeightUpdated,
    RingCleared,
)

from .constants import DEFAULT_WEIGHT
from .node import Node
from .read_write_lock import ReadWriteLock
from .scored_node import ScoredNode
from .scoring import compute_score


_node_name = attrgetter("name")
_node_score = attrgetter("score")


class Ring:
    """
    A set of weighted nodes ranked per key by rendezvous hashing.

    Nodes are kept sorted by name, so membership and iteration order never
    depend on insertion order. Node names are hashed once when added, lookup
    keys once per lookup, both with the same injected hasher.

    Thread-safe: membership changes hold the ring's lock exclusively, reads
    and lookups hold it shared.
    """

    __slots__ = (
        "_nodes",
        "_hasher",
        "_lock",
        "_logger",
    )

    def __init__(
        self,
        hasher: Hasher | None = None,
        logger: LoggerStream | None = None,
    ) -> None:
        """
        Initialize an empty ring.

        Args:
            hasher: Pure 64-bit hash function applied to node names and
                lookup keys. Defaults to 64-bit FNV-1a.
            logger: Stream membership changes and lookups are logged to.
                The caller keeps ownership of a logger passed in here.
        """
        if hasher is None:
            hasher = fnv1a_64

        if logger is None:
            logger = LoggerStream(name="rendezvous")

        self._nodes: list[Node] = []
        self._hasher = hasher
        self._lock = ReadWriteLock()
        self._logger = logger

    @classmethod
    def from_env(cls, env: Env | None = None) -> Ring:
        """
        Build a ring configured from RENDEZVOUS_* settings.

        Applies the log level and output to the logging config and selects
        the hasher by name. Loads settings from the environment and .env
        when no Env is given. The ring owns the stream it creates here,
        call close() to release its log file.
        """
        if env is None:
            env = load_env(Env)

        LoggingConfig().update(
            log_level=env.RENDEZVOUS_LOG_LEVEL,
            log_output=env.RENDEZVOUS_LOG_OUTPUT,
        )

        return cls(
            hasher=get_hasher(env.RENDEZVOUS_HASHER),
            logger=LoggerStream(
                name="rendezvous",
                path=env.RENDEZVOUS_LOG_PATH,
            ),
        )

    @property
    def logger(self) -> LoggerStream:
        return self._logger

    def close(self) -> None:
        """Close the ring's log stream, releasing any open log file."""
        self._logger.close()

    def _hash(self, value: str | bytes) -> int:
        if isinstance(value, str):
            value = value.encode("utf-8")

        return self._hasher(value)

    def _search(self, name: str) -> int:
        return bisect.bisect_left(self._nodes, name, key=_node_name)

    def _find(self, name: str) -> Node | None:
        idx = self._search(name)
        if idx < len(self._nodes) and self._nodes[idx].name == name:
            return self._nodes[idx]

        return None

    # =========================================================================
    # Membership
    # =========================================================================

    def add(self, name: str) -> None:
        """Add a node with the default weight, or reset an existing node to it."""
        self.add_with_weight(name, DEFAULT_WEIGHT)

    def add_with_weight(self, name: str, weight: float) -> None:
        """
        Add a node, or update the weight of an existing one.

        The weight is accepted as given. A zero-weight node scores 0 for
        every key and so only wins against other zero-weight nodes.

        Args:
            name: Unique node identifier (e.g., "gate-1:9000")
            weight: Relative selection weight
        """
        with self._lock.write_locked():
            idx = self._search(name)

            if idx < len(self._nodes) and self._nodes[idx].name == name:
                node = self._nodes[idx]
                previous_weight = node.weight
                node.weight = weight

                entry = NodeWeightUpdated(
                    message=f"Updated weight of node {name} from {previous_weight} to {weight}",
                    node=name,
                    previous_weight=previous_weight,
                    weight=weight,
                )

            else:
                node = Node(
                    name=name,
                    hash=self._hash(name),
                    weight=weight,
                )
                self._nodes.insert(idx, node)

                entry = NodeAdded(
                    message=f"Added node {name} with weight {weight}",
                    node=name,
                    weight=weight,
                    node_hash=node.hash,
                )

        self._logger.log(entry)

    def remove(self, name: str) -> None:
        """Remove a node. Removing an absent node is a no-op."""
        with self._lock.write_locked():
            idx = self._search(name)
            if idx == len(self._nodes) or self._nodes[idx].name != name:
                return

            node = self._nodes.pop(idx)

        self._logger.log(
            NodeRemoved(
                message=f"Removed node {name}",
                node=name,
                weight=node.weight,
            )
        )

    def clear(self) -> int:
        """
        Remove all nodes.

        Returns:
            Number of nodes removed
        """
        with self._lock.write_locked():
            removed = len(self._nodes)
            self._nodes = []

        self._logger.log(
            RingCleared(
                message=f"Cleared {removed} nodes",
                removed=removed,
            )
        )

        return removed

    def contains(self, name: str) -> bool:
        with self._lock.read_locked():
            return self._find(name) is not None

    def weight(self, name: str) -> float:
        """
        Return a node's weight, or 0.0 when the node is absent.

        An absent node and a node explicitly weighted 0 both return 0.0,
        use contains() to tell them apart.
        """
        with self._lock.read_locked():
            node = self._find(name)
            if node is None:
                return 0.0

            return node.weight

    def list_nodes(self) -> list[str]:
        """Return a snapshot of all node names in ascending order."""
        with self._lock.read_locked():
            return [node.name for node in self._nodes]

    def node_count(self) -> int:
        with self._lock.read_locked():
            return len(self._nodes)

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    # =========================================================================
    # Lookup
    # =========================================================================

    def _score(self, key: str | bytes) -> list[ScoredNode]:
        key_hash = self._hash(key)

        with self._lock.read_locked():
            scored = [
                ScoredNode(
                    node=node,
                    score=compute_score(key_hash, node.hash, node.weight),
                )
                for node in self._nodes
            ]

        if self._logger.enabled_at(LogLevel.TRACE):
            self._logger.log(
                KeyLookup(
                    message=f"Scored {len(scored)} nodes for key {key!r}",
                    key=key,
                    key_hash=key_hash,
                    candidates=len(scored),
                )
            )

        return scored

    def lookup_all(self, key: str | bytes) -> list[str]:
        """
        Rank every node for a key.

        Nodes with equal scores keep ascending name order, so the ranking
        for an unchanged ring is always identical.

        Returns:
            All node names, best first. Empty if the ring has no nodes.
        """
        scored = self._score(key)
        scored.sort(key=_node_score, reverse=True)

        return [scored_node.node.name for scored_node in scored]

    def lookup_top_n(self, key: str | bytes, n: int) -> list[str]:
        """
        Return the n best nodes for a key, in ranked order.

        Identical to the first n entries of lookup_all(). Returns fewer
        entries when the ring has fewer than n nodes, and none when n <= 0.
        """
        if n <= 0:
            return []

        scored = self._score(key)

        return [
            scored_node.node.name
            for scored_node in heapq.nlargest(n, scored, key=_node_score)
        ]

    def lookup(self, key: str | bytes) -> str | None:
        """
        Select the best node for a key.

        Returns:
            Name of the top-ranked node, or None if the ring is empty
        """
        names = self.lookup_top_n(key, 1)
        if names:
            return names[0]

        return None

    def key_distribution(self, sample_keys: Iterable[str | bytes]) -> dict[str, int]:
        """
        Count how many of the sample keys each node is the top choice for.

        Every current node appears in the result, including nodes that
        received no keys.
        """
        with self._lock.read_locked():
            distribution: dict[str, int] = {node.name: 0 for node in self._nodes}

        for key in sample_keys:
            name = self.lookup(key)
            if name is not None:
                distribution[name] = distribution.get(name, 0) + 1

        return distribution
