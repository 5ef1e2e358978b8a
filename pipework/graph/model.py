"""The graph IR: nodes (goroutines) connected by edges (channels)."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import networkx as nx

from ..parts.base import FormData, Part
from ..schema.errors import (
    InvalidCapacityError,
    NameConflictError,
    ReferentialError,
    UnknownEdgeError,
    UnknownNodeError,
    ValidationError,
)
from ..schema.identifiers import require_identifier, require_node_name

logger = logging.getLogger(__name__)


def coerce_capacity(value: Any, field: str = "Cap") -> int:
    """Convert a submitted capacity to a non-negative int.

    Raises:
        InvalidCapacityError: If the value is not a non-negative integer.
    """
    if isinstance(value, bool):
        raise InvalidCapacityError(value, field)
    if isinstance(value, int):
        capacity = value
    elif isinstance(value, float) and value.is_integer():
        capacity = int(value)
    elif isinstance(value, str):
        try:
            capacity = int(value.strip())
        except ValueError:
            raise InvalidCapacityError(value, field) from None
    else:
        raise InvalidCapacityError(value, field)
    if capacity < 0:
        raise InvalidCapacityError(value, field)
    return capacity


def coerce_multiplicity(value: Any, field: str = "Multiplicity") -> int:
    """Convert a submitted multiplicity to an int, clamped to at least 1.

    Raises:
        ValidationError: If the value is not an integer.
    """
    reason = f"must be an integer, got {value!r}"
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(field, reason)
    try:
        return max(int(value), 1)
    except (TypeError, ValueError):
        raise ValidationError(field, reason) from None


@dataclass
class Node:
    """A goroutine running its part's code."""

    name: str
    part: Part
    multiplicity: int = 1
    wait: bool = False

    def __post_init__(self) -> None:
        self.multiplicity = max(int(self.multiplicity), 1)

    @property
    def part_type(self) -> str:
        return self.part.type_key

    def channels_read(self) -> list[str]:
        """Channels the part says it reads."""
        read, _ = self.part.channels()
        return read

    def channels_written(self) -> list[str]:
        """Channels the part says it writes."""
        _, written = self.part.channels()
        return written

    def __str__(self) -> str:
        return self.name


@dataclass
class Edge:
    """A typed channel from one node to another."""

    name: str
    src: str
    dst: str
    type: str = ""
    cap: int = 0

    def __str__(self) -> str:
        return self.name


class Graph:
    """A collection of goroutines (nodes) and channels (edges).

    Every edge's ``src`` and ``dst`` name a node in ``nodes``. All
    mutations validate their input before changing anything, and run under
    the graph's lock together with any reads made through ``locked()``,
    so a rename is never observed half applied.
    """

    def __init__(
        self,
        name: str = "",
        package_name: str = "main",
        package_path: str = "",
        imports: list[str] | None = None,
    ):
        self.name = name
        self.package_name = package_name
        self.package_path = package_path
        self.imports: list[str] = []
        self.nodes: dict[str, Node] = {}
        self.edges: dict[str, Edge] = {}
        self._lock = threading.RLock()

        for path in imports or []:
            self.add_import(path)

    def __repr__(self) -> str:
        return (
            f"Graph(name={self.name!r}, nodes={len(self.nodes)}, "
            f"edges={len(self.edges)})"
        )

    @contextmanager
    def locked(self) -> Iterator["Graph"]:
        """Hold the graph's lock for a consistent multi-step read."""
        with self._lock:
            yield self

    # -------------------------------------------------------------------------
    # Imports
    # -------------------------------------------------------------------------

    def add_import(self, path: str) -> None:
        """Append an import path, ignoring duplicates."""
        path = path.strip()
        if not path:
            raise ValidationError("Imports", "import path must not be empty")
        with self._lock:
            if path not in self.imports:
                self.imports.append(path)

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> Node:
        """Add a new node.

        Raises:
            EmptyIdentifierError: If the name is blank.
            NameConflictError: If the name is taken.
        """
        name = require_node_name(node.name)
        with self._lock:
            if name in self.nodes:
                raise NameConflictError(name, "node")
            node.name = name
            self.nodes[name] = node
        logger.debug(f"Added node {name!r}")
        return node

    def get_node(self, name: str) -> Node:
        """Get a node by name, or raise UnknownNodeError."""
        node = self.nodes.get(name)
        if node is None:
            raise UnknownNodeError(name)
        return node

    def rename_node(self, old: str, new: str) -> Node:
        """Rename a node and rewrite every edge that refers to it.

        Renaming a node to its current name changes nothing.

        Raises:
            EmptyIdentifierError: If the new name is blank.
            UnknownNodeError: If there is no node called ``old``.
            NameConflictError: If another node is called ``new``.
        """
        new = require_node_name(new)
        with self._lock:
            node = self.get_node(old)
            if new == old:
                return node
            if new in self.nodes:
                raise NameConflictError(new, "node")
            self._reindex_node(node, new)
        return node

    def _reindex_node(self, node: Node, new: str) -> None:
        # Caller holds the lock and has validated ``new``.
        old = node.name
        rewritten = 0
        for edge in self.edges.values():
            if edge.src == old:
                edge.src = new
            if edge.dst == old:
                edge.dst = new
            if new in (edge.src, edge.dst):
                rewritten += 1
        del self.nodes[old]
        node.name = new
        self.nodes[new] = node
        logger.info(f"Renamed node {old!r} to {new!r} ({rewritten} edge(s) rewritten)")

    def upsert_node(
        self,
        name: str,
        wait: bool,
        part_update: FormData | None = None,
        *,
        original: str | None = None,
        multiplicity: int | None = None,
        part: Part | None = None,
    ) -> Node:
        """Create or update a node from edited fields.

        The part update is applied to a copy of the part, which replaces the
        node's part only once every check has passed. When ``original`` is
        None a new node is created from ``part``; otherwise the node called
        ``original`` is updated, and renamed with edge rewriting if ``name``
        differs. Passing ``part`` for an existing node swaps its behaviour.

        Raises:
            EmptyIdentifierError: If the name is blank.
            UnknownNodeError: If ``original`` is not a node.
            NameConflictError: If ``name`` belongs to another node.
            ValidationError: If the multiplicity is not an integer or the part
                rejects the update.
        """
        name = require_node_name(name)
        with self._lock:
            if original is None:
                if part is None:
                    raise ValidationError("Part", "a new node needs a part")
                if name in self.nodes:
                    raise NameConflictError(name, "node")
                instances = 1 if multiplicity is None else coerce_multiplicity(multiplicity)
                candidate = part.model_copy(deep=True)
                candidate.update(part_update)
                node = Node(
                    name=name,
                    part=candidate,
                    multiplicity=instances,
                    wait=wait,
                )
                self.nodes[name] = node
                logger.debug(f"Created {node.part_type} node {name!r}")
                return node

            node = self.get_node(original)
            if name != original and name in self.nodes:
                raise NameConflictError(name, "node")

            instances = (
                node.multiplicity if multiplicity is None else coerce_multiplicity(multiplicity)
            )
            candidate = (part if part is not None else node.part).model_copy(deep=True)
            candidate.update(part_update)

            node.part = candidate
            node.wait = wait
            node.multiplicity = instances
            if name != original:
                self._reindex_node(node, name)
        return node

    def remove_node(self, name: str, cascade: bool = False) -> list[str]:
        """Remove a node.

        A node still connected by edges is only removed when ``cascade`` is
        set, in which case those edges go with it.

        Returns:
            Names of the edges removed along with the node.

        Raises:
            UnknownNodeError: If there is no such node.
            ReferentialError: If edges refer to the node and cascade is off.
        """
        with self._lock:
            self.get_node(name)
            connected = sorted(
                edge.name
                for edge in self.edges.values()
                if name in (edge.src, edge.dst)
            )
            if connected and not cascade:
                raise ReferentialError(
                    f"node {name!r} is still connected by channel(s): "
                    + ", ".join(connected)
                )
            for edge_name in connected:
                del self.edges[edge_name]
            del self.nodes[name]
        logger.info(f"Removed node {name!r} and {len(connected)} edge(s)")
        return connected

    def declared_channels(self, name: str) -> tuple[list[str], list[str]]:
        """The node's declared (read, written) channels that exist as edges."""
        with self._lock:
            node = self.get_node(name)
            read, written = node.part.channels()
            return (
                [c for c in read if c in self.edges],
                [c for c in written if c in self.edges],
            )

    # -------------------------------------------------------------------------
    # Edges
    # -------------------------------------------------------------------------

    def get_edge(self, name: str) -> Edge:
        """Get an edge by name, or raise UnknownEdgeError."""
        edge = self.edges.get(name)
        if edge is None:
            raise UnknownEdgeError(name)
        return edge

    def add_edge(self, edge: Edge) -> Edge:
        """Add a new edge.

        Raises:
            NameConflictError: If the name is taken.
            plus everything ``upsert_edge`` raises.
        """
        with self._lock:
            if edge.name in self.edges:
                raise NameConflictError(edge.name, "edge")
            return self.upsert_edge(edge.name, edge.src, edge.dst, edge.type, edge.cap)

    def upsert_edge(
        self,
        name: str,
        src: str,
        dst: str,
        type: str = "",
        cap: Any = 0,
        *,
        original: str | None = None,
    ) -> Edge:
        """Create, replace or rename an edge.

        Without ``original`` the edge called ``name`` is created or updated
        in place. With ``original`` that edge is updated and moved to
        ``name`` if it differs.

        Raises:
            InvalidIdentifierError: If ``name`` is not an identifier.
            UnknownNodeError: If ``src`` or ``dst`` is not a node.
            InvalidCapacityError: If ``cap`` is negative or not integral.
            UnknownEdgeError: If ``original`` is not an edge.
            NameConflictError: If a rename target is taken.
        """
        require_identifier(name, "Name")
        with self._lock:
            if src not in self.nodes:
                raise UnknownNodeError(src, "Src")
            if dst not in self.nodes:
                raise UnknownNodeError(dst, "Dst")
            capacity = coerce_capacity(cap)

            key = name if original is None else original
            edge = self.edges.get(key)
            if original is not None:
                if edge is None:
                    raise UnknownEdgeError(original)
                if name != original and name in self.edges:
                    raise NameConflictError(name, "edge")

            if edge is None:
                edge = Edge(name=name, src=src, dst=dst, type=type, cap=capacity)
                self.edges[name] = edge
                logger.debug(f"Created edge {name!r} {src!r} -> {dst!r}")
                return edge

            edge.src = src
            edge.dst = dst
            edge.type = type
            edge.cap = capacity
            if edge.name != name:
                del self.edges[edge.name]
                logger.info(f"Renamed edge {edge.name!r} to {name!r}")
                edge.name = name
                self.edges[name] = edge
        return edge

    def rename_edge(self, old: str, new: str) -> Edge:
        """Rename an edge, keeping its endpoints."""
        with self._lock:
            edge = self.get_edge(old)
            return self.upsert_edge(
                new, edge.src, edge.dst, edge.type, edge.cap, original=old
            )

    def remove_edge(self, name: str) -> Edge:
        """Remove an edge, or raise UnknownEdgeError."""
        with self._lock:
            edge = self.get_edge(name)
            del self.edges[name]
        logger.debug(f"Removed edge {name!r}")
        return edge

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def sorted_nodes(self) -> list[Node]:
        """Nodes ordered by name."""
        with self._lock:
            return [self.nodes[name] for name in sorted(self.nodes)]

    def sorted_edges(self) -> list[Edge]:
        """Edges ordered by name."""
        with self._lock:
            return [self.edges[name] for name in sorted(self.edges)]

    def edges_of(self, name: str) -> list[Edge]:
        """Edges touching a node, ordered by name."""
        return [e for e in self.sorted_edges() if name in (e.src, e.dst)]

    def as_digraph(self) -> nx.MultiDiGraph:
        """Build a networkx view with one graph edge per channel."""
        digraph = nx.MultiDiGraph()
        with self._lock:
            for node in self.sorted_nodes():
                digraph.add_node(
                    node.name,
                    part_type=node.part_type,
                    multiplicity=node.multiplicity,
                    wait=node.wait,
                )
            for edge in self.sorted_edges():
                digraph.add_edge(
                    edge.src, edge.dst, key=edge.name, type=edge.type, cap=edge.cap
                )
        return digraph
