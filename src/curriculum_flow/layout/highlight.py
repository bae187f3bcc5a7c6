"""Hover highlighting: ancestors, descendants and co-requisite peers.

Each set is one networkx breadth-first reachability pass, so a hover
transition costs O(nodes + edges) and is cheap enough to run on every
pointer enter/leave.
"""

from __future__ import annotations

__all__ = ["HighlightState", "classify_node", "classify_nodes", "compute_highlight"]

from dataclasses import dataclass, field

import networkx as nx

from curriculum_flow.layout.graph import DependencyGraph
from curriculum_flow.parser.model import ElectiveBlock, NodeStatus


@dataclass(frozen=True)
class HighlightState:
    """Courses related to the focused course. Empty when nothing is focused."""

    focused: str | None = None
    ancestors: frozenset[str] = field(default_factory=frozenset)
    descendants: frozenset[str] = field(default_factory=frozenset)
    coreq_peers: frozenset[str] = field(default_factory=frozenset)
    block_siblings: frozenset[str] = field(default_factory=frozenset)
    active_blocks: tuple[str, ...] = ()

    def is_related_edge(self, source: str, target: str) -> bool:
        """Whether a prerequisite edge lies wholly upstream or downstream of focus."""
        if self.focused is None:
            return False
        downstream = {self.focused} | self.descendants
        upstream = {self.focused} | self.ancestors
        return (source in downstream and target in self.descendants) or (
            source in self.ancestors and target in upstream
        )

    def is_downstream_edge(self, source: str, target: str) -> bool:
        return source == self.focused or target in self.descendants


def compute_highlight(
    graph: DependencyGraph,
    focused: str | None,
    blocks: list[ElectiveBlock] | None = None,
) -> HighlightState:
    """Compute the highlight sets for ``focused``.

    A focused ID that is not in the graph (e.g. hidden by the view scope)
    behaves like no focus at all.
    """
    if focused is None or focused not in graph.courses:
        return HighlightState()

    prereqs = graph.prerequisite_digraph()
    coreqs = graph.corequisite_graph()

    descendants = nx.descendants(prereqs, focused)
    ancestors = nx.ancestors(prereqs, focused)
    peers = nx.node_connected_component(coreqs, focused) - {focused}

    siblings: set[str] = set()
    active: list[str] = []
    for block in blocks or []:
        if focused in block.course_ids:
            active.append(block.id)
            siblings.update(cid for cid in block.course_ids if cid in graph.courses)
    siblings.discard(focused)

    return HighlightState(
        focused=focused,
        ancestors=frozenset(ancestors),
        descendants=frozenset(descendants),
        coreq_peers=frozenset(peers),
        block_siblings=frozenset(siblings),
        active_blocks=tuple(active),
    )


def classify_node(course_id: str, state: HighlightState) -> NodeStatus:
    """Classify one course. The first matching rule wins."""
    if state.focused is None:
        return NodeStatus.NORMAL
    if course_id == state.focused:
        return NodeStatus.FOCUSED
    if course_id in state.block_siblings:
        return NodeStatus.BLOCK_SIBLING
    if course_id in state.coreq_peers:
        return NodeStatus.COREQ
    if course_id in state.ancestors:
        return NodeStatus.ANCESTOR
    if course_id in state.descendants:
        return NodeStatus.DESCENDANT
    return NodeStatus.FADED


def classify_nodes(graph: DependencyGraph, state: HighlightState) -> dict[str, NodeStatus]:
    return {cid: classify_node(cid, state) for cid in graph.courses}
