"""Dependency graph construction from course prerequisite references.

References are resolved against course identifiers first and human-readable
codes second. Anything that does not resolve inside the current scope is
dropped: filtered views routinely reference courses that are not shown.
"""

from __future__ import annotations

__all__ = ["CourseEdge", "DependencyGraph", "build_dependency_graph", "scope_courses"]

import logging
from dataclasses import dataclass, field

import networkx as nx

from curriculum_flow.parser.model import Catalog, Course, EdgeKind

logger = logging.getLogger(__name__)

SCOPES = ("all", "abet")


@dataclass(frozen=True)
class CourseEdge:
    """A resolved dependency from ``source`` to ``target``."""

    source: str
    target: str
    kind: EdgeKind = EdgeKind.PREREQUISITE

    @property
    def id(self) -> str:
        return f"{self.source}->{self.target}"

    @property
    def key(self) -> tuple[str, str]:
        """Collision-free identity; ``id`` is for display only."""
        return (self.source, self.target)


@dataclass
class DependencyGraph:
    """Adjacency views over one scope of courses.

    ``forward`` maps a prerequisite to the courses that require it,
    ``reverse`` maps a course to its prerequisites and ``coreq`` is
    symmetric. ``edges`` holds prerequisite edges in routing order.
    """

    courses: dict[str, Course]
    forward: dict[str, list[str]] = field(default_factory=dict)
    reverse: dict[str, list[str]] = field(default_factory=dict)
    coreq: dict[str, list[str]] = field(default_factory=dict)
    edges: list[CourseEdge] = field(default_factory=list)
    coreq_edges: list[CourseEdge] = field(default_factory=list)
    dropped_refs: list[tuple[str, str]] = field(default_factory=list)

    def prerequisite_digraph(self) -> nx.DiGraph:
        G = nx.DiGraph()
        G.add_nodes_from(self.courses)
        G.add_edges_from((e.source, e.target) for e in self.edges)
        return G

    def corequisite_graph(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(self.courses)
        G.add_edges_from((e.source, e.target) for e in self.coreq_edges)
        return G


def normalize_ref(ref: str) -> str:
    """Normalize a reference or code for lookup (trimmed, case-folded)."""
    return ref.strip().casefold() if ref else ""


def scope_courses(catalog: Catalog, scope: str = "all") -> list[Course]:
    """Return the courses visible in a view scope, in catalog order."""
    if scope == "abet":
        return [c for c in catalog.courses.values() if c.is_abet]
    return list(catalog.courses.values())


class _RefResolver:
    """Resolve identifier-or-code strings to course identifiers."""

    def __init__(self, courses: list[Course]):
        self.ids = {c.id for c in courses}
        self.norm_ids: dict[str, str] = {}
        self.codes: dict[str, str] = {}
        for c in courses:
            self.norm_ids.setdefault(normalize_ref(c.id), c.id)
            code = normalize_ref(c.code)
            if not code:
                continue
            if code in self.codes:
                logger.debug(
                    "Code %s shared by %s and %s; keeping %s",
                    c.code, self.codes[code], c.id, self.codes[code],
                )
                continue
            self.codes[code] = c.id

    def resolve(self, ref: str) -> str | None:
        if ref in self.ids:
            return ref
        norm = normalize_ref(ref)
        if not norm:
            return None
        return self.norm_ids.get(norm) or self.codes.get(norm)


def build_dependency_graph(courses: list[Course]) -> DependencyGraph:
    """Build forward, reverse and co-requisite adjacency for ``courses``.

    Self-references and unresolved references are dropped and duplicate
    edges collapse to the first occurrence. Prerequisite edges are then
    stably sorted by (source column, target column) so lane allocation is
    reproducible for identical input.
    """
    by_id = {c.id: c for c in courses}
    graph = DependencyGraph(courses=by_id)
    resolver = _RefResolver(courses)

    for c in courses:
        graph.forward.setdefault(c.id, [])
        graph.reverse.setdefault(c.id, [])
        graph.coreq.setdefault(c.id, [])

    seen: set[tuple[str, str, EdgeKind]] = set()
    prereq_edges: list[CourseEdge] = []

    for c in courses:
        for ref in c.prerequisites:
            pid = resolver.resolve(ref)
            if pid is None:
                if normalize_ref(ref):
                    graph.dropped_refs.append((c.id, ref))
                    logger.debug("Dropping unresolved prerequisite %r of %s", ref, c.id)
                continue
            if pid == c.id:
                continue
            key = (pid, c.id, EdgeKind.PREREQUISITE)
            if key in seen:
                continue
            seen.add(key)
            graph.forward[pid].append(c.id)
            graph.reverse[c.id].append(pid)
            prereq_edges.append(CourseEdge(pid, c.id, EdgeKind.PREREQUISITE))

        for ref in c.corequisites:
            cid = resolver.resolve(ref)
            if cid is None:
                if normalize_ref(ref):
                    graph.dropped_refs.append((c.id, ref))
                    logger.debug("Dropping unresolved co-requisite %r of %s", ref, c.id)
                continue
            if cid == c.id:
                continue
            key = (c.id, cid, EdgeKind.COREQUISITE)
            if key in seen:
                continue
            seen.add(key)
            graph.coreq_edges.append(CourseEdge(c.id, cid, EdgeKind.COREQUISITE))
            if cid not in graph.coreq[c.id]:
                graph.coreq[c.id].append(cid)
            if c.id not in graph.coreq[cid]:
                graph.coreq[cid].append(c.id)

    graph.edges = sorted(
        prereq_edges,
        key=lambda e: (_col_key(by_id[e.source]), _col_key(by_id[e.target])),
    )
    return graph


def _col_key(course: Course) -> int:
    return course.col_index if course.col_index is not None else -1
