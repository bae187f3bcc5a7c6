"""Catalog loading and the curriculum data model."""

from curriculum_flow.parser.catalog import dump_catalog, parse_catalog
from curriculum_flow.parser.model import Catalog, Course, ElectiveBlock

__all__ = ["Catalog", "Course", "ElectiveBlock", "dump_catalog", "parse_catalog"]
