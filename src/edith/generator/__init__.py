"""Materializing a workspace graph as an editor workspace file."""

from edith.generator.descriptor import DescriptorGenerator
from edith.generator.graph import Graph, Target, WorkspaceDescriptor
from edith.generator.mapper import ProjectEditorMapper
from edith.generator.writer import WorkspaceWriter

__all__ = [
    "DescriptorGenerator",
    "Graph",
    "ProjectEditorMapper",
    "Target",
    "WorkspaceDescriptor",
    "WorkspaceWriter",
]
