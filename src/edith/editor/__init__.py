"""Assembly of editable workspaces.

The pipeline runs leaf-first: :class:`PluginResolver` names editable
plugins, :class:`HelperModuleBuilder` builds the rest, :class:`GraphAssembler`
merges everything and :class:`ProjectEditor` sequences the steps and hands
the graph to the generator.
"""

from edith.editor.assembler import GraphAssembler
from edith.editor.builder import HelperModuleBuilder
from edith.editor.orchestrator import EditState, ProjectEditor
from edith.editor.resolver import PluginResolver

__all__ = [
    "EditState",
    "GraphAssembler",
    "HelperModuleBuilder",
    "PluginResolver",
    "ProjectEditor",
]
