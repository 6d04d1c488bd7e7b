"""edith - Editable workspaces for manifest-driven projects.

edith gathers the project manifests, shared helpers, templates and plugins
of a directory and generates a workspace in which they can be edited with
imports resolving against the edith library and any precompiled plugins.

Key modules:

- :mod:`edith.editor` - Plugin resolution, helper builds, graph assembly and the edit pipeline
- :mod:`edith.discovery` - Locating manifests, helper and template directories, bundled resources
- :mod:`edith.config` - ``Edith/Config.yaml`` schema and loading
- :mod:`edith.plugins` - Plugin manifests, loading and helper compilation
- :mod:`edith.generator` - Mapping to a target graph and writing ``.code-workspace`` files
"""

__version__ = "0.1.0"
