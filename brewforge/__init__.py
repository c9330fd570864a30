"""brewforge: Homebrew formula synthesis and tap publication.

Selects the release artifacts usable by each recipe, renders a Ruby
formula for them and commits it to a tap repository, directly or
through a pull request.
"""

__version__ = "0.1.0"
__description__ = "Homebrew formula synthesis and tap publication for release artifacts"

from brewforge.core.artifact_registry import ArtifactRegistry
from brewforge.core.context import PipelineContext
from brewforge.formula import publish_all, run_all

__all__ = ["ArtifactRegistry", "PipelineContext", "publish_all", "run_all", "__version__"]
