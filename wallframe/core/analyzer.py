"""Layout analysis — resolves placements before any members are built."""

from __future__ import annotations

from wallframe.models import GenerationContext
from wallframe.core.layout import layout_wall


class WallAnalyzer:
    """Computes the shared wall layout and stores it on the context."""

    def analyze(self, context: GenerationContext) -> None:
        """Run all analysis passes and populate the context."""
        context.layout = layout_wall(context.wall)
