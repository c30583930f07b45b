"""Page rendering context.

A ``MasterView`` is the top-level rendering context for one page: it holds
the page's data and body, and renders raw template text with the site
config, the page and one collection view per registered resource in
scope (so templates can write ``{{ widgets.sidebar }}``).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from strata.core.utils.text import render_template_text

if TYPE_CHECKING:
    from strata.core.context import SiteContext


class MasterView:
    def __init__(
        self,
        context: "SiteContext",
        page_data: Optional[Mapping[str, Any]] = None,
        content: str = "",
    ) -> None:
        self.context = context
        self.page_data: Mapping[str, Any] = page_data if page_data is not None else {}
        self.content = content

    def scope(self) -> Dict[str, Any]:
        """Variables every template sees before per-render variables are applied."""
        scope: Dict[str, Any] = {
            name: self.context.collection_view(name, master=self)
            for name in self.context.resources.names()
        }
        scope.update(
            {
                "site": self.context.config,
                "page": self.page_data,
                "content": self.content,
            }
        )
        return scope

    def render(self, raw: str, variables: Optional[Mapping[str, Any]] = None) -> str:
        """Render ``raw`` template text; ``variables`` override the default scope."""
        scope = self.scope()
        scope.update(variables or {})
        return render_template_text(raw, scope, environment=self.context.environment)


__all__ = ["MasterView"]
