"""Widgets: independently configurable render fragments.

A widget named ``sidebar`` lives in ``widgets/sidebar/`` on any cascade
layer, one template per variant (``default.html``, ``compact.html``...).
Site config under ``widgets.<name>`` and a page's ``widgets.<name>`` front
matter pick the variant (``use``) and can switch the widget off
(``enable: false``).
"""
from __future__ import annotations

import functools
import logging
from pathlib import PurePosixPath
from typing import Any, Callable, Dict, List, Mapping, Optional

from jinja2 import TemplateError

from strata.core.utils.merge import cascade_merge, merge_widget_vars

from .base import BaseCollection, BaseCollectionView, BaseModel, BaseWatcher
from .registry import ResourceType

logger = logging.getLogger(__name__)

DEFAULT_VARIANT = "default"
# Keys of the ``widgets`` config section that configure the collection
# itself; no widget may use them as its name.
RESERVED_NAMES = frozenset({"names", "exclude"})


class Collection(BaseCollection):
    glob = "**/*.html"

    def widget_names(self) -> List[str]:
        """Configured ``names`` list, else every widget directory in the cascade.

        Reserved names are dropped with a warning.
        """
        configured = self.config.get("names")
        if isinstance(configured, (list, tuple)):
            candidates = [str(n) for n in configured]
        else:
            candidates = []
            for pointer in self.files():
                parts = PurePosixPath(pointer["id"]).parts
                if len(parts) > 1 and parts[0] not in candidates:
                    candidates.append(parts[0])
        names: List[str] = []
        for name in candidates:
            if name in RESERVED_NAMES:
                logger.warning("Widget name '%s' is reserved for widgets config; ignoring it", name)
                continue
            names.append(name)
        return names


class Model(BaseModel):
    pass


class Watcher(BaseWatcher):
    pass


def _is_disabled(value: Any) -> bool:
    return value is False or str(value) == "false"


class CollectionView(BaseCollectionView):
    """Resolve widget names to rendered fragments.

    Names listed by the collection render as widgets; any other name falls
    back to the generic collection-view operations.
    """

    def __init__(self, collection: Collection, master=None) -> None:
        super().__init__(collection, master)
        self._names: Optional[List[str]] = None

    @property
    def widget_names(self) -> List[str]:
        if self._names is None:
            self._names = self.collection.widget_names()
        return self._names

    def can_handle(self, name: str) -> bool:
        return name in self.widget_names

    def resolve(self, name: str) -> Optional[Callable[..., Any]]:
        if self.can_handle(name):
            return functools.partial(self.widget, name)
        return super().resolve(name)

    def __getitem__(self, name: str) -> Any:
        if self.can_handle(name):
            return self.widget(name)
        return super().__getitem__(name)

    def _page_config(self, name: str) -> Mapping[str, Any]:
        try:
            page_config = self.master.page_data["widgets"][name] or {}
        except (AttributeError, KeyError, IndexError, TypeError) as exc:
            logger.debug("No page-level config for widget '%s': %s", name, exc)
            return {}
        if not isinstance(page_config, Mapping):
            logger.debug("Ignoring non-mapping page config for widget '%s'", name)
            return {}
        return page_config

    def _site_config(self, name: str) -> Mapping[str, Any]:
        site_config = self.config.get(name) or {}
        if not isinstance(site_config, Mapping):
            logger.error("'widgets.%s' config is a %s; it needs to be a mapping.", name, type(site_config).__name__)
            return {}
        return site_config

    def widget(self, name: str) -> str:
        """Render widget ``name`` for the current page, or "" when it is off or missing."""
        widget_config = cascade_merge(self._site_config(name), self._page_config(name))
        if _is_disabled(widget_config.get("enable")):
            return ""

        variant = widget_config.get("use") or DEFAULT_VARIANT
        try:
            return self._render(name, variant, widget_config)
        except (TemplateError, OSError, UnicodeDecodeError) as exc:
            logger.error("Widget '%s' (%s) failed to render: %s", name, variant, exc)
            return ""

    def _render(self, name: str, variant: str, widget_config: Mapping[str, Any]) -> str:
        data = self.find_by_id(f"{name}/{variant}.html")
        if not data:
            logger.debug("Widget template %s/%s.html not found", name, variant)
            return ""

        page_data = self.master.page_data if self.master is not None else None
        view = self.context.master_view("", page_data=page_data)
        template_vars = dict(data)
        # Records without a model are the file pointer itself.
        pointer = template_vars.get("pointer", template_vars)
        variables: Dict[str, Any] = {
            "this_config": merge_widget_vars(template_vars, widget_config),
            "this_path": self.context.to_url(self.collection.namespace, name),
        }
        return view.render(self.content_for(pointer), variables)


RESOURCE = ResourceType.define(Collection, model=Model, watcher=Watcher, view=CollectionView)
