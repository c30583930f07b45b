"""Base classes shared by every resource type.

Architecture:
    BaseCollection      discovers files across the cascade and merges them
    └── <resource>.Collection (pages, posts, widgets, layouts, partials)
    BaseModel           turns one file pointer into one or more records
    BaseWatcher         clears a resource's cache entry when its files change
    BaseCollectionView  exposes a collection to templates

Cascade layers are processed low -> high (system, base, theme). Records are
merged by id and the last one processed wins, so a theme file replaces a
site file which replaces a bundled default with the same id.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Pattern, Sequence, Union

from strata.core.exceptions import ExcludePatternError
from strata.core.paths import LayerSpec
from strata.core.utils.text import ParsedDocument, parse_frontmatter

from .registry import registered_name_for

if TYPE_CHECKING:
    from strata.core.context import SiteContext
    from strata.core.views import MasterView

logger = logging.getLogger(__name__)

FilePointer = Dict[str, str]
IdArg = Union[None, str, Sequence[str]]


class BaseCollection:
    """Cascade resolver for one resource type."""

    # Pin the registered name instead of deriving it from the module path.
    resource_name: Optional[str] = None
    # Every file in all child directories.
    glob: str = "**/*"

    def __init__(self, context: "SiteContext") -> None:
        self.context = context

    @property
    def registered_name(self) -> str:
        return registered_name_for(type(self))

    @property
    def namespace(self) -> str:
        return self.registered_name

    # =========================================================================
    # Cascade paths
    # =========================================================================

    def paths(self) -> List[LayerSpec]:
        """Cascade layer roots, low -> high precedence."""
        return self.context.paths.layers()

    def layer_dirs(self) -> List[Path]:
        """Namespaced directory of every layer, whether or not it exists."""
        return [layer.path / self.namespace for layer in self.paths()]

    @property
    def path(self) -> Path:
        """The site-level (base layer) directory for this resource."""
        return self.context.paths.base / self.namespace

    def has_valid_paths(self) -> bool:
        """True if the namespaced directory exists on at least one layer."""
        return any(d.is_dir() for d in self.layer_dirs())

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def config(self) -> Mapping[str, Any]:
        config = self.context.config.get(self.registered_name)
        if config is None:
            return {}
        if not isinstance(config, Mapping):
            logger.error(
                "'%s' config key in config.yaml is a %s; it needs to be a mapping (object).",
                self.registered_name,
                type(config).__name__,
            )
            return {}
        return config

    def exclude_patterns(self) -> List[Pattern[str]]:
        """Compile ``config['exclude']`` in declared order.

        Raises:
            ExcludePatternError: If a pattern is not a valid regex
        """
        raw = self.config.get("exclude") or []
        if isinstance(raw, str):
            raw = [raw]
        compiled: List[Pattern[str]] = []
        for node in raw:
            try:
                compiled.append(re.compile(str(node)))
            except re.error as exc:
                raise ExcludePatternError(str(node), resource=self.registered_name, reason=str(exc)) from exc
        return compiled

    # =========================================================================
    # Discovery
    # =========================================================================

    def valid_file(
        self,
        filepath: str,
        base_dir: Optional[Path] = None,
        patterns: Optional[Sequence[Pattern[str]]] = None,
    ) -> bool:
        """Return True if ``filepath`` (relative to ``base_dir``) should be processed.

        Rejects ids that leave the namespaced directory (absolute paths or
        ``..`` segments), missing paths, directories, hidden files (any
        segment starting with a dot) and paths matching one of the exclude
        patterns. ``patterns`` defaults to ``exclude_patterns()``.
        """
        relative = PurePosixPath(filepath)
        if base_dir is not None and (relative.is_absolute() or ".." in relative.parts):
            return False
        full = (base_dir / filepath) if base_dir is not None else Path(filepath)
        if not full.exists():
            return False
        if full.is_dir():
            return False
        if any(part.startswith(".") for part in relative.parts):
            return False
        if patterns is None:
            patterns = self.exclude_patterns()
        for regex in patterns:
            if regex.search(filepath):
                return False
        return True

    def _candidates(self, namespaced_path: Path, id: IdArg) -> List[str]:
        if id is not None:
            return [id] if isinstance(id, str) else [str(i) for i in id]
        return sorted(p.relative_to(namespaced_path).as_posix() for p in namespaced_path.glob(self.glob))

    def files(self, id: IdArg = None) -> List[FilePointer]:
        """Collect file pointers across all layers.

        Each id may appear once per layer; pointers are returned in layer
        order so later ones overwrite earlier ones when merged.

        Args:
            id: Optional id (or ids) to collect instead of globbing.
        """
        patterns = self.exclude_patterns()
        pointers: List[FilePointer] = []
        for layer in self.paths():
            namespaced_path = layer.path / self.namespace
            if not namespaced_path.is_dir():
                continue
            for candidate in self._candidates(namespaced_path, id):
                if not self.valid_file(candidate, namespaced_path, patterns):
                    continue
                pointers.append(
                    {
                        "id": candidate,
                        "realpath": str((namespaced_path / candidate).resolve()),
                        "resource": self.registered_name,
                    }
                )
        return pointers

    # =========================================================================
    # Generation
    # =========================================================================

    def generate(self, id: IdArg = None) -> Dict[str, Any]:
        """Generate the dictionary of records for this resource.

        With ``id``, only the files for that id (or ids) are processed.
        """
        resources = self.context.resources
        model = resources.model(self.registered_name) if resources.model_exists(self.registered_name) else None

        dictionary: Dict[str, Any] = {}
        warnings: List[str] = []
        for pointer in self.files(id):
            pointer["resource"] = self.registered_name
            if model is None:
                dictionary[pointer["id"]] = pointer
                continue
            try:
                result = model(self.context, pointer).generate()
            except (OSError, UnicodeDecodeError) as exc:
                warnings.append(f"{pointer['realpath']}: unreadable, skipped ({exc.__class__.__name__}: {exc})")
                continue
            dictionary.update(result)

        self.context.reporter.report(self.registered_name, dictionary, warnings)
        return dictionary

    def all(self) -> Dict[str, Any]:
        """Cached dictionary for this resource, regenerated on a miss."""
        cached = self.context.cache.get(self.registered_name)
        if cached is None:
            cached = self.generate()
            self.context.cache.set(self.registered_name, cached)
        return cached


class BaseModel:
    """Turns one file pointer into records.

    The default reads YAML front matter and yields a single record keyed by
    the pointer id. Subclasses may return several records per file.
    """

    def __init__(self, context: "SiteContext", pointer: FilePointer) -> None:
        self.context = context
        self.pointer = pointer
        self._parsed: Optional[ParsedDocument] = None

    @property
    def id(self) -> str:
        return self.pointer["id"]

    @property
    def realpath(self) -> Path:
        return Path(self.pointer["realpath"])

    def parse(self) -> ParsedDocument:
        if self._parsed is None:
            text = self.realpath.read_text(encoding="utf-8")
            try:
                self._parsed = parse_frontmatter(text)
            except ValueError as exc:
                logger.warning("%s: %s; ignoring front matter", self.realpath, exc)
                self._parsed = ParsedDocument(frontmatter={}, content=text, raw_frontmatter="")
        return self._parsed

    def content(self) -> str:
        return self.parse().content

    def data(self) -> Dict[str, Any]:
        data = dict(self.parse().frontmatter)
        data["id"] = self.id
        data["pointer"] = self.pointer
        return data

    def generate(self) -> Dict[str, Any]:
        return {self.id: self.data()}


class BaseWatcher:
    """Invalidate a collection's cache entry when its files change."""

    def __init__(self, collection: BaseCollection) -> None:
        self.collection = collection
        self.context = collection.context
        self.kind = collection.registered_name
        self.roots = tuple(d.resolve() for d in self.watch_roots())

    def watch_roots(self) -> List[Path]:
        # The site root first; theme and system edits invalidate too.
        roots = [self.collection.path]
        roots.extend(d for d in self.collection.layer_dirs() if d != self.collection.path)
        return roots

    def match(self, path: Union[str, Path]) -> bool:
        candidate = Path(path).expanduser().resolve()
        return any(candidate == root or root in candidate.parents for root in self.roots)

    def update(self, path: Union[str, Path]) -> None:
        logger.debug("%s changed; clearing %s", path, self.kind)
        self.context.cache.clear(self.kind)


class BaseCollectionView:
    """Template-facing wrapper around a collection."""

    # Operations templates may look up by name.
    exposed: tuple[str, ...] = ("all", "ids", "find_by_id")

    def __init__(self, collection: BaseCollection, master: Optional["MasterView"] = None) -> None:
        self.collection = collection
        self.context = collection.context
        self.master = master

    @property
    def config(self) -> Mapping[str, Any]:
        return self.collection.config

    def all(self) -> Dict[str, Any]:
        return self.collection.all()

    def ids(self) -> List[str]:
        return sorted(self.all().keys())

    def find_by_id(self, id: str) -> Optional[Any]:
        return self.all().get(id)

    def content_for(self, pointer: FilePointer) -> str:
        """Raw content of the file behind ``pointer`` (front matter stripped)."""
        resources = self.context.resources
        name = pointer.get("resource") or self.collection.registered_name
        if resources.model_exists(name):
            return resources.model(name)(self.context, pointer).content()
        return Path(pointer["realpath"]).read_text(encoding="utf-8")

    def resolve(self, name: str) -> Optional[Callable[..., Any]]:
        if name in self.exposed:
            return getattr(self, name)
        return None

    def __getitem__(self, name: str) -> Any:
        resolved = self.resolve(name)
        if resolved is None:
            raise KeyError(name)
        return resolved


__all__ = [
    "FilePointer",
    "BaseCollection",
    "BaseModel",
    "BaseWatcher",
    "BaseCollectionView",
]
