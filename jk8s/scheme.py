"""A registry mapping API versions and kinds to resource classes."""

from __future__ import annotations

from typing import Any, Mapping

from .access_strategy import WorkspaceAccessStrategy, WorkspaceAccessStrategyList
from .meta import GROUP_VERSION, GroupVersion
from .template import WorkspaceTemplate, WorkspaceTemplateList
from .workspace import Workspace, WorkspaceList


class NotRegisteredError(LookupError):
    """Raised when no class is registered for an API version and kind."""


class Scheme:
    """Known resource types, keyed by group, version and kind."""

    def __init__(self) -> None:
        self._types: dict[tuple[GroupVersion, str], type] = {}

    def add_known_type(self, group_version: GroupVersion | str, kind: str, cls: type) -> None:
        """Register ``cls`` for ``kind``; a different class under a taken kind is an error."""
        if isinstance(group_version, str):
            group_version = GroupVersion.parse(group_version)
        if not kind:
            raise ValueError("kind must not be empty")
        existing = self._types.setdefault((group_version, kind), cls)
        if existing is not cls:
            raise ValueError(
                f"double registration of different types for {group_version.api_version()}, "
                f"Kind={kind}: {existing.__name__} and {cls.__name__}"
            )

    def _lookup(self, api_version: str, kind: str) -> type | None:
        try:
            return self._types.get((GroupVersion.parse(api_version), kind))
        except ValueError:
            return None

    def _require(self, api_version: str, kind: str) -> type:
        cls = self._lookup(api_version, kind)
        if cls is None:
            raise NotRegisteredError(f"no kind {kind!r} is registered for version {api_version!r}")
        return cls

    def recognizes(self, api_version: str, kind: str) -> bool:
        """Tell whether a class is registered for ``api_version`` and ``kind``."""
        return self._lookup(api_version, kind) is not None

    def new(self, api_version: str, kind: str) -> Any:
        """Return a fresh instance of the registered class."""
        return self._require(api_version, kind)()

    def decode(self, data: Mapping[str, Any]) -> Any:
        """Build the registered object that the document ``data`` describes."""
        api_version = data.get("apiVersion")
        if not api_version:
            raise ValueError("Object 'apiVersion' is missing")
        kind = data.get("kind")
        if not kind:
            raise ValueError("Object 'Kind' is missing")
        return self._require(api_version, kind).from_dict(data)


def add_to_scheme(scheme: Scheme) -> Scheme:
    """Register every workspace resource type with ``scheme`` and return it."""
    for cls in (
        Workspace,
        WorkspaceList,
        WorkspaceAccessStrategy,
        WorkspaceAccessStrategyList,
        WorkspaceTemplate,
        WorkspaceTemplateList,
    ):
        scheme.add_known_type(GROUP_VERSION, cls.__name__, cls)
    return scheme