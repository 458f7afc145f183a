"""The WorkspaceAccessStrategy resource: how workspaces are reached."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .meta import (
    Condition,
    ListMeta,
    ObjectMeta,
    _check_type_meta,
    _compact,
    _conditions_from,
    _type_meta,
)

KIND = "WorkspaceAccessStrategy"
LIST_KIND = "WorkspaceAccessStrategyList"


@dataclass
class AccessResourceTemplate:
    """Template for a resource created for each workspace."""

    kind: str
    api_version: str
    name_prefix: str
    template: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "apiVersion": self.api_version,
            "namePrefix": self.name_prefix,
            "template": self.template,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessResourceTemplate:
        return cls(
            kind=data.get("kind", ""),
            api_version=data.get("apiVersion", ""),
            name_prefix=data.get("namePrefix", ""),
            template=data.get("template", ""),
        )


@dataclass
class AccessEnvTemplate:
    """Template for an environment variable of the workspace container."""

    name: str
    value_template: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "valueTemplate": self.value_template}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessEnvTemplate:
        return cls(name=data.get("name", ""), value_template=data.get("valueTemplate", ""))


@dataclass
class WorkspaceAccessStrategySpec:
    """Desired state of a WorkspaceAccessStrategy."""

    display_name: str = ""
    access_resource_templates: list[AccessResourceTemplate] = field(default_factory=list)
    merge_env: list[AccessEnvTemplate] = field(default_factory=list)
    access_url_template: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "displayName": self.display_name,
            "accessResourceTemplates": [t.to_dict() for t in self.access_resource_templates],
            **_compact(
                {
                    "mergeEnv": [e.to_dict() for e in self.merge_env],
                    "accessURLTemplate": self.access_url_template,
                }
            ),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WorkspaceAccessStrategySpec:
        data = data or {}
        return cls(
            display_name=data.get("displayName", ""),
            access_resource_templates=[
                AccessResourceTemplate.from_dict(t)
                for t in data.get("accessResourceTemplates") or []
            ],
            merge_env=[AccessEnvTemplate.from_dict(e) for e in data.get("mergeEnv") or []],
            access_url_template=data.get("accessURLTemplate", ""),
        )


@dataclass
class WorkspaceAccessStrategyStatus:
    """Observed state of a WorkspaceAccessStrategy."""

    conditions: list[Condition] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _compact({"conditions": [c.to_dict() for c in self.conditions]})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WorkspaceAccessStrategyStatus:
        return cls(conditions=_conditions_from((data or {}).get("conditions")))


@dataclass
class WorkspaceAccessStrategy:
    """A WorkspaceAccessStrategy resource."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkspaceAccessStrategySpec = field(default_factory=WorkspaceAccessStrategySpec)
    status: WorkspaceAccessStrategyStatus = field(default_factory=WorkspaceAccessStrategyStatus)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = _type_meta(KIND)
        metadata = self.metadata.to_dict()
        if metadata:
            data["metadata"] = metadata
        data["spec"] = self.spec.to_dict()
        status = self.status.to_dict()
        if status:
            data["status"] = status
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceAccessStrategy:
        _check_type_meta(data, KIND)
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=WorkspaceAccessStrategySpec.from_dict(data.get("spec")),
            status=WorkspaceAccessStrategyStatus.from_dict(data.get("status")),
        )


@dataclass
class WorkspaceAccessStrategyList:
    """A list of WorkspaceAccessStrategy resources."""

    items: list[WorkspaceAccessStrategy] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = _type_meta(LIST_KIND)
        metadata = self.metadata.to_dict()
        if metadata:
            data["metadata"] = metadata
        data["items"] = [item.to_dict() for item in self.items]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceAccessStrategyList:
        _check_type_meta(data, LIST_KIND)
        return cls(
            items=[WorkspaceAccessStrategy.from_dict(i) for i in data.get("items") or []],
            metadata=ListMeta.from_dict(data.get("metadata")),
        )