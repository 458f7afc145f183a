"""The Workspace resource: desired state, observed state and lists."""

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

KIND = "Workspace"
LIST_KIND = "WorkspaceList"
DESIRED_STATUSES = ("Running", "Stopped")
ACCESS_TYPES = ("Public", "OwnerOnly")
DEFAULT_STORAGE_SIZE = "10Gi"
DEFAULT_MOUNT_PATH = "/home/jovyan"


@dataclass
class VolumeSpec:
    """A volume mounted from an existing persistent volume claim."""

    name: str
    persistent_volume_claim_name: str
    mount_path: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "persistentVolumeClaimName": self.persistent_volume_claim_name,
            "mountPath": self.mount_path,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VolumeSpec:
        return cls(
            data.get("name", ""), data.get("persistentVolumeClaimName", ""), data.get("mountPath", "")
        )


@dataclass
class ContainerConfig:
    """Command and arguments of the workspace container."""

    command: list[str] = field(default_factory=list)
    args: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _compact({"command": list(self.command), "args": list(self.args)})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ContainerConfig:
        return cls(list(data.get("command") or []), list(data.get("args") or []))


@dataclass
class StorageSpec:
    """Persistent storage of a workspace; sizes are resource quantity strings."""

    storage_class_name: str | None = None
    size: str = DEFAULT_STORAGE_SIZE
    mount_path: str = DEFAULT_MOUNT_PATH

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"storageClassName": self.storage_class_name, "size": self.size, "mountPath": self.mount_path}
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StorageSpec:
        return cls(
            data.get("storageClassName"),
            str(data.get("size") or DEFAULT_STORAGE_SIZE),
            data.get("mountPath") or DEFAULT_MOUNT_PATH,
        )


@dataclass
class AccessStrategyRef:
    """Reference to a WorkspaceAccessStrategy."""

    name: str
    namespace: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, **_compact({"namespace": self.namespace})}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessStrategyRef:
        return cls(data.get("name", ""), data.get("namespace", ""))


def _opt(value: Any) -> Any:
    return None if value is None else value.to_dict()


@dataclass
class WorkspaceSpec:
    """Desired state of a Workspace."""

    display_name: str = ""
    image: str = ""
    desired_status: str = ""
    access_type: str = ""
    resources: dict[str, Any] | None = None
    storage: StorageSpec | None = None
    volumes: list[VolumeSpec] = field(default_factory=list)
    container_config: ContainerConfig | None = None
    node_selector: dict[str, str] = field(default_factory=dict)
    affinity: dict[str, Any] | None = None
    tolerations: list[dict[str, Any]] = field(default_factory=list)
    lifecycle: dict[str, Any] | None = None
    access_strategy: AccessStrategyRef | None = None
    template_ref: str | None = None

    def __post_init__(self) -> None:
        for name, value, allowed in (
            ("desiredStatus", self.desired_status, DESIRED_STATUSES),
            ("accessType", self.access_type, ACCESS_TYPES),
        ):
            if value and value not in allowed:
                raise ValueError(f"{name} {value!r} must be one of {', '.join(allowed)}")

    def to_dict(self) -> dict[str, Any]:
        data = _compact(
            {
                "image": self.image,
                "desiredStatus": self.desired_status,
                "accessType": self.access_type,
                "resources": self.resources,
                "volumes": [volume.to_dict() for volume in self.volumes],
                "nodeSelector": dict(self.node_selector),
                "affinity": self.affinity,
                "tolerations": [dict(t) for t in self.tolerations],
                "lifecycle": self.lifecycle,
                "accessStrategy": _opt(self.access_strategy),
            }
        )
        for key, value in (("storage", self.storage), ("containerConfig", self.container_config)):
            if value is not None:
                data[key] = value.to_dict()
        if self.template_ref is not None:
            data["templateRef"] = self.template_ref
        return {"displayName": self.display_name, **data}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WorkspaceSpec:
        data = data or {}

        def sub(key: str, kind: type) -> Any:
            value = data.get(key)
            return None if value is None else kind.from_dict(value)

        return cls(
            display_name=data.get("displayName", ""),
            image=data.get("image", ""),
            desired_status=data.get("desiredStatus", ""),
            access_type=data.get("accessType", ""),
            resources=data.get("resources"),
            storage=sub("storage", StorageSpec),
            volumes=[VolumeSpec.from_dict(v) for v in data.get("volumes") or []],
            container_config=sub("containerConfig", ContainerConfig),
            node_selector=dict(data.get("nodeSelector") or {}),
            affinity=data.get("affinity"),
            tolerations=[dict(t) for t in data.get("tolerations") or []],
            lifecycle=data.get("lifecycle"),
            access_strategy=sub("accessStrategy", AccessStrategyRef),
            template_ref=data.get("templateRef"),
        )


@dataclass
class AccessResourceStatus:
    """A resource created from an access strategy template."""

    kind: str
    api_version: str
    name: str
    namespace: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "apiVersion": self.api_version,
            "name": self.name,
            "namespace": self.namespace,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessResourceStatus:
        return cls(
            data.get("kind", ""), data.get("apiVersion", ""), data.get("name", ""), data.get("namespace", "")
        )


@dataclass
class WorkspaceStatus:
    """Observed state of a Workspace."""

    deployment_name: str = ""
    service_name: str = ""
    access_url: str = ""
    access_resource_selector: str = ""
    access_resources: list[AccessResourceStatus] = field(default_factory=list)
    conditions: list[Condition] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "deploymentName": self.deployment_name,
                "serviceName": self.service_name,
                "accessURL": self.access_url,
                "accessResourceSelector": self.access_resource_selector,
                "accessResources": [r.to_dict() for r in self.access_resources],
                "conditions": [c.to_dict() for c in self.conditions],
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WorkspaceStatus:
        data = data or {}
        return cls(
            deployment_name=data.get("deploymentName", ""),
            service_name=data.get("serviceName", ""),
            access_url=data.get("accessURL", ""),
            access_resource_selector=data.get("accessResourceSelector", ""),
            access_resources=[AccessResourceStatus.from_dict(r) for r in data.get("accessResources") or []],
            conditions=_conditions_from(data.get("conditions")),
        )

    def get_condition(self, condition_type: str) -> Condition | None:
        """Return the condition of the given type, or None if there is none."""
        return next((c for c in self.conditions if c.type == condition_type), None)


@dataclass
class Workspace:
    """A Workspace resource."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkspaceSpec = field(default_factory=WorkspaceSpec)
    status: WorkspaceStatus = field(default_factory=WorkspaceStatus)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = _type_meta(KIND)
        data.update(_compact({"metadata": self.metadata.to_dict()}))
        data["spec"] = self.spec.to_dict()
        data.update(_compact({"status": self.status.to_dict()}))
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Workspace:
        _check_type_meta(data, KIND)
        return cls(
            ObjectMeta.from_dict(data.get("metadata")),
            WorkspaceSpec.from_dict(data.get("spec")),
            WorkspaceStatus.from_dict(data.get("status")),
        )


@dataclass
class WorkspaceList:
    """A list of Workspace resources."""

    items: list[Workspace] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = _type_meta(LIST_KIND)
        data.update(_compact({"metadata": self.metadata.to_dict()}))
        data["items"] = [item.to_dict() for item in self.items]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceList:
        _check_type_meta(data, LIST_KIND)
        return cls(
            [Workspace.from_dict(item) for item in data.get("items") or []],
            ListMeta.from_dict(data.get("metadata")),
        )