"""The WorkspaceTemplate resource: reusable, bounded workspace defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .meta import ListMeta, ObjectMeta, _check_type_meta, _compact, _type_meta

KIND = "WorkspaceTemplate"
LIST_KIND = "WorkspaceTemplateList"

DEFAULT_STORAGE_SIZE = "10Gi"
MAX_DISPLAY_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_IMAGE_LENGTH = 500
MAX_ALLOWED_IMAGES = 50


@dataclass
class ResourceRange:
    """Minimum and maximum of a resource, as quantity strings."""

    min: str
    max: str

    def to_dict(self) -> dict[str, Any]:
        return {"min": self.min, "max": self.max}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceRange:
        missing = [key for key in ("min", "max") if key not in data]
        if missing:
            raise ValueError(f"resource range is missing {', '.join(missing)}")
        return cls(min=str(data["min"]), max=str(data["max"]))


@dataclass
class ResourceBounds:
    """Bounds for CPU, memory and GPU overrides."""

    cpu: ResourceRange | None = None
    memory: ResourceRange | None = None
    gpu: ResourceRange | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "cpu": self.cpu.to_dict() if self.cpu else None,
                "memory": self.memory.to_dict() if self.memory else None,
                "gpu": self.gpu.to_dict() if self.gpu else None,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceBounds:
        def _range(key: str) -> ResourceRange | None:
            value = data.get(key)
            return None if value is None else ResourceRange.from_dict(value)

        return cls(cpu=_range("cpu"), memory=_range("memory"), gpu=_range("gpu"))


@dataclass
class StorageConfig:
    """Primary storage settings, as quantity strings."""

    default_size: str = DEFAULT_STORAGE_SIZE
    min_size: str | None = None
    max_size: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {"defaultSize": self.default_size, "minSize": self.min_size, "maxSize": self.max_size}
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StorageConfig:
        min_size = data.get("minSize")
        max_size = data.get("maxSize")
        return cls(
            default_size=str(data.get("defaultSize") or DEFAULT_STORAGE_SIZE),
            min_size=None if min_size is None else str(min_size),
            max_size=None if max_size is None else str(max_size),
        )


@dataclass
class WorkspaceTemplateSpec:
    """Desired state of a WorkspaceTemplate."""

    display_name: str
    default_image: str
    description: str = ""
    allowed_images: list[str] = field(default_factory=list)
    default_resources: dict[str, Any] | None = None
    resource_bounds: ResourceBounds | None = None
    primary_storage: StorageConfig | None = None
    environment_variables: list[dict[str, Any]] = field(default_factory=list)
    allow_secondary_storages: bool | None = True
    default_node_selector: dict[str, str] = field(default_factory=dict)
    default_affinity: dict[str, Any] | None = None
    default_tolerations: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_length("displayName", self.display_name, 1, MAX_DISPLAY_NAME_LENGTH)
        _check_length("defaultImage", self.default_image, 1, MAX_IMAGE_LENGTH)
        _check_length("description", self.description, 0, MAX_DESCRIPTION_LENGTH)
        if len(self.allowed_images) > MAX_ALLOWED_IMAGES:
            raise ValueError(
                f"allowedImages: must have at most {MAX_ALLOWED_IMAGES} items"
            )

    def to_dict(self) -> dict[str, Any]:
        data = _compact(
            {
                "description": self.description,
                "allowedImages": list(self.allowed_images),
                "defaultResources": self.default_resources,
                "resourceBounds": (
                    self.resource_bounds.to_dict() if self.resource_bounds else None
                ),
                "primaryStorage": (
                    self.primary_storage.to_dict() if self.primary_storage else None
                ),
                "environmentVariables": [dict(e) for e in self.environment_variables],
                "allowSecondaryStorages": self.allow_secondary_storages,
                "defaultNodeSelector": dict(self.default_node_selector),
                "defaultAffinity": self.default_affinity,
                "defaultTolerations": [dict(t) for t in self.default_tolerations],
            }
        )
        if self.resource_bounds is not None and "resourceBounds" not in data:
            data["resourceBounds"] = {}
        return {"displayName": self.display_name, "defaultImage": self.default_image, **data}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> WorkspaceTemplateSpec:
        data = data or {}
        bounds = data.get("resourceBounds")
        storage = data.get("primaryStorage")
        return cls(
            display_name=data.get("displayName", ""),
            default_image=data.get("defaultImage", ""),
            description=data.get("description", ""),
            allowed_images=list(data.get("allowedImages") or []),
            default_resources=data.get("defaultResources"),
            resource_bounds=None if bounds is None else ResourceBounds.from_dict(bounds),
            primary_storage=None if storage is None else StorageConfig.from_dict(storage),
            environment_variables=[dict(e) for e in data.get("environmentVariables") or []],
            allow_secondary_storages=data.get("allowSecondaryStorages", True),
            default_node_selector=dict(data.get("defaultNodeSelector") or {}),
            default_affinity=data.get("defaultAffinity"),
            default_tolerations=[dict(t) for t in data.get("defaultTolerations") or []],
        )


def _check_length(name: str, value: str, minimum: int, maximum: int) -> None:
    if len(value) < minimum:
        raise ValueError(f"{name}: should be at least {minimum} chars long")
    if len(value) > maximum:
        raise ValueError(f"{name}: may not be more than {maximum} chars long")


@dataclass(kw_only=True)
class WorkspaceTemplate:
    """A cluster-wide WorkspaceTemplate resource."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: WorkspaceTemplateSpec

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = _type_meta(KIND)
        metadata = self.metadata.to_dict()
        if metadata:
            data["metadata"] = metadata
        data["spec"] = self.spec.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceTemplate:
        _check_type_meta(data, KIND)
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=WorkspaceTemplateSpec.from_dict(data.get("spec")),
        )


@dataclass
class WorkspaceTemplateList:
    """A list of WorkspaceTemplate resources."""

    items: list[WorkspaceTemplate] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = _type_meta(LIST_KIND)
        metadata = self.metadata.to_dict()
        if metadata:
            data["metadata"] = metadata
        data["items"] = [item.to_dict() for item in self.items]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkspaceTemplateList:
        _check_type_meta(data, LIST_KIND)
        return cls(
            items=[WorkspaceTemplate.from_dict(i) for i in data.get("items") or []],
            metadata=ListMeta.from_dict(data.get("metadata")),
        )