"""Object metadata, status conditions and the API group/version of workspace resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def api_version(self) -> str:
        """Return the ``apiVersion`` string, e.g. ``group/version`` or ``v1``."""
        return f"{self.group}/{self.version}" if self.group else self.version

    @classmethod
    def parse(cls, api_version: str) -> GroupVersion:
        """Parse an ``apiVersion`` string; a bare version belongs to the core group."""
        if not api_version or api_version == "/":
            return cls("", "")
        parts = api_version.split("/")
        if len(parts) == 1:
            return cls("", parts[0])
        if len(parts) == 2:
            return cls(parts[0], parts[1])
        raise ValueError(f"unexpected GroupVersion string: {api_version}")

    def __str__(self) -> str:
        return self.api_version()


GROUP_VERSION = GroupVersion("workspaces.jupyter.org", "v1alpha1")

CONDITION_STATUSES = ("True", "False", "Unknown")


def _compact(data: Mapping[str, Any]) -> dict[str, Any]:
    """Drop entries whose value is None or an empty string, list or mapping."""
    return {
        key: value
        for key, value in data.items()
        if value is not None and not (isinstance(value, (str, list, dict)) and not value)
    }


def _type_meta(kind: str) -> dict[str, str]:
    return {"apiVersion": GROUP_VERSION.api_version(), "kind": kind}


def _check_type_meta(data: Mapping[str, Any], kind: str) -> None:
    """Reject a document whose apiVersion or kind names another type."""
    api_version = data.get("apiVersion")
    if api_version and GroupVersion.parse(api_version) != GROUP_VERSION:
        raise ValueError(
            f"apiVersion {api_version!r} does not match {GROUP_VERSION.api_version()!r}"
        )
    found_kind = data.get("kind")
    if found_kind and found_kind != kind:
        raise ValueError(f"kind {found_kind!r} does not match {kind!r}")


@dataclass
class ObjectMeta:
    """Standard metadata carried by every stored object."""

    name: str = ""
    namespace: str = ""
    generate_name: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)
    owner_references: list[dict[str, Any]] = field(default_factory=list)
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    creation_timestamp: str | None = None
    deletion_timestamp: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = _compact(
            {
                "name": self.name,
                "namespace": self.namespace,
                "generateName": self.generate_name,
                "labels": dict(self.labels),
                "annotations": dict(self.annotations),
                "finalizers": list(self.finalizers),
                "ownerReferences": [dict(ref) for ref in self.owner_references],
                "uid": self.uid,
                "resourceVersion": self.resource_version,
                "creationTimestamp": self.creation_timestamp,
                "deletionTimestamp": self.deletion_timestamp,
            }
        )
        if self.generation:
            data["generation"] = self.generation
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ObjectMeta:
        data = data or {}
        return cls(
            name=data.get("name", ""),
            namespace=data.get("namespace", ""),
            generate_name=data.get("generateName", ""),
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
            finalizers=list(data.get("finalizers") or []),
            owner_references=[dict(ref) for ref in data.get("ownerReferences") or []],
            uid=data.get("uid", ""),
            resource_version=data.get("resourceVersion", ""),
            generation=int(data.get("generation", 0)),
            creation_timestamp=data.get("creationTimestamp"),
            deletion_timestamp=data.get("deletionTimestamp"),
        )


@dataclass
class ListMeta:
    """Metadata of a list of objects."""

    resource_version: str = ""
    continue_token: str = ""
    remaining_item_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(
            {
                "resourceVersion": self.resource_version,
                "continue": self.continue_token,
                "remainingItemCount": self.remaining_item_count,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ListMeta:
        data = data or {}
        remaining = data.get("remainingItemCount")
        return cls(
            resource_version=data.get("resourceVersion", ""),
            continue_token=data.get("continue", ""),
            remaining_item_count=None if remaining is None else int(remaining),
        )


@dataclass
class Condition:
    """One aspect of an object's observed state."""

    type: str
    status: str
    reason: str = ""
    message: str = ""
    last_transition_time: str = ""
    observed_generation: int = 0

    def __post_init__(self) -> None:
        if not self.type:
            raise ValueError("condition type must not be empty")
        if self.status not in CONDITION_STATUSES:
            raise ValueError(
                f"condition status {self.status!r} must be one of {', '.join(CONDITION_STATUSES)}"
            )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "status": self.status,
            "lastTransitionTime": self.last_transition_time,
            "reason": self.reason,
            "message": self.message,
        }
        if self.observed_generation:
            data["observedGeneration"] = self.observed_generation
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Condition:
        missing = [key for key in ("type", "status") if key not in data]
        if missing:
            raise ValueError(f"condition is missing {', '.join(missing)}")
        return cls(
            type=data["type"],
            status=data["status"],
            reason=data.get("reason", ""),
            message=data.get("message", ""),
            last_transition_time=data.get("lastTransitionTime", ""),
            observed_generation=int(data.get("observedGeneration", 0)),
        )


def _conditions_from(items: Any) -> list[Condition]:
    """Decode a condition list whose entries are keyed by type."""
    conditions = [Condition.from_dict(item) for item in items or []]
    seen: set[str] = set()
    for condition in conditions:
        if condition.type in seen:
            raise ValueError(f"duplicate condition type {condition.type!r}")
        seen.add(condition.type)
    return conditions