"""Command-line options of the operator and the manager, and the controller settings built from them."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

OPERATOR_LEADER_ELECTION_ID = "a446807b.jupyter.org"
MANAGER_LEADER_ELECTION_ID = "jupyter-k8s-controller"


@dataclass(frozen=True)
class GVKWatch:
    """A group, version and kind of resource to watch."""

    group: str
    version: str
    kind: str


class PullPolicy(str, Enum):
    """When the kubelet pulls a container image."""

    ALWAYS = "Always"
    NEVER = "Never"
    IF_NOT_PRESENT = "IfNotPresent"


@dataclass
class ControllerOptions:
    """Settings of the workspace controller."""

    application_images_pull_policy: PullPolicy = PullPolicy.IF_NOT_PRESENT
    application_images_registry: str = ""
    watch_traefik: bool = False
    resource_watches: list[GVKWatch] = field(default_factory=list)


@dataclass
class OperatorOptions:
    """Flags of the operator command."""

    metrics_bind_address: str = "0"
    health_probe_bind_address: str = ":8081"
    leader_elect: bool = False
    metrics_secure: bool = True
    webhook_cert_path: str = ""
    webhook_cert_name: str = "tls.crt"
    webhook_cert_key: str = "tls.key"
    metrics_cert_path: str = ""
    metrics_cert_name: str = "tls.crt"
    metrics_cert_key: str = "tls.key"
    enable_http2: bool = False
    application_images_pull_policy: str = ""
    application_images_registry: str = ""
    watch_traefik: bool = False
    watch_resources_gvk: str = ""


@dataclass
class ManagerOptions:
    """Flags of the manager command."""

    metrics_bind_address: str = ":8080"
    health_probe_bind_address: str = ":8081"
    leader_elect: bool = False
    application_images_pull_policy: str = ""
    application_images_registry: str = ""
    require_template: bool = False
    watch_traefik: bool = False
    watch_resources_gvk: str = ""


def parse_gvk_watches(gvk_list: str) -> list[GVKWatch]:
    """Parse ``group/version/kind,group/version/kind,...`` into watches."""
    if not gvk_list:
        return []
    watches = []
    for item in gvk_list.split(","):
        parts = item.split("/")
        if len(parts) != 3:
            raise ValueError(
                f"invalid GVK format: {item}. Expected format: group/version/kind"
            )
        watches.append(GVKWatch(*parts))
    return watches


_PULL_POLICIES = {
    "always": PullPolicy.ALWAYS,
    "never": PullPolicy.NEVER,
    "ifnotpresent": PullPolicy.IF_NOT_PRESENT,
}


def get_image_pull_policy(policy: str) -> PullPolicy:
    """Map a case-insensitive policy name to a pull policy; anything else is IfNotPresent."""
    return _PULL_POLICIES.get(policy.lower(), PullPolicy.IF_NOT_PRESENT)


def build_controller_options(
    pull_policy: str, registry: str, watch_traefik: bool, watch_resources_gvk: str
) -> ControllerOptions:
    """Build controller settings from raw flag values."""
    return ControllerOptions(
        application_images_pull_policy=get_image_pull_policy(pull_policy),
        application_images_registry=registry,
        watch_traefik=watch_traefik,
        resource_watches=parse_gvk_watches(watch_resources_gvk),
    )


_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _flag_bool(value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {value!r}")


class _FlagParser:
    """Builds a parser whose long flags take one or two leading dashes."""

    def __init__(self, prog: str) -> None:
        self.parser = argparse.ArgumentParser(prog=prog, allow_abbrev=False)

    def string(self, name: str, default: str, help_text: str) -> None:
        self.parser.add_argument(
            f"-{name}", f"--{name}", dest=name.replace("-", "_"), default=default, help=help_text
        )

    def boolean(self, name: str, default: bool, help_text: str) -> None:
        self.parser.add_argument(
            f"-{name}",
            f"--{name}",
            dest=name.replace("-", "_"),
            nargs="?",
            const=True,
            default=default,
            type=_flag_bool,
            metavar="BOOL",
            help=help_text,
        )


_PULL_POLICY_HELP = "Image pull policy for Application containers (Always, IfNotPresent, or Never)"
_REGISTRY_HELP = "Registry prefix for application images (e.g. example.com/my-registry)"
_LEADER_HELP = (
    "Enable leader election for controller manager. "
    "Enabling this will ensure there is only one active controller manager."
)
_TRAEFIK_HELP = "Watch traefik sub-resources (easy mode)"
_GVK_HELP = (
    "Comma-separated list of Group/Version/Kind to watch "
    "(format: group/version/kind,group/version/kind,...)"
)
_PROBE_HELP = "The address the probe endpoint binds to."


def _argv(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def parse_operator_args(argv: Sequence[str] | None = None) -> OperatorOptions:
    """Parse the operator's command line."""
    flags = _FlagParser("jk8s-operator")
    flags.string(
        "metrics-bind-address",
        "0",
        "The address the metrics endpoint binds to. "
        "Use :8443 for HTTPS or :8080 for HTTP, or leave as 0 to disable the metrics service.",
    )
    flags.string("health-probe-bind-address", ":8081", _PROBE_HELP)
    flags.boolean("leader-elect", False, _LEADER_HELP)
    flags.boolean(
        "metrics-secure",
        True,
        "If set, the metrics endpoint is served securely via HTTPS. "
        "Use --metrics-secure=false to use HTTP instead.",
    )
    flags.string("webhook-cert-path", "", "The directory that contains the webhook certificate.")
    flags.string("webhook-cert-name", "tls.crt", "The name of the webhook certificate file.")
    flags.string("webhook-cert-key", "tls.key", "The name of the webhook key file.")
    flags.string(
        "metrics-cert-path", "", "The directory that contains the metrics server certificate."
    )
    flags.string("metrics-cert-name", "tls.crt", "The name of the metrics server certificate file.")
    flags.string("metrics-cert-key", "tls.key", "The name of the metrics server key file.")
    flags.boolean(
        "enable-http2", False, "If set, HTTP/2 will be enabled for the metrics and webhook servers"
    )
    flags.string("application-images-pull-policy", "", _PULL_POLICY_HELP)
    flags.string("application-images-registry", "", _REGISTRY_HELP)
    flags.boolean("watch-traefik", False, _TRAEFIK_HELP)
    flags.string("watch-resources-gvk", "", _GVK_HELP)
    namespace = flags.parser.parse_args(_argv(argv))
    return OperatorOptions(**vars(namespace))


def parse_manager_args(argv: Sequence[str] | None = None) -> ManagerOptions:
    """Parse the manager's command line."""
    flags = _FlagParser("jk8s-manager")
    flags.string("metrics-bind-address", ":8080", "The address the metric endpoint binds to.")
    flags.string("health-probe-bind-address", ":8081", _PROBE_HELP)
    flags.boolean("leader-elect", False, _LEADER_HELP)
    flags.string("application-images-pull-policy", "", _PULL_POLICY_HELP)
    flags.string("application-images-registry", "", _REGISTRY_HELP)
    flags.boolean(
        "require-template", False, "Require all workspaces to reference a WorkspaceTemplate"
    )
    flags.boolean("watch-traefik", False, _TRAEFIK_HELP)
    flags.string("watch-resources-gvk", "", _GVK_HELP)
    namespace = flags.parser.parse_args(_argv(argv))
    return ManagerOptions(**vars(namespace))