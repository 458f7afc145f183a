# jk8s

Python data model for the `workspaces.jupyter.org/v1alpha1` API group, and
the command-line option parsing of the workspace operator and manager.

## What is inside

- `jk8s.meta`: `GroupVersion`, `ObjectMeta`, `ListMeta` and `Condition`.
  `GroupVersion.parse("group/version")` and `api_version()` convert to and
  from `apiVersion` strings; a bare version belongs to the core group.
  A `Condition` must have a non-empty `type` and a `status` of `True`,
  `False` or `Unknown`, otherwise `ValueError` is raised.
- `jk8s.workspace`: `Workspace`, `WorkspaceSpec`, `WorkspaceStatus`,
  `WorkspaceList` and their parts (`VolumeSpec`, `StorageSpec`,
  `ContainerConfig`, `AccessStrategyRef`, `AccessResourceStatus`).
  `WorkspaceSpec` accepts only `Running` or `Stopped` as `desired_status` and
  `Public` or `OwnerOnly` as `access_type` (or empty). `StorageSpec` defaults
  to a size of `10Gi` mounted at `/home/jovyan`.
  `WorkspaceStatus.get_condition(type)` returns the condition of that type or
  `None`.
- `jk8s.access_strategy`: `WorkspaceAccessStrategy` with its spec, status,
  list, `AccessResourceTemplate` and `AccessEnvTemplate`.
- `jk8s.template`: `WorkspaceTemplate`, `WorkspaceTemplateSpec`,
  `WorkspaceTemplateList`, `ResourceBounds`, `ResourceRange` and
  `StorageConfig`. `WorkspaceTemplateSpec` requires a display name of 1 to 100
  characters and a default image of 1 to 500 characters, allows a description
  of at most 500 characters and at most 50 allowed images.
- `jk8s.scheme`: a `Scheme` registry mapping API version and kind to classes;
  `add_to_scheme` registers every kind of this group. Looking up a kind that
  is not registered raises `NotRegisteredError`.
- `jk8s.cli`: `parse_gvk_watches`, `get_image_pull_policy`,
  `build_controller_options`, `parse_operator_args` and `parse_manager_args`,
  with the `GVKWatch`, `PullPolicy`, `ControllerOptions`, `OperatorOptions`
  and `ManagerOptions` they return.

Every resource type converts to and from plain dictionaries in the shape the
Kubernetes API uses, with `to_dict()` and `from_dict()`. Decoding a document
whose `apiVersion` or `kind` names another type raises `ValueError`.

## Reading a workspace

```python
from jk8s.scheme import Scheme, add_to_scheme

scheme = add_to_scheme(Scheme())

workspace = scheme.decode({
    "apiVersion": "workspaces.jupyter.org/v1alpha1",
    "kind": "Workspace",
    "metadata": {"name": "my-notebook", "namespace": "default"},
    "spec": {"displayName": "My Notebook", "templateRef": "production-notebook-template"},
})

print(workspace.spec.display_name)              # My Notebook
print(workspace.status.get_condition("Available"))  # None
```

## Options

Resources to watch are given as a comma-separated list of
`group/version/kind` entries:

```python
from jk8s.cli import build_controller_options, parse_gvk_watches

watches = parse_gvk_watches("traefik.io/v1alpha1/IngressRoute,apps/v1/Deployment")
options = build_controller_options("Always", "", False, "apps/v1/Deployment")
```

An entry without exactly three parts raises `ValueError`; an empty string
yields no watches.

`get_image_pull_policy` accepts `Always`, `Never` or `IfNotPresent` in any
letter case and falls back to `PullPolicy.IF_NOT_PRESENT` for anything else.

`parse_operator_args(argv)` and `parse_manager_args(argv)` read the flags of
the two entry points (for example `--leader-elect`, `--metrics-secure=false`,
`--watch-resources-gvk=...`) and return `OperatorOptions` and
`ManagerOptions` holding the parsed values and their defaults. Flags may be
written with one or two leading dashes.

## What this package does not do

It does not connect to a cluster and does not run anything: there is no
controller manager, no reconciliation of workspaces, no template validation
against a live cluster, no admission webhooks, no metrics or health-probe
servers, and no installed command. The option parsers only return the
settings; acting on them is left to the caller.