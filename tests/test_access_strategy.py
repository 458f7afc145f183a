import pytest

from jk8s.access_strategy import (
    AccessEnvTemplate,
    AccessResourceTemplate,
    WorkspaceAccessStrategy,
    WorkspaceAccessStrategyList,
    WorkspaceAccessStrategySpec,
    WorkspaceAccessStrategyStatus,
)
from jk8s.meta import Condition, ObjectMeta


def _strategy():
    return WorkspaceAccessStrategy(
        metadata=ObjectMeta(name="web", namespace="routes"),
        spec=WorkspaceAccessStrategySpec(
            display_name="Web access",
            access_resource_templates=[
                AccessResourceTemplate(
                    kind="IngressRoute",
                    api_version="traefik.io/v1alpha1",
                    name_prefix="route",
                    template="spec:\n  entryPoints: [web]\n",
                )
            ],
            merge_env=[AccessEnvTemplate("BASE_URL", "/workspaces/{{ .Workspace.Name }}")],
            access_url_template="https://example.com/workspace-path/",
        ),
        status=WorkspaceAccessStrategyStatus(
            conditions=[Condition(type="Available", status="True")]
        ),
    )


def test_strategy_round_trip():
    strategy = _strategy()
    assert WorkspaceAccessStrategy.from_dict(strategy.to_dict()) == strategy


def test_strategy_type_meta_and_fields():
    data = _strategy().to_dict()
    assert data["kind"] == "WorkspaceAccessStrategy"
    assert data["apiVersion"] == "workspaces.jupyter.org/v1alpha1"
    template = data["spec"]["accessResourceTemplates"][0]
    assert template["namePrefix"] == "route"
    assert template["apiVersion"] == "traefik.io/v1alpha1"
    assert data["spec"]["mergeEnv"][0]["valueTemplate"] == "/workspaces/{{ .Workspace.Name }}"


def test_spec_keeps_required_and_drops_optional():
    data = WorkspaceAccessStrategySpec(display_name="Plain").to_dict()
    assert data == {"displayName": "Plain", "accessResourceTemplates": []}


def test_spec_from_empty():
    spec = WorkspaceAccessStrategySpec.from_dict(None)
    assert spec.access_resource_templates == []
    assert spec.access_url_template == ""


def test_status_omitted_when_empty():
    data = WorkspaceAccessStrategy(spec=WorkspaceAccessStrategySpec("x")).to_dict()
    assert "status" not in data


def test_wrong_kind_rejected():
    with pytest.raises(ValueError):
        WorkspaceAccessStrategy.from_dict({"kind": "Workspace"})


def test_list_round_trip():
    strategies = WorkspaceAccessStrategyList(items=[_strategy()])
    data = strategies.to_dict()
    assert data["kind"] == "WorkspaceAccessStrategyList"
    assert WorkspaceAccessStrategyList.from_dict(data) == strategies