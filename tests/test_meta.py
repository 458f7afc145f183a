import pytest

from jk8s.meta import GROUP_VERSION, Condition, GroupVersion, ListMeta, ObjectMeta


def test_group_version_string():
    assert GROUP_VERSION.api_version() == "workspaces.jupyter.org/v1alpha1"
    assert str(GROUP_VERSION) == GROUP_VERSION.api_version()


def test_group_version_parse_round_trip():
    parsed = GroupVersion.parse(GROUP_VERSION.api_version())
    assert parsed == GROUP_VERSION
    assert parsed.group == "workspaces.jupyter.org"
    assert parsed.version == "v1alpha1"


def test_group_version_core_group():
    parsed = GroupVersion.parse("v1")
    assert parsed.group == ""
    assert parsed.api_version() == "v1"


def test_group_version_empty():
    assert GroupVersion.parse("") == GroupVersion("", "")


def test_group_version_too_many_parts():
    with pytest.raises(ValueError):
        GroupVersion.parse("a/b/c")


def test_object_meta_empty_serialises_to_nothing():
    assert ObjectMeta().to_dict() == {}


def test_object_meta_round_trip():
    meta = ObjectMeta(
        name="immutable-test-workspace",
        namespace="default",
        labels={"workspaces.jupyter.org/template": "immutable-template-1"},
        finalizers=["workspaces.jupyter.org/template-protection"],
        generation=3,
        creation_timestamp="2025-01-01T00:00:00Z",
    )
    data = meta.to_dict()
    assert data["labels"] == {"workspaces.jupyter.org/template": "immutable-template-1"}
    assert "annotations" not in data
    assert ObjectMeta.from_dict(data) == meta


def test_object_meta_from_none():
    assert ObjectMeta.from_dict(None) == ObjectMeta()


def test_list_meta_round_trip():
    meta = ListMeta(resource_version="42", continue_token="next", remaining_item_count=5)
    data = meta.to_dict()
    assert data["continue"] == "next"
    assert ListMeta.from_dict(data) == meta


def test_condition_round_trip():
    condition = Condition(
        type="Valid",
        status="False",
        reason="TemplateViolation",
        message="cpu exceeds bounds",
        last_transition_time="2025-01-01T00:00:00Z",
        observed_generation=2,
    )
    data = condition.to_dict()
    assert data["observedGeneration"] == 2
    assert data["reason"] == "TemplateViolation"
    assert Condition.from_dict(data) == condition


def test_condition_omits_zero_generation():
    data = Condition(type="Available", status="True").to_dict()
    assert "observedGeneration" not in data
    assert data["status"] == "True"


def test_condition_rejects_unknown_status():
    with pytest.raises(ValueError):
        Condition(type="Available", status="yes")


def test_condition_from_dict_requires_type():
    with pytest.raises(ValueError, match="type"):
        Condition.from_dict({"status": "True"})