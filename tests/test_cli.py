import pytest

from jk8s.cli import (
    ControllerOptions,
    GVKWatch,
    ManagerOptions,
    OperatorOptions,
    PullPolicy,
    build_controller_options,
    get_image_pull_policy,
    parse_gvk_watches,
    parse_manager_args,
    parse_operator_args,
)


def test_parse_gvk_watches_empty():
    assert parse_gvk_watches("") == []


def test_parse_gvk_watches_single():
    assert parse_gvk_watches("traefik.io/v1alpha1/IngressRoute") == [
        GVKWatch("traefik.io", "v1alpha1", "IngressRoute")
    ]


def test_parse_gvk_watches_keeps_order():
    watches = parse_gvk_watches("g1/v1/K1,g2/v2/K2")
    assert [w.kind for w in watches] == ["K1", "K2"]
    assert watches[1] == GVKWatch("g2", "v2", "K2")


def test_parse_gvk_watches_allows_empty_core_group():
    assert parse_gvk_watches("/v1/Service") == [GVKWatch("", "v1", "Service")]


@pytest.mark.parametrize("bad", ["foo/bar", "a/b/c/d", "a/b/c,", "nothing"])
def test_parse_gvk_watches_rejects_bad_items(bad):
    with pytest.raises(ValueError, match="Expected format: group/version/kind"):
        parse_gvk_watches(bad)


def test_parse_gvk_watches_error_names_item():
    with pytest.raises(ValueError, match="invalid GVK format: foo/bar"):
        parse_gvk_watches("a/b/c,foo/bar")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Always", PullPolicy.ALWAYS),
        ("ALWAYS", PullPolicy.ALWAYS),
        ("never", PullPolicy.NEVER),
        ("IfNotPresent", PullPolicy.IF_NOT_PRESENT),
        ("", PullPolicy.IF_NOT_PRESENT),
        ("sometimes", PullPolicy.IF_NOT_PRESENT),
    ],
)
def test_get_image_pull_policy(text, expected):
    assert get_image_pull_policy(text) is expected


def test_pull_policy_values_round_trip():
    values = ["Always", "Never", "IfNotPresent"]
    assert [get_image_pull_policy(v).value for v in values] == values


def test_operator_defaults():
    assert parse_operator_args([]) == OperatorOptions()
    options = parse_operator_args([])
    assert options.metrics_bind_address == "0"
    assert options.health_probe_bind_address == ":8081"
    assert options.metrics_secure is True
    assert options.webhook_cert_name == "tls.crt"
    assert options.metrics_cert_key == "tls.key"


def test_operator_flags():
    options = parse_operator_args(
        [
            "--metrics-secure=false",
            "-leader-elect",
            "--enable-http2=true",
            "--webhook-cert-path",
            "/certs",
            "-application-images-pull-policy=Never",
            "--watch-resources-gvk",
            "g/v/K",
        ]
    )
    assert options.metrics_secure is False
    assert options.leader_elect is True
    assert options.enable_http2 is True
    assert options.webhook_cert_path == "/certs"
    assert options.application_images_pull_policy == "Never"
    assert options.watch_resources_gvk == "g/v/K"


def test_operator_rejects_bad_bool():
    with pytest.raises(SystemExit) as exc:
        parse_operator_args(["--metrics-secure=maybe"])
    assert exc.value.code == 2


def test_operator_rejects_unknown_flag():
    with pytest.raises(SystemExit) as exc:
        parse_operator_args(["--require-template"])
    assert exc.value.code == 2


def test_manager_defaults():
    options = parse_manager_args([])
    assert options == ManagerOptions()
    assert options.metrics_bind_address == ":8080"
    assert options.require_template is False


def test_manager_flags():
    options = parse_manager_args(
        ["--require-template", "--watch-traefik=1", "--application-images-registry=example.com/reg"]
    )
    assert options.require_template is True
    assert options.watch_traefik is True
    assert options.application_images_registry == "example.com/reg"


def test_manager_rejects_abbreviation():
    with pytest.raises(SystemExit):
        parse_manager_args(["--require"])


def test_build_controller_options():
    options = build_controller_options("never", "example.com/reg", True, "g/v/K")
    assert options == ControllerOptions(
        application_images_pull_policy=PullPolicy.NEVER,
        application_images_registry="example.com/reg",
        watch_traefik=True,
        resource_watches=[GVKWatch("g", "v", "K")],
    )


def test_build_controller_options_defaults():
    options = build_controller_options("", "", False, "")
    assert options == ControllerOptions()
    assert options.resource_watches == []


def test_build_controller_options_rejects_bad_gvk():
    with pytest.raises(ValueError, match="invalid GVK format"):
        build_controller_options("always", "", False, "bad")