import os

import pytest
from click.testing import CliRunner

from conftest import FakeLister, FakePicker, read_yaml
from kubeswitch.cli import kubectl_ctx, kubectl_ns
from kubeswitch.core.errors import ClusterUnreachableError, SelectionCancelledError
from kubeswitch.core.kubeconfig import load_kubeconfig


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, command, args, kubeconfig, **obj):
    return runner.invoke(command, args, env={"KUBECONFIG": str(kubeconfig)}, obj=obj)


# kubectl-ctx


def test_ctx_switch_with_argument(runner, make_kubeconfig):
    path = make_kubeconfig("dev", {"dev": "", "prod": ""})

    result = invoke(runner, kubectl_ctx, ["prod"], path)

    assert result.exit_code == 0, result.output
    assert "Switched to context context=prod" in result.output
    assert read_yaml(path)["current-context"] == "prod"


def test_ctx_already_on_context(runner, make_kubeconfig):
    path = make_kubeconfig("dev", {"dev": "", "prod": ""})
    before = path.read_text()

    result = invoke(runner, kubectl_ctx, ["dev"], path)

    assert result.exit_code == 0
    assert "Already on context context=dev" in result.output
    assert path.read_text() == before


def test_ctx_unknown_context(runner, make_kubeconfig):
    path = make_kubeconfig("dev", {"dev": ""})

    result = invoke(runner, kubectl_ctx, ["nonexistent"], path)

    assert result.exit_code == 1
    assert "context 'nonexistent' not found" in result.output


def test_ctx_interactive_selection(runner, make_kubeconfig):
    path = make_kubeconfig("dev", {"prod": "", "dev": ""})
    picker = FakePicker("prod")

    result = invoke(runner, kubectl_ctx, [], path, picker=picker)

    assert result.exit_code == 0, result.output
    assert "Current context context=dev" in result.output
    assert picker.calls == [("Select context:", ["dev", "prod"], "dev")]
    assert read_yaml(path)["current-context"] == "prod"


def test_ctx_interactive_without_current_context(runner, make_kubeconfig):
    path = make_kubeconfig("", {"dev": ""})
    picker = FakePicker("dev")

    result = invoke(runner, kubectl_ctx, [], path, picker=picker)

    assert result.exit_code == 0, result.output
    assert "No current context set" in result.output
    assert picker.calls[0][2] is None


def test_ctx_selection_cancelled(runner, make_kubeconfig):
    path = make_kubeconfig("dev", {"dev": "", "prod": ""})
    before = path.read_text()

    result = invoke(runner, kubectl_ctx, [], path, picker=FakePicker(error=SelectionCancelledError("selection cancelled")))

    assert result.exit_code == 1
    assert "selection cancelled" in result.output
    assert path.read_text() == before


def test_ctx_no_contexts(runner, tmp_path):
    path = tmp_path / "config"
    path.write_text("apiVersion: v1\nkind: Config\n")

    result = invoke(runner, kubectl_ctx, [], path, picker=FakePicker("dev"))

    assert result.exit_code == 1
    assert "no contexts found in kubeconfig" in result.output


def test_ctx_missing_kubeconfig(runner, tmp_path):
    result = invoke(runner, kubectl_ctx, ["dev"], tmp_path / "nonexistent" / "config")

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_ctx_kubeconfig_option_with_multiple_files(runner, make_kubeconfig):
    first = make_kubeconfig("ctx1", {"ctx1": "ns1"}, name="first")
    second = make_kubeconfig("", {"ctx2": "ns2"}, name="second")
    second_before = second.read_text()

    result = runner.invoke(kubectl_ctx, ["--kubeconfig", os.pathsep.join([str(first), str(second)]), "ctx2"])

    assert result.exit_code == 0, result.output
    assert read_yaml(first)["current-context"] == "ctx2"
    assert second.read_text() == second_before


def test_ctx_rejects_empty_argument(runner, make_kubeconfig):
    result = invoke(runner, kubectl_ctx, [""], make_kubeconfig("dev", {"dev": ""}))

    assert result.exit_code == 2


def test_ctx_help(runner):
    result = runner.invoke(kubectl_ctx, ["--help"])

    assert result.exit_code == 0
    assert "kubectl-ctx my-context" in result.output


# kubectl-ns


def test_ns_switch_with_argument(runner, make_kubeconfig):
    path = make_kubeconfig("test-ctx", {"test-ctx": "initial-ns"})

    result = invoke(runner, kubectl_ns, ["target-ns"], path, lister=FakeLister())

    assert result.exit_code == 0, result.output
    assert "Switched to namespace namespace=target-ns context=test-ctx" in result.output
    assert load_kubeconfig([path]).contexts["test-ctx"].namespace == "target-ns"


def test_ns_already_on_namespace(runner, make_kubeconfig):
    path = make_kubeconfig("test-ctx", {"test-ctx": "my-namespace"})
    before = path.read_text()

    result = invoke(runner, kubectl_ns, ["my-namespace"], path, lister=FakeLister())

    assert result.exit_code == 0
    assert "Already on namespace namespace=my-namespace" in result.output
    assert path.read_text() == before


def test_ns_switch_from_default(runner, make_kubeconfig):
    path = make_kubeconfig("test-ctx", {"test-ctx": ""})

    result = invoke(runner, kubectl_ns, ["new-namespace"], path, lister=FakeLister())

    assert result.exit_code == 0, result.output
    assert read_yaml(path)["contexts"][0]["context"]["namespace"] == "new-namespace"


def test_ns_interactive_selection(runner, make_kubeconfig):
    path = make_kubeconfig("test-ctx", {"test-ctx": ""})
    lister = FakeLister(["kube-system", "default", "apps"])
    picker = FakePicker("apps")

    result = invoke(runner, kubectl_ns, [], path, lister=lister, picker=picker)

    assert result.exit_code == 0, result.output
    assert "Current namespace namespace=default" in result.output
    assert lister.calls == ["test-ctx"]
    assert picker.calls == [("Select namespace:", ["kube-system", "default", "apps"], "default")]
    assert read_yaml(path)["contexts"][0]["context"]["namespace"] == "apps"


def test_ns_cluster_unreachable_aborts(runner, make_kubeconfig):
    path = make_kubeconfig("test-ctx", {"test-ctx": "team"})
    before = path.read_text()
    picker = FakePicker("apps")

    result = invoke(
        runner, kubectl_ns, [], path, picker=picker, lister=FakeLister(error=ClusterUnreachableError("connection refused"))
    )

    assert result.exit_code == 1
    assert "connection refused" in result.output
    assert picker.calls == []
    assert path.read_text() == before


def test_ns_no_current_context(runner, make_kubeconfig):
    path = make_kubeconfig("", {"test-ctx": ""})

    result = invoke(runner, kubectl_ns, ["apps"], path, lister=FakeLister())

    assert result.exit_code == 1
    assert "no current context set" in result.output


def test_ns_current_context_not_in_config(runner, make_kubeconfig):
    path = make_kubeconfig("ghost", {"test-ctx": ""})

    result = invoke(runner, kubectl_ns, ["apps"], path, lister=FakeLister())

    assert result.exit_code == 1
    assert "current context 'ghost' not found in config" in result.output


def test_ns_invalid_kubeconfig(runner, tmp_path):
    result = invoke(runner, kubectl_ns, ["apps"], tmp_path / "nonexistent", lister=FakeLister())

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_ctx_parse_error_is_reported_on_one_line(runner, tmp_path):
    path = tmp_path / "config"
    path.write_text("contexts: [unclosed")

    result = invoke(runner, kubectl_ctx, ["dev"], path)

    assert result.exit_code == 1
    assert result.output.count("\n") == 1
    assert result.output.startswith("Error: failed to parse kubeconfig")
