"""
Shared fixtures for kubeswitch tests.
"""
import os
from pathlib import Path
from typing import Dict, List, Optional

import pytest
import yaml


def kubeconfig_document(current_context: str, contexts: Dict[str, str]) -> dict:
    """Build a kubeconfig document; contexts maps context name to namespace ("" for none)."""
    entries = []
    for name, namespace in contexts.items():
        body = {"cluster": "test-cluster", "user": "test-user"}
        if namespace:
            body["namespace"] = namespace
        entries.append({"context": body, "name": name})
    return {
        "apiVersion": "v1",
        "kind": "Config",
        "current-context": current_context,
        "clusters": [{"cluster": {"server": "https://localhost:6443"}, "name": "test-cluster"}],
        "contexts": entries,
        "users": [{"name": "test-user", "user": {"token": "test-token"}}],
    }


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.kube/config and KUBECONFIG."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("KUBECONFIG", raising=False)
    return home


@pytest.fixture
def make_kubeconfig(tmp_path):
    """Write a kubeconfig file and return its path."""

    def _make(current_context: str, contexts: Dict[str, str], name: str = "config", extra: Optional[dict] = None) -> Path:
        document = kubeconfig_document(current_context, contexts)
        document.update(extra or {})
        path = tmp_path / name
        path.write_text(yaml.safe_dump(document, sort_keys=False))
        return path

    return _make


@pytest.fixture
def kubeconfig_env(monkeypatch):
    """Point KUBECONFIG at one or more files."""

    def _set(*paths: Path) -> str:
        value = os.pathsep.join(str(path) for path in paths)
        monkeypatch.setenv("KUBECONFIG", value)
        return value

    return _set


def read_yaml(path: Path) -> dict:
    return yaml.safe_load(path.read_text())


class FakePicker:
    """Picker returning a scripted answer and recording what it was shown."""

    def __init__(self, answer: Optional[str] = None, error: Optional[Exception] = None):
        self.answer = answer
        self.error = error
        self.calls: List[tuple] = []

    def select(self, message, options, default=None):
        self.calls.append((message, list(options), default))
        if self.error is not None:
            raise self.error
        return self.answer


class FakeLister:
    """Namespace lister returning scripted names or raising a scripted error."""

    def __init__(self, namespaces: Optional[List[str]] = None, error: Optional[Exception] = None):
        self.namespaces = namespaces or []
        self.error = error
        self.calls: List[str] = []

    def list_namespaces(self, kubeconfig, context_name):
        self.calls.append(context_name)
        if self.error is not None:
            raise self.error
        return list(self.namespaces)
