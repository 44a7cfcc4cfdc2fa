# core/kubeconfig.py
# 이 파일은 하나 이상의 kubeconfig 파일을 찾아 읽고, 하나의 설정으로 병합한 뒤
# 변경된 필드(current-context, 컨텍스트의 namespace)를 첫 번째 파일에 다시 쓰는
# 유틸리티 함수들을 포함합니다.
#
# 병합 규칙은 client-go 의 KUBECONFIG 처리 방식과 같습니다.
#   - current-context: 비어 있지 않은 첫 번째 값이 우선합니다.
#   - clusters / contexts / users: 이름 기준 합집합이며 먼저 나온 항목이 우선합니다.

import copy  # 원본 문서를 건드리지 않고 수정하기 위해 사용합니다.
import os  # 환경 변수와 경로 구분자를 위해 사용합니다.
from dataclasses import dataclass, field  # 병합된 설정을 표현하기 위해 사용합니다.
from pathlib import Path  # 파일 경로 조작을 위해 사용합니다.
from typing import Any, Dict, List, Optional, Sequence

import yaml  # YAML 파일 파싱을 위해 사용합니다.

from kubeswitch.core.errors import LoadError, PersistError
from kubeswitch.models.context import ContextEntry

# KUBECONFIG 환경 변수의 이름입니다.
KUBECONFIG_ENV = "KUBECONFIG"
# KUBECONFIG 가 없을 때 사용하는 기본 kubeconfig 경로입니다.
# kubernetes.config.KUBE_CONFIG_DEFAULT_LOCATION 은 import 시점의 KUBECONFIG 값을
# 그대로 담고 있으므로 여기서는 순수한 기본 경로만 따로 둡니다.
DEFAULT_KUBECONFIG_PATH = "~/.kube/config"

# 이름으로 병합되는 kubeconfig 섹션들입니다.
NAMED_SECTIONS = ("clusters", "contexts", "users")


@dataclass
class KubeConfig:
    """
    여러 kubeconfig 파일을 병합한 결과를 나타내는 데이터 클래스입니다.

    Attributes:
        current_context (str): 현재 컨텍스트 이름. 설정되지 않았으면 빈 문자열.
        contexts (Dict[str, ContextEntry]): 이름별 컨텍스트 항목.
        clusters (Dict[str, Dict[str, Any]]): 이름별 클러스터 원본 항목.
        users (Dict[str, Dict[str, Any]]): 이름별 사용자(authInfo) 원본 항목.
        sources (List[Path]): 병합에 사용된 파일 목록. 첫 번째 파일이 쓰기 대상입니다.
        documents (List[Dict[str, Any]]): 각 파일을 파싱한 원본 문서 (sources 와 같은 순서).
    """
    current_context: str = ""
    contexts: Dict[str, ContextEntry] = field(default_factory=dict)
    clusters: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    users: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    sources: List[Path] = field(default_factory=list)
    documents: List[Dict[str, Any]] = field(default_factory=list)
    # 마지막으로 읽거나 저장한 시점의 값입니다. 무엇이 바뀌었는지 판단할 때 사용합니다.
    saved_current_context: str = ""
    saved_namespaces: Dict[str, str] = field(default_factory=dict)

    def changed_contexts(self) -> List[str]:
        """저장 이후 namespace 가 바뀐 컨텍스트 이름들을 정렬해서 반환합니다."""
        return sorted(
            name
            for name, entry in self.contexts.items()
            if entry.namespace != self.saved_namespaces.get(name, "")
        )

    def is_modified(self) -> bool:
        """저장 이후 변경된 필드가 있는지 여부를 반환합니다."""
        return self.current_context != self.saved_current_context or bool(self.changed_contexts())

    def mark_saved(self) -> None:
        """현재 값을 저장된 상태로 기록합니다."""
        self.saved_current_context = self.current_context
        self.saved_namespaces = {name: entry.namespace for name, entry in self.contexts.items()}


def resolve_kubeconfig_paths(env_value: Optional[str] = None) -> List[Path]:
    """
    읽어야 할 kubeconfig 파일 경로 목록을 반환합니다.

    env_value 가 주어지지 않으면 KUBECONFIG 환경 변수를 사용합니다.
    값은 플랫폼의 경로 구분자(os.pathsep)로 나누며, 빈 항목과 중복 항목은 제거합니다.
    값이 비어 있으면 기본 경로(~/.kube/config) 하나만 반환합니다.

    Args:
        env_value (Optional[str]): KUBECONFIG 형식의 경로 목록 문자열.

    Returns:
        List[Path]: 순서가 유지된 kubeconfig 파일 경로 목록.
    """
    if env_value is None:
        env_value = os.environ.get(KUBECONFIG_ENV, "")

    paths: List[Path] = []
    for item in env_value.split(os.pathsep):
        item = item.strip()
        if not item:
            continue
        path = Path(os.path.expanduser(item))
        # 같은 파일을 두 번 병합하지 않도록 처음 나온 경로만 유지합니다.
        if path not in paths:
            paths.append(path)

    if not paths:
        paths.append(Path(os.path.expanduser(DEFAULT_KUBECONFIG_PATH)))
    return paths


def load_document(path: Path) -> Dict[str, Any]:
    """
    kubeconfig 파일 하나를 읽어 파싱된 문서를 반환합니다.
    빈 파일은 빈 문서로 취급합니다.

    Args:
        path (Path): 읽을 kubeconfig 파일 경로.

    Returns:
        Dict[str, Any]: 파싱된 kubeconfig 문서.

    Raises:
        LoadError: 파일이 없거나 읽을 수 없거나 kubeconfig 형식이 아닌 경우.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            # YAML 파서를 사용하여 파일 내용을 안전하게 로드합니다.
            document = yaml.safe_load(f)
    except FileNotFoundError as err:
        raise LoadError(f"kubeconfig file {path} does not exist") from err
    except OSError as err:
        raise LoadError(f"failed to read kubeconfig {path}: {err}") from err
    except yaml.YAMLError as err:
        raise LoadError(f"failed to parse kubeconfig {path}: {_yaml_error_summary(err)}") from err

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise LoadError(f"kubeconfig {path} is not a mapping")

    # 이름 기반 섹션의 구조만 확인합니다. 나머지 필드는 그대로 통과시킵니다.
    for section in NAMED_SECTIONS:
        _named_entries(document, section, path)
    return document


def _yaml_error_summary(err: yaml.YAMLError) -> str:
    """YAML 오류를 한 줄 메시지로 만듭니다. 위치 정보가 있으면 줄/열을 붙입니다."""
    problem = getattr(err, "problem", None)
    mark = getattr(err, "problem_mark", None)
    if problem and mark is not None:
        return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"
    return " ".join(str(err).split())


def _named_entries(document: Dict[str, Any], section: str, source: Path) -> List[Dict[str, Any]]:
    """문서의 이름 기반 섹션(clusters/contexts/users)을 검사하고 항목 목록을 반환합니다."""
    entries = document.get(section)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise LoadError(f"kubeconfig {source}: '{section}' must be a list")
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("name"):
            raise LoadError(f"kubeconfig {source}: every entry in '{section}' needs a name")
    return entries


def _context_entry(raw: Dict[str, Any], source: Path) -> ContextEntry:
    """원본 contexts 항목을 ContextEntry 로 변환합니다."""
    body = raw.get("context") or {}
    if not isinstance(body, dict):
        raise LoadError(f"kubeconfig {source}: context '{raw['name']}' must be a mapping")
    return ContextEntry(
        name=str(raw["name"]),
        cluster=str(body.get("cluster") or ""),
        user=str(body.get("user") or ""),
        namespace=str(body.get("namespace") or ""),
        source=source,
    )


def merge_current_context(existing: str, incoming: str) -> str:
    """current-context 병합 규칙: 비어 있지 않은 첫 번째 값이 우선합니다."""
    return existing or incoming


def merge_named_entries(existing: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
    """
    이름 기반 섹션 병합 규칙: 합집합이며 이름이 겹치면 먼저 나온 항목이 우선합니다.

    Args:
        existing (Dict[str, Any]): 지금까지 병합된 항목들.
        incoming (Dict[str, Any]): 다음 파일의 항목들.

    Returns:
        Dict[str, Any]: 병합된 새 딕셔너리. 입력은 변경하지 않습니다.
    """
    merged = dict(existing)
    for name, entry in incoming.items():
        merged.setdefault(name, entry)
    return merged


def merge_documents(acc: KubeConfig, document: Dict[str, Any], source: Path) -> KubeConfig:
    """
    병합 결과(acc)에 다음 파일의 문서를 합친 새 KubeConfig 를 반환합니다.
    acc 는 변경하지 않습니다.

    Args:
        acc (KubeConfig): 지금까지의 병합 결과.
        document (Dict[str, Any]): 다음 파일을 파싱한 문서.
        source (Path): 문서를 읽은 파일 경로.

    Returns:
        KubeConfig: 병합된 새 설정.
    """
    # 같은 파일 안에서도 중복 이름은 먼저 나온 항목을 사용합니다.
    incoming_contexts: Dict[str, ContextEntry] = {}
    for raw in _named_entries(document, "contexts", source):
        incoming_contexts.setdefault(str(raw["name"]), _context_entry(raw, source))

    incoming_clusters: Dict[str, Dict[str, Any]] = {}
    for raw in _named_entries(document, "clusters", source):
        incoming_clusters.setdefault(str(raw["name"]), raw)

    incoming_users: Dict[str, Dict[str, Any]] = {}
    for raw in _named_entries(document, "users", source):
        incoming_users.setdefault(str(raw["name"]), raw)

    merged = KubeConfig(
        current_context=merge_current_context(
            acc.current_context, str(document.get("current-context") or "")
        ),
        contexts=merge_named_entries(acc.contexts, incoming_contexts),
        clusters=merge_named_entries(acc.clusters, incoming_clusters),
        users=merge_named_entries(acc.users, incoming_users),
        sources=acc.sources + [source],
        documents=acc.documents + [document],
    )
    merged.mark_saved()
    return merged


def load_kubeconfig(paths: Optional[Sequence[Path]] = None, env_value: Optional[str] = None) -> KubeConfig:
    """
    kubeconfig 파일들을 읽어 하나의 KubeConfig 로 병합합니다.

    Args:
        paths (Optional[Sequence[Path]]): 읽을 파일 목록. 없으면 env_value/KUBECONFIG 로 결정합니다.
        env_value (Optional[str]): KUBECONFIG 형식의 경로 목록 문자열.

    Returns:
        KubeConfig: 병합된 설정.

    Raises:
        LoadError: 목록의 파일 중 하나라도 없거나 읽을 수 없거나 형식이 잘못된 경우.
    """
    if paths is None:
        paths = resolve_kubeconfig_paths(env_value)

    config = KubeConfig()
    for path in paths:
        path = Path(path)
        config = merge_documents(config, load_document(path), path)
    return config


def _raw_context(config: KubeConfig, entry: ContextEntry) -> Dict[str, Any]:
    """컨텍스트가 정의된 원본 파일에서 해당 항목을 복사해 옵니다."""
    for source, document in zip(config.sources, config.documents):
        if source != entry.source:
            continue
        for raw in document.get("contexts") or []:
            if str(raw.get("name")) == entry.name:
                return copy.deepcopy(raw)
    # 원본을 찾지 못하면 알고 있는 필드로 새 항목을 만듭니다.
    return {"context": {"cluster": entry.cluster, "user": entry.user}, "name": entry.name}


def _apply_namespace(raw: Dict[str, Any], namespace: str) -> None:
    """contexts 원본 항목에 namespace 를 기록합니다. 빈 값이면 필드를 제거합니다."""
    body = raw.get("context")
    if not isinstance(body, dict):
        body = raw["context"] = {}
    if namespace:
        body["namespace"] = namespace
    else:
        body.pop("namespace", None)


def render_document(config: KubeConfig) -> Dict[str, Any]:
    """
    첫 번째 파일에 쓸 문서를 만듭니다.

    첫 번째 파일의 원본 문서를 기준으로 바뀐 current-context 와 바뀐 컨텍스트의
    namespace 만 반영합니다. 다른 파일에 정의된 컨텍스트의 namespace 가 바뀐 경우에는
    그 항목 전체를 첫 번째 파일에 추가하며, 원래 파일은 건드리지 않습니다.

    Args:
        config (KubeConfig): 변경이 반영된 병합 설정.

    Returns:
        Dict[str, Any]: 첫 번째 파일에 그대로 쓸 수 있는 문서.
    """
    document = copy.deepcopy(config.documents[0]) if config.documents else {}
    if not document:
        document = {"apiVersion": "v1", "kind": "Config"}

    if config.current_context != config.saved_current_context:
        document["current-context"] = config.current_context

    for name in config.changed_contexts():
        entry = config.contexts[name]
        contexts = document.get("contexts")
        if not isinstance(contexts, list):
            contexts = document["contexts"] = []
        raw = next((item for item in contexts if str(item.get("name")) == name), None)
        if raw is None:
            raw = _raw_context(config, entry)
            contexts.append(raw)
        _apply_namespace(raw, entry.namespace)
    return document


def save_kubeconfig(config: KubeConfig) -> None:
    """
    변경된 필드를 첫 번째 kubeconfig 파일에 다시 씁니다.
    YAML 을 먼저 메모리에서 만든 뒤 파일을 열기 때문에 직렬화 오류로 파일이 비는 일은 없습니다.

    Args:
        config (KubeConfig): 변경이 반영된 병합 설정.

    Raises:
        PersistError: 쓸 대상 파일이 없거나, 직렬화 또는 파일 쓰기에 실패한 경우.
    """
    if not config.sources:
        raise PersistError("no kubeconfig file to write to")
    target = config.sources[0]

    document = render_document(config)
    try:
        rendered = yaml.safe_dump(document, default_flow_style=False, sort_keys=False)
    except yaml.YAMLError as err:
        raise PersistError(f"failed to serialize kubeconfig {target}: {err}") from err

    try:
        with open(target, "w", encoding="utf-8") as f:
            f.write(rendered)
    except OSError as err:
        raise PersistError(f"failed to write kubeconfig {target}: {err}") from err

    # 저장에 성공한 경우에만 메모리 상태를 갱신합니다.
    if config.documents:
        config.documents[0] = document
    else:
        config.documents.append(document)
    config.mark_saved()
