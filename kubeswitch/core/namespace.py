# core/namespace.py
# 이 파일은 현재 컨텍스트의 네임스페이스를 조회하고 전환하는
# NamespaceManager 를 정의합니다.

from typing import Callable, List, Optional, Protocol

from kubeswitch.core.cluster import ClusterNamespaceLister
from kubeswitch.core.errors import NoContextError, NotFoundError, PersistError
from kubeswitch.core.kubeconfig import KubeConfig, load_kubeconfig, save_kubeconfig

# 컨텍스트에 네임스페이스가 없을 때 사용하는 값입니다.
DEFAULT_NAMESPACE = "default"


class NamespaceLister(Protocol):
    """클러스터의 네임스페이스 목록을 조회하는 객체의 인터페이스입니다."""

    def list_namespaces(self, kubeconfig: KubeConfig, context_name: str) -> List[str]:
        ...


class NamespaceManager:
    """
    현재 컨텍스트의 네임스페이스 조회와 전환을 담당합니다.

    생성 시점에 current-context 가 설정되어 있고 실제로 존재하는지 확인합니다.

    Args:
        kubeconfig (KubeConfig): 로드된 kubeconfig.
        lister (Optional[NamespaceLister]): 클러스터 조회기. 없으면 ClusterNamespaceLister 를 사용합니다.
        writer (Callable[[KubeConfig], None]): 변경을 저장할 함수.

    Raises:
        NoContextError: current-context 가 비어 있는 경우.
        NotFoundError: current-context 가 contexts 에 없는 경우.
    """

    def __init__(
        self,
        kubeconfig: KubeConfig,
        lister: Optional[NamespaceLister] = None,
        writer: Callable[[KubeConfig], None] = save_kubeconfig,
    ):
        context_name = kubeconfig.current_context
        if not context_name:
            raise NoContextError("no current context set")
        if context_name not in kubeconfig.contexts:
            raise NotFoundError(f"current context {context_name!r} not found in config")

        if lister is None:
            lister = ClusterNamespaceLister()

        self.kubeconfig = kubeconfig
        self.lister = lister
        self.writer = writer
        self._context_name = context_name

    @classmethod
    def from_environment(
        cls, env_value: Optional[str] = None, lister: Optional[NamespaceLister] = None
    ) -> "NamespaceManager":
        """KUBECONFIG (또는 env_value) 로 kubeconfig 를 읽어 매니저를 만듭니다."""
        return cls(load_kubeconfig(env_value=env_value), lister=lister)

    def current_context(self) -> str:
        return self._context_name

    def current_namespace(self) -> str:
        """현재 컨텍스트의 네임스페이스를 반환합니다. 없으면 "default" 입니다."""
        entry = self.kubeconfig.contexts[self._context_name]
        return entry.namespace or DEFAULT_NAMESPACE

    def list_from_cluster(self) -> List[str]:
        """
        클러스터에서 네임스페이스 목록을 조회합니다. 정렬하지 않고 그대로 반환합니다.

        Raises:
            ClusterUnreachableError: 조회에 실패한 경우.
        """
        return list(self.lister.list_namespaces(self.kubeconfig, self._context_name))

    def switch_to(self, name: str) -> bool:
        """
        현재 컨텍스트의 네임스페이스를 바꾸고 kubeconfig 에 저장합니다.

        Args:
            name (str): 전환할 네임스페이스 이름.

        Returns:
            bool: 실제로 전환했으면 True, 이미 해당 네임스페이스였으면 False.

        Raises:
            PersistError: 저장에 실패한 경우. 메모리의 변경은 되돌립니다.
        """
        if name == self.current_namespace():
            return False

        entry = self.kubeconfig.contexts[self._context_name]
        previous = entry.namespace
        entry.namespace = name
        try:
            self.writer(self.kubeconfig)
        except PersistError:
            entry.namespace = previous
            raise
        return True
