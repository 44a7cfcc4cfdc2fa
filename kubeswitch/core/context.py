# core/context.py
# 이 파일은 병합된 kubeconfig 의 current-context 를 조회하고 전환하는
# ContextManager 를 정의합니다.

from typing import Callable, List, Optional

from kubeswitch.core.errors import NotFoundError, PersistError
from kubeswitch.core.kubeconfig import KubeConfig, load_kubeconfig, save_kubeconfig
from kubeswitch.core.namespace import DEFAULT_NAMESPACE
from kubeswitch.models.context import ContextInfo

# 변경된 KubeConfig 를 저장하는 함수의 형태입니다.
Writer = Callable[[KubeConfig], None]


class ContextManager:
    """
    current-context 조회와 전환을 담당합니다.

    Args:
        kubeconfig (KubeConfig): 로드된 kubeconfig.
        writer (Writer): 변경을 저장할 함수. 기본값은 첫 번째 파일에 쓰는 save_kubeconfig.
    """

    def __init__(self, kubeconfig: KubeConfig, writer: Writer = save_kubeconfig):
        self.kubeconfig = kubeconfig
        self.writer = writer

    @classmethod
    def from_environment(cls, env_value: Optional[str] = None) -> "ContextManager":
        """KUBECONFIG (또는 env_value) 로 kubeconfig 를 읽어 매니저를 만듭니다."""
        return cls(load_kubeconfig(env_value=env_value))

    def current_context(self) -> str:
        """현재 컨텍스트 이름을 그대로 반환합니다. 설정되지 않았으면 빈 문자열입니다."""
        return self.kubeconfig.current_context

    def list_contexts(self) -> List[str]:
        """모든 컨텍스트 이름을 오름차순으로 정렬해서 반환합니다."""
        return sorted(self.kubeconfig.contexts)

    def context_infos(self) -> List[ContextInfo]:
        """목록 표시용 ContextInfo 리스트를 이름 순으로 반환합니다."""
        current = self.current_context()
        return [
            ContextInfo(
                name=name,
                cluster=entry.cluster,
                user=entry.user,
                namespace=entry.namespace or DEFAULT_NAMESPACE,
                current=(name == current),
            )
            for name, entry in sorted(self.kubeconfig.contexts.items())
        ]

    def validate(self, name: str) -> None:
        """
        컨텍스트가 존재하는지 확인합니다.

        Raises:
            NotFoundError: name 이 kubeconfig 에 없는 경우.
        """
        if name not in self.kubeconfig.contexts:
            raise NotFoundError(f"context {name!r} not found")

    def switch_to(self, name: str) -> bool:
        """
        지정한 컨텍스트로 전환하고 kubeconfig 에 저장합니다.

        Args:
            name (str): 전환할 컨텍스트 이름.

        Returns:
            bool: 실제로 전환했으면 True, 이미 해당 컨텍스트였으면 False.

        Raises:
            NotFoundError: 컨텍스트가 없는 경우.
            PersistError: 저장에 실패한 경우. 메모리의 변경은 되돌립니다.
        """
        self.validate(name)
        previous = self.kubeconfig.current_context
        if name == previous:
            return False

        self.kubeconfig.current_context = name
        try:
            self.writer(self.kubeconfig)
        except PersistError:
            self.kubeconfig.current_context = previous
            raise
        return True
