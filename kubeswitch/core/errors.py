# core/errors.py
# kubeswitch 전체에서 사용하는 예외 계층을 정의합니다.
# 모든 예외는 KubeSwitchError 를 상속하므로 CLI 나 MCP 서버는
# 이 기본 클래스 하나만 잡아서 사용자에게 한 줄 메시지로 보여줄 수 있습니다.


class KubeSwitchError(Exception):
    """kubeswitch 에서 발생하는 모든 오류의 기본 클래스입니다."""


class LoadError(KubeSwitchError):
    """kubeconfig 파일이 없거나, 읽을 수 없거나, 형식이 잘못된 경우."""


class NoContextError(KubeSwitchError):
    """current-context 가 필요한데 설정되어 있지 않은 경우."""


class NotFoundError(KubeSwitchError):
    """이름으로 지정한 컨텍스트가 kubeconfig 에 없는 경우."""


class NoContextsError(NotFoundError):
    """병합된 kubeconfig 에 컨텍스트가 하나도 없는 경우."""


class ClusterUnreachableError(KubeSwitchError):
    """클러스터에서 네임스페이스 목록을 가져오지 못한 경우 (네트워크/인증 오류)."""


class PersistError(KubeSwitchError):
    """변경된 kubeconfig 를 파일에 다시 쓰지 못한 경우."""


class SelectionCancelledError(KubeSwitchError):
    """대화형 선택이 사용자에 의해 취소된 경우."""
