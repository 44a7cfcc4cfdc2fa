# resources/contexts.py
# 이 파일은 병합된 kubeconfig 에서 사용 가능한 모든 컨텍스트 정보를
# 조회하는 MCP 리소스를 정의합니다.

import json  # 리소스 내용을 JSON 문자열로 만들기 위해 사용합니다.
from dataclasses import asdict

from kubeswitch.core.context import ContextManager
from kubeswitch.mcp_tools.k8s_mcp_instance import mcp_instance as mcp  # MCP 서버 인스턴스를 가져옵니다.


@mcp.resource(uri="k8s://kube-contexts", name="Kube Contexts", description="List every context in the merged kubeconfig.")
def list_kube_contexts() -> str:
    """
    KUBECONFIG (없으면 ~/.kube/config) 의 모든 컨텍스트를 읽어
    `ContextInfo` 목록을 JSON 문자열로 반환합니다.

    Returns:
        str: 각 컨텍스트의 이름, 클러스터, 사용자, 네임스페이스 및
             현재 활성 컨텍스트 여부를 담은 JSON 배열.
    """
    manager = ContextManager.from_environment()
    return json.dumps([asdict(info) for info in manager.context_infos()])
