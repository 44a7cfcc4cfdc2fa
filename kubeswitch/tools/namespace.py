# tools/namespace.py
# 현재 컨텍스트의 네임스페이스를 조회하고 전환하는 MCP 도구입니다.

from typing import Dict, List

from kubeswitch.core.namespace import NamespaceManager
from kubeswitch.mcp_tools.k8s_mcp_instance import mcp_instance as mcp


@mcp.tool(description="Return the current context and its namespace.")
def get_current_namespace() -> Dict[str, str]:
    manager = NamespaceManager.from_environment()
    return {"context": manager.current_context(), "namespace": manager.current_namespace()}


@mcp.tool(description="List namespaces of the cluster behind the current context.")
def list_namespaces() -> List[str]:
    # 클러스터에 실제로 접속합니다. 실패하면 ClusterUnreachableError 가 그대로 전달됩니다.
    return NamespaceManager.from_environment().list_from_cluster()


@mcp.tool(description="Switch the namespace of the current context.")
def switch_namespace(namespace: str) -> str:
    """
    현재 컨텍스트의 네임스페이스를 바꿉니다.

    Args:
        namespace (str): 전환할 네임스페이스 이름.

    Returns:
        str: 결과 메시지.
    """
    manager = NamespaceManager.from_environment()
    if not manager.switch_to(namespace):
        return f"Already on namespace {namespace}"
    return f"Switched to namespace {namespace} in context {manager.current_context()}"
