# tools/context.py
# current-context 를 조회하고 전환하는 MCP 도구입니다.

from kubeswitch.core.context import ContextManager
from kubeswitch.mcp_tools.k8s_mcp_instance import mcp_instance as mcp


@mcp.tool(description="Return the current context of the merged kubeconfig.")
def get_current_context() -> str:
    return ContextManager.from_environment().current_context()


@mcp.tool(description="Switch the current context and write it to the first kubeconfig file.")
def switch_context(context_name: str) -> str:
    """
    지정한 컨텍스트로 전환합니다.

    Args:
        context_name (str): 전환할 컨텍스트 이름.

    Returns:
        str: 결과 메시지.
    """
    manager = ContextManager.from_environment()
    if not manager.switch_to(context_name):
        return f"Already on context {context_name}"
    return f"Switched to context {context_name}"
