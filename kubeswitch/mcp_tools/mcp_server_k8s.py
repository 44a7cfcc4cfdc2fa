# mcp_tools/mcp_server_k8s.py
# kubeswitch 의 컨텍스트/네임스페이스 기능을 MCP 서버로 노출합니다.
# stdio 전송을 사용하므로 로그는 모두 stderr 로 보냅니다.

import asyncio
import importlib
import logging
from typing import List

from kubeswitch.core.log import build_cli_logger, fields
from kubeswitch.mcp_tools.k8s_mcp_instance import mcp_instance as mcp

# 리소스와 도구를 등록하는 모듈 목록입니다. import 하는 것만으로 등록됩니다.
MODULES_TO_LOAD = (
    "kubeswitch.resources.contexts",
    "kubeswitch.tools.context",
    "kubeswitch.tools.namespace",
)


def load_modules(log: logging.Logger) -> None:
    """등록 모듈들을 import 합니다. 하나라도 실패하면 예외를 그대로 올립니다."""
    for module_name in MODULES_TO_LOAD:
        log.debug("Importing module", extra=fields(module=module_name))
        importlib.import_module(module_name)


async def registered_tool_names() -> List[str]:
    """MCP 인스턴스에 등록된 도구 이름을 정렬해서 반환합니다."""
    tools = await mcp.list_tools()
    return sorted(tool.name for tool in tools)


def main() -> None:
    log = build_cli_logger(name="kubeswitch.mcp")
    load_modules(log)
    log.info("Registered tools", extra=fields(tools=",".join(asyncio.run(registered_tool_names()))))
    log.info("Starting kubeswitch MCP server", extra=fields(transport="stdio"))
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
