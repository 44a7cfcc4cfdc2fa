# mcp_tools/k8s_mcp_instance.py
from mcp.server.fastmcp import FastMCP

# 리소스와 도구 모듈이 함께 사용하는 공유 MCP 인스턴스입니다.
mcp_instance = FastMCP("kubeswitch")
