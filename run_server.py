"""
描述: MCP Server 启动脚本
主要功能:
    - 加载 .env
    - 使用 uvicorn 启动 HTTP 传输 (runcloud_mcp.main:app)
"""
import os
import sys

# 添加项目路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv
load_dotenv()

import uvicorn

if __name__ == "__main__":
    host = os.getenv("MCP_HOST", "0.0.0.0")
    port = int(os.getenv("MCP_PORT", "8081"))
    print(f"Starting RunCloud MCP Server on http://{host}:{port}", file=sys.stderr)
    print("Press Ctrl+C to stop", file=sys.stderr)
    uvicorn.run("runcloud_mcp.main:app", host=host, port=port, log_level="info")
