#!/usr/bin/env python3
"""
Command line client for the Civic todo MCP server.

Examples:
    python scripts/mcp_client.py health
    python scripts/mcp_client.py --token "$MCP_TOKEN" tools
    python scripts/mcp_client.py --token "$MCP_TOKEN" add "Buy milk"
    python scripts/mcp_client.py --token "$MCP_TOKEN" list
    python scripts/mcp_client.py --token "$MCP_TOKEN" toggle 1760000000000
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.civic_mcp.client import McpClient, McpClientError
from src.civic_mcp.logger import setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Talk to a running Civic todo MCP server.")
    parser.add_argument("--url", default=os.getenv("MCP_URL", "http://localhost:3000"), help="Server URL")
    parser.add_argument("--token", default=os.getenv("MCP_TOKEN"), help="Bearer token (default: $MCP_TOKEN)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("health", help="GET /health")
    subparsers.add_parser("auth-config", help="GET /auth-config")
    subparsers.add_parser("tools", help="List available tools")
    subparsers.add_parser("info", help="Show the identity the server derived from the token")
    subparsers.add_parser("list", help="List todos")

    add_parser = subparsers.add_parser("add", help="Add a todo")
    add_parser.add_argument("text")

    toggle_parser = subparsers.add_parser("toggle", help="Toggle a todo's completion")
    toggle_parser.add_argument("todo_id")

    return parser.parse_args(argv)


def run(args: argparse.Namespace, client: McpClient) -> int:
    if args.command == "health":
        print(json.dumps(client.health(), ensure_ascii=False, indent=2))
    elif args.command == "auth-config":
        print(json.dumps(client.auth_config(), ensure_ascii=False, indent=2))
    elif args.command == "info":
        print(json.dumps(client.info(), ensure_ascii=False, indent=2))
    elif args.command == "tools":
        for tool in client.list_tools():
            print(f"{tool['name']}: {tool.get('description', '')}")
    elif args.command == "list":
        print(client.call_tool("list_todos"))
    elif args.command == "add":
        print(client.call_tool("add_todo", {"text": args.text}))
    elif args.command == "toggle":
        print(client.call_tool("toggle_todo", {"todoId": args.todo_id}))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logger(log_level="DEBUG" if args.verbose else "WARNING", log_file=None)
    client = McpClient(base_url=args.url, token=args.token)
    try:
        return run(args, client)
    except McpClientError as exc:
        status = f" ({exc.status_code})" if exc.status_code else ""
        print(f"Error{status}: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
