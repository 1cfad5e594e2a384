"""McpClient tests (requests is mocked)"""

from unittest.mock import Mock

import pytest
import requests

from src.civic_mcp.client import McpClient, McpClientError


def make_response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = "Error"
    response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def client():
    c = McpClient(base_url="http://localhost:3000/", token="alice-token")
    c.session = Mock()
    return c


def test_call_tool_sends_envelope(client):
    client.session.request.return_value = make_response(
        payload={"content": [{"type": "text", "text": '✅ Todo added: "buy milk" (ID: 1)'}]}
    )

    text = client.call_tool("add_todo", {"text": "buy milk"})

    assert "buy milk" in text
    client.session.request.assert_called_once_with(
        "POST",
        "http://localhost:3000/mcp",
        timeout=10,
        json={"method": "tools/call", "params": {"name": "add_todo", "arguments": {"text": "buy milk"}}},
        headers={"Authorization": "Bearer alice-token"},
    )


def test_list_tools(client):
    client.session.request.return_value = make_response(payload={"tools": [{"name": "add_todo"}]})

    assert client.list_tools() == [{"name": "add_todo"}]


def test_error_envelope_raises(client):
    client.session.request.return_value = make_response(
        500, {"error": "Internal server error", "message": "Unknown tool: nope"}
    )

    with pytest.raises(McpClientError, match="Unknown tool: nope") as excinfo:
        client.call_tool("nope")
    assert excinfo.value.status_code == 500


def test_connection_error(client):
    client.session.request.side_effect = requests.exceptions.ConnectionError("refused")

    with pytest.raises(McpClientError, match="refused"):
        client.health()


def test_rpc_requires_token():
    c = McpClient(token=None)
    c.session = Mock()

    with pytest.raises(McpClientError) as excinfo:
        c.list_tools()
    assert excinfo.value.status_code == 401
    c.session.request.assert_not_called()
