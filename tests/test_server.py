import logging
from importlib.metadata import version
import sys
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from mcp import types

from gumloop_mcp import GumloopClient, RemoteResponse, ToolDispatcher, ToolRegistry, create_server
from gumloop_mcp.__main__ import main
from gumloop_mcp.logger import get_logger, setup_logging


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> ToolDispatcher:
    client = MagicMock(spec=GumloopClient)
    client.call = AsyncMock(return_value=RemoteResponse(kind="json", content_type="application/json", body=[1, 2]))
    return ToolDispatcher(registry, client)


def test_installed_mcp_exposes_request_table(dispatcher: ToolDispatcher) -> None:
    assert version("mcp").split(".")[0] == "1"
    server = create_server(dispatcher)
    assert {types.ListToolsRequest, types.CallToolRequest} <= set(server.request_handlers)


@pytest.mark.asyncio
async def test_server_lists_tools(dispatcher: ToolDispatcher) -> None:
    server = create_server(dispatcher)
    handler = server.request_handlers[types.ListToolsRequest]

    response = await handler(types.ListToolsRequest(method="tools/list"))

    assert isinstance(response.root, types.ListToolsResult)
    assert len(response.root.tools) == 9


@pytest.mark.asyncio
async def test_server_calls_tool(dispatcher: ToolDispatcher) -> None:
    server = create_server(dispatcher)
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="listSavedFlows", arguments={"user_id": "u1"}),
    )

    response = await handler(request)

    assert isinstance(response.root, types.CallToolResult)
    assert not response.root.isError


@pytest.mark.asyncio
async def test_server_reports_unknown_tool(dispatcher: ToolDispatcher) -> None:
    server = create_server(dispatcher)
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(method="tools/call", params=types.CallToolRequestParams(name="missingTool"))

    response = await handler(request)

    assert response.root.isError
    assert "missingTool" in response.root.content[0].text


def test_server_advertises_tools_capability(dispatcher: ToolDispatcher) -> None:
    server = create_server(dispatcher)
    options = server.create_initialization_options()
    assert options.server_name == "gumloop-mcp-server"
    assert options.capabilities.tools is not None


def test_main_exits_without_api_key(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("GUMLOOP_API_KEY", raising=False)
    monkeypatch.setattr("gumloop_mcp.config.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setattr("gumloop_mcp.__main__.setup_logging", lambda *args, **kwargs: None)
    serve_mock = AsyncMock()
    monkeypatch.setattr("gumloop_mcp.__main__.serve", serve_mock)

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "GUMLOOP_API_KEY" in captured.err
    assert captured.out == ""
    serve_mock.assert_not_called()


def test_main_runs_server_with_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUMLOOP_API_KEY", "secret")
    monkeypatch.setattr("gumloop_mcp.config.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setattr("gumloop_mcp.__main__.setup_logging", lambda *args, **kwargs: None)
    serve_mock = AsyncMock()
    monkeypatch.setattr("gumloop_mcp.__main__.serve", serve_mock)

    main()

    serve_mock.assert_awaited_once()
    assert serve_mock.await_args.args[0].api_key == "secret"


def test_main_exits_when_transport_fails(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("GUMLOOP_API_KEY", "secret")
    monkeypatch.setattr("gumloop_mcp.config.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setattr("gumloop_mcp.__main__.setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr("gumloop_mcp.__main__.serve", AsyncMock(side_effect=OSError("stdin closed")))

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    assert "stdin closed" in capsys.readouterr().err


def test_logging_goes_to_stderr() -> None:
    logger = get_logger()
    saved = logger.handlers[:]
    logger.handlers = [h for h in saved if not isinstance(h, logging.StreamHandler)]
    try:
        setup_logging(logging.DEBUG)
        stream_handlers: Any = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].stream is sys.stderr
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers = saved
        logger.setLevel(logging.NOTSET)


def test_get_logger_namespaces_module_names() -> None:
    assert get_logger("gumloop_mcp.tools.registry").name == "gumloop_mcp.tools.registry"
    assert get_logger("custom").name == "gumloop_mcp.custom"
    assert get_logger().name == "gumloop_mcp"
