import pytest
from mcp.server.fastmcp.exceptions import ToolError

from npm_plus.server import mcp_server


@pytest.fixture
def patched_client(monkeypatch, client):
    monkeypatch.setattr(mcp_server, "get_npm_client", lambda: client)
    return client


async def test_dependency_tree_tool(patched_client, upstream):
    upstream.add("/tiny", json={"name": "tiny", "dist-tags": {"latest": "1.0.0"}})

    text = await mcp_server.dependency_tree("tiny")

    assert "(no dependencies)" in text


async def test_compare_tool_renders_sorted_table(patched_client, upstream):
    upstream.add("/downloads/point/last-week/a", json={"package": "a", "downloads": 1})
    upstream.add("/downloads/point/last-week/b", json={"package": "b", "downloads": 2})

    text = await mcp_server.compare_downloads(["a", "b"], "last-week")

    assert text.index("| b | 2 |") < text.index("| a | 1 |")


async def test_upstream_error_becomes_tool_error(patched_client, upstream):
    upstream.add("/downloads/point/last-month/nope", status_code=404, text="Not found")

    with pytest.raises(ToolError, match=r"API error \(404\): Not found"):
        await mcp_server.downloads("nope")


async def test_vulnerability_failure_keeps_operation_context(patched_client):
    with pytest.raises(ToolError, match="vulnerability check"):
        await mcp_server.vulnerabilities("missing")


async def test_tools_registered():
    names = {tool.name for tool in await mcp_server.mcp.list_tools()}
    assert names == {
        "search", "package_info", "downloads", "compare_downloads",
        "bundle_size", "vulnerabilities", "dependency_tree", "download_trends",
    }



@pytest.mark.parametrize("packages", [["only-one"], [f"pkg-{i}" for i in range(11)]])
async def test_compare_rejects_package_count_out_of_bounds(patched_client, upstream, packages):
    with pytest.raises(ToolError, match="validation error"):
        await mcp_server.mcp.call_tool("compare_downloads", {"packages": packages})

    assert upstream.requests == []


@pytest.mark.parametrize("size", [0, 51])
async def test_search_rejects_size_out_of_bounds(patched_client, upstream, size):
    with pytest.raises(ToolError, match="validation error"):
        await mcp_server.mcp.call_tool("search", {"query": "x", "size": size})

    assert upstream.requests == []


async def test_search_accepts_size_at_bounds(patched_client, upstream):
    upstream.add("/-/v1/search", json={"objects": []})

    await mcp_server.mcp.call_tool("search", {"query": "x", "size": 50})

    assert upstream.requests[0].url.params["size"] == "50"
