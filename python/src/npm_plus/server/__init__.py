"""
npm Plus MCP server: tool registration and result rendering.
"""
