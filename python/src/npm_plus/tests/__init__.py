"""
npm Plus Tests

Unit tests for the package client, derived metrics, rendering and
configuration. Upstream HTTP is served by httpx.MockTransport.
"""
