"""
npm Plus

Package research tools for AI assistants, backed by the public npm registry,
the npm download-counts API and Bundlephobia.
"""

__version__ = "1.0.0"
