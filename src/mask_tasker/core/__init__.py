"""Core logic — data models, data-file client, scoring, formatting, and rendering.

Nothing here depends on MCP or any server framework.
"""
