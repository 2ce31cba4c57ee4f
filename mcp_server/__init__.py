"""
MCP server exposing local LLM tools over JSON-RPC
"""
