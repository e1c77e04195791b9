"""
SnackGPT - MCP recipe server backed by an OpenAI-compatible chat API
"""
__version__ = "1.0.0"
