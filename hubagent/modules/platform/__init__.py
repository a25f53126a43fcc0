"""
Platform Module - Black Box Interface

Purpose: Talk to the Hub platform on behalf of the agent
Interface: list_pending_commands(), send_command_reports()
Hidden: HTTP transport, authentication, endpoint paths

Can be replaced with any command source offering the same two calls.
"""

from .client import PlatformClient

__all__ = ["PlatformClient"]
