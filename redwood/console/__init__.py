"""
Console Package
Command-line interface for Redwood projects
"""
from redwood.console.command import Command
from redwood.console.console import Console

__all__ = [
    'Command',
    'Console',
]
