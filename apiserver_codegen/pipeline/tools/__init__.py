"""
External generators and renderers.
"""

from __future__ import annotations

from .base import Renderer, TypeGenerator, run_command
from .gomplate import GomplateRenderer
from .jinja import JinjaRenderer
from .openapi_generator import OpenApiTypeGenerator

__all__ = [
    "TypeGenerator",
    "Renderer",
    "run_command",
    "OpenApiTypeGenerator",
    "GomplateRenderer",
    "JinjaRenderer",
]
