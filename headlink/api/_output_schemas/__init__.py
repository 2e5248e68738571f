"""Output schemas for API commands - enforces consistent output structure.

Importing this package registers every schema.
"""

from . import config, heading, link  # noqa: F401
from ._registry import get_output_schema, register_output_schema

__all__ = ["get_output_schema", "register_output_schema"]
