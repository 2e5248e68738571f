"""Link controller and search session."""

from .LinkController import LinkController
from .SearchSession import SearchSession

__all__ = ["LinkController", "SearchSession"]
