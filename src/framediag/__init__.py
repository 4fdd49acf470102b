"""framediag - resource diagnostics for the ImmichFrame kiosk."""

from framediag.diagnostics import get_resource_stats
from framediag.models import ProcessRow, ResourceSnapshot

__version__ = "0.1.0"

__all__ = ["ProcessRow", "ResourceSnapshot", "get_resource_stats", "__version__"]
