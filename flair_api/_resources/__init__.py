"""Per-type namespaces (``client.vents``, ``client.structures``, ...) over the generic CRUD."""

from .namespace import ReadingNamespace, ResourceNamespace

__all__ = ["ReadingNamespace", "ResourceNamespace"]
