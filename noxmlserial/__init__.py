"""An in-memory node tree and an XML serializer for it."""

__version__ = "0.1.0"
__all__ = ["node", "xmlserial"]