"""Operations over whole graphs."""

from .serialization import GraphSerializer

__all__ = ["GraphSerializer"]
