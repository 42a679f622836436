"""
Custom exceptions for egograph
"""

from typing import Optional


class EgoGraphError(Exception):
    """Base exception for egograph"""
    pass

class InvalidReferenceError(EgoGraphError, ValueError):
    """An edge or query names a vertex that is not registered in the graph"""

    def __init__(self, vertex: int, message: Optional[str] = None):
        self.vertex = vertex
        super().__init__(message or f"Vertex {vertex} is not present in the graph")

class LoaderError(EgoGraphError):
    """Edge-list file could not be read or parsed"""

    def __init__(self, message: str, lineno: Optional[int] = None):
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)

class ConfigurationError(EgoGraphError):
    """Configuration-related errors"""
    pass
