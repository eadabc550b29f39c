from .container import Container, cleanup_resources, get_container

__all__ = [
    "Container",
    "cleanup_resources",
    "get_container",
]
