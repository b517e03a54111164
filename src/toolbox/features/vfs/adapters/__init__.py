from .local import LocalFileSystemGateway

__all__ = ["LocalFileSystemGateway"]
