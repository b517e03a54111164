from .ports import FileSystemGateway
from .virtual_file_system import PathInput, VirtualFileSystem

__all__ = ["FileSystemGateway", "PathInput", "VirtualFileSystem"]
