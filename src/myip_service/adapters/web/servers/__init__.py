"""Static file serving."""

from .static_file_server import StaticFileServer, find_static_dir

__all__ = ["StaticFileServer", "find_static_dir"]
