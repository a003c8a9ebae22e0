from .dispatcher import ToolDispatcher
from .app import SERVER_NAME, create_server, serve

__all__ = ["ToolDispatcher", "SERVER_NAME", "create_server", "serve"]
