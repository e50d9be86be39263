from .user import User
from .page import Page
from .block import Block
from .media import Media

__all__ = ["User", "Page", "Block", "Media"]
