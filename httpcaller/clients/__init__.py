from .base import BaseCaller
from .get import GetCaller
from .post import PostCaller

__all__ = ["BaseCaller", "GetCaller", "PostCaller"]
