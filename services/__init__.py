# Services package
from .blogpost_service import BlogPostService

__all__ = ["BlogPostService"]
