"""
API route modules.
"""

from .misc import router as misc_router
from .preview import router as preview_router

__all__ = [
    "misc_router",
    "preview_router",
]
