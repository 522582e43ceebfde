from .syllabi import router as syllabi_router
from .todos import router as todos_router

__all__ = ["syllabi_router", "todos_router"]
