from .oklchTools import router as oklchTools_router

__all__ = ["oklchTools_router"]
