from pothub.api.routes import router

__all__ = ["router"]
