from .request_stream import RequestStreamUseCase

__all__ = ["RequestStreamUseCase"]
