"""Application use cases."""

from np_enhancer.application.use_cases.get_current_track import GetCurrentTrackUseCase

__all__ = ["GetCurrentTrackUseCase"]
