from .dots_state import BrailleDotsState

__all__ = ["BrailleDotsState"]
