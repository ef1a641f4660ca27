from .utils import calculate_emissions, summarize

__all__ = ["calculate_emissions", "summarize"]
