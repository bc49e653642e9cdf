from .fallback import Strategy, first_result, first_value

__all__ = ["Strategy", "first_result", "first_value"]
