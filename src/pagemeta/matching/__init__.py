"""Path pattern matching for override rules."""

from .paths import FRONT_PAGE, candidate_paths, compile_pattern, matches

__all__ = ["FRONT_PAGE", "candidate_paths", "compile_pattern", "matches"]
