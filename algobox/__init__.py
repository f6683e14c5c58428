"""Algorithm solutions over strings, bits, arrays, grids, trees, schedules and puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "grids", "puzzles", "scheduling", "text", "trees"]