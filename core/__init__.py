"""core package initialization.

Making `core` an explicit package so imports like `import core.tilemap`
work reliably when running `main.py` from the project root.
"""

__all__ = ["app", "constants", "messages", "save", "scene", "tilemap", "tuning"]
