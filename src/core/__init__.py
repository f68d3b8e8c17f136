"""Reusable terminal game engine.

Submodules are imported directly (``from core.engine import Engine``); this
package file stays empty so `ui` can depend on `core.errors` without pulling
in the engine.
"""
