"""Entry point kept minimal by delegating to Engine.

The engine runs the input and game workers on their own threads; this
thread only waits for Quit and then joins them.
"""

from core.actions import GameData
from core.engine import Engine
from core.errors import EngineError
from core.sync import Channel
from snake_game.scene import SnakeGameScene


def main():  # small wrapper for clarity / debuggers
    main_channel: Channel[GameData] = Channel("main")
    engine = Engine(SnakeGameScene(), main_channel)
    try:
        engine.run()
    except EngineError:
        # Already reported by the engine once the terminal was restored
        raise SystemExit(1)


if __name__ == "__main__":
    main()
