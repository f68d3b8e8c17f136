"""Core engine: coordinator thread plus two workers.

Separates concerns:
- Engine (coordinator): owns the scene and the object registry, spawns the
  workers, waits for Quit and joins them.
- Input worker: blocking key reads, translated to generic actions and fanned
  out to the game channel and the coordinator's quit-watch channel.
- Game worker: one cooperative loop that ticks game logic, repaints the
  screen at a capped frame rate and drains the game channel.

Workers talk only through channels. A worker that dies closes the quit-watch
channel with its exception, which the coordinator re-raises after the
terminal has been restored.
"""

from __future__ import annotations

import sys
import threading
import time
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from config import (
    FRAME_INTERVAL,
    GAME_HEIGHT,
    GAME_POSITION_X,
    GAME_POSITION_Y,
    GAME_WIDTH,
    HUD_HEIGHT,
    HUD_POSITION_X,
    HUD_POSITION_Y,
    HUD_WIDTH,
    INPUT_POLL_TIMEOUT,
    LOGIC_TICK_INTERVAL,
    TITLE_HEIGHT,
    TITLE_POSITION_X,
    TITLE_POSITION_Y,
    TITLE_WIDTH,
)
from core import actions
from core.actions import Action, GameData
from core.errors import ChannelClosed, EngineError
from core.scene import ObjectHandle, Scene
from core.sync import Channel, Guarded
from ui import frames
from ui.terminal import CursesTerminal, Key, KeyEvent

A = TypeVar("A")

_KEY_ACTIONS = {
    Key.ESC: actions.QUIT,
    Key.UP: actions.MOVE_UP,
    Key.DOWN: actions.MOVE_DOWN,
    Key.LEFT: actions.MOVE_LEFT,
    Key.RIGHT: actions.MOVE_RIGHT,
}


def action_for_key(event: KeyEvent) -> Optional[Action]:
    """Generic action for a key event, or None for keys the engine ignores."""
    if event.key is Key.CHAR and event.char is not None:
        return Action.command(event.char)
    return _KEY_ACTIONS.get(event.key)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine(Generic[A]):
    def __init__(
        self,
        scene: Scene[A],
        main_channel: Channel[GameData],
        terminal=None,
    ) -> None:
        self._objects: Guarded[List[ObjectHandle]] = Guarded([], "objects")
        self._scene: Guarded[Scene[A]] = Guarded(scene, "scene")
        self.main_channel = main_channel
        self.input_channel: Optional[Channel[GameData]] = None
        self.game_channel: Optional[Channel[GameData]] = None
        self.terminal = terminal if terminal is not None else CursesTerminal()

        self._input_thread: Optional[threading.Thread] = None
        self._game_thread: Optional[threading.Thread] = None
        self._failure: Optional[Tuple[str, BaseException]] = None
        self._failure_lock = threading.Lock()

        scene.bind_engine(self)

    @property
    def failure(self) -> Optional[Tuple[str, BaseException]]:
        """(worker name, exception) of the first worker that died, if any."""
        return self._failure

    def add_object(self, handle: ObjectHandle) -> None:
        with self._objects.lock() as objects:
            objects.append(handle)

    def object_handles(self) -> List[ObjectHandle]:
        with self._objects.lock() as objects:
            return list(objects)

    # ------------------------------------------------------------------
    def start(self) -> Tuple[Channel[GameData], Channel[GameData]]:
        """Open the terminal, spawn both workers, return (input, game) channels."""
        if self._game_thread is not None:
            raise RuntimeError("engine already started")
        # Coordinator -> input worker; nothing is sent on it yet
        self.input_channel = Channel("input")
        self.game_channel = Channel("game")

        self.terminal.open()

        self._input_thread = self._spawn(
            "input",
            self._input_worker,
            self.main_channel,
            self.game_channel,
            self.input_channel,
        )
        self._game_thread = self._spawn("game", self._game_worker, self.game_channel)
        return self.input_channel, self.game_channel

    def run(self) -> None:
        """Start, wait for Quit on the quit-watch channel, then join the workers."""
        self.start()
        try:
            while True:
                data = self.main_channel.recv()
                if data is not None and data.action.is_quit:
                    break
        except ChannelClosed as e:
            self._abort(e)
        self.join()
        if self._failure is not None:
            # A worker died after Quit was already on its way
            self._report(*self._failure)

    def join(self) -> None:
        for thread in (self._input_thread, self._game_thread):
            if thread is not None:
                thread.join()

    # ------------------------------------------------------------------
    def _spawn(self, name: str, target: Callable[..., None], *args) -> threading.Thread:
        # Daemon threads: after a crash elsewhere the input worker can stay
        # blocked in a key read and must not keep the interpreter alive.
        thread = threading.Thread(
            target=self._run_worker, args=(name, target) + args, name=name, daemon=True
        )
        thread.start()
        return thread

    def _run_worker(self, name: str, target: Callable[..., None], *args) -> None:
        try:
            target(*args)
        except BaseException as e:
            with self._failure_lock:
                if self._failure is None:
                    self._failure = (name, e)
            self.main_channel.close(cause=e)

    def _abort(self, closed: ChannelClosed) -> None:
        name, failure = self._failure or ("coordinator", closed)
        if self.game_channel is not None:
            self.game_channel.close(cause=failure)
        if self._game_thread is not None:
            # The game worker restores the terminal on its way out
            self._game_thread.join()
        self._report(name, failure)

    def _report(self, name: str, failure: BaseException) -> None:
        self.terminal.close()
        print(f"[Engine] {name} worker failed: {failure!r}", file=sys.stderr)
        if isinstance(failure, EngineError):
            raise failure
        raise EngineError(f"{name} worker crashed") from failure

    # ------------------------------------------------------------------
    def _input_worker(
        self,
        main_channel: Channel[GameData],
        game_channel: Channel[GameData],
        _input_channel: Channel[GameData],
    ) -> None:
        while True:
            action = action_for_key(self.terminal.read_key())
            if action is None:
                continue
            data = GameData(action)
            game_channel.send(data)
            main_channel.send(data)
            if action.is_quit:
                break

    # ------------------------------------------------------------------
    def _game_worker(self, game_channel: Channel[GameData]) -> None:
        screen = self.terminal
        try:
            with self._scene.lock() as scene:
                scene.load()
                title = scene.draw_title(TITLE_WIDTH - 2, TITLE_HEIGHT - 2)
            screen.clear()
            screen.write_at(TITLE_POSITION_X + 1, TITLE_POSITION_Y + 1, title)
            frames.draw_title_square(
                screen, TITLE_POSITION_X, TITLE_POSITION_Y, TITLE_WIDTH, TITLE_HEIGHT
            )
            self._game_loop(game_channel)
        finally:
            screen.close()

    def _game_loop(self, game_channel: Channel[GameData]) -> None:
        last_tick = time.perf_counter()
        last_frame = last_tick
        refresh_screen = True
        while True:
            elapsed = time.perf_counter() - last_tick
            if elapsed > LOGIC_TICK_INTERVAL:
                self._tick(elapsed)
                last_tick = time.perf_counter()

            if refresh_screen:
                self._render()
                refresh_screen = False
                last_frame = time.perf_counter()
            elif time.perf_counter() - last_frame > FRAME_INTERVAL:
                refresh_screen = True

            data = game_channel.recv(timeout=INPUT_POLL_TIMEOUT)
            if data is None:
                continue
            with self._scene.lock() as scene:
                scene.handle_input(data)
            if data.action.is_quit:
                break

    def _tick(self, elapsed: float) -> None:
        with self._objects.lock() as objects:
            for handle in objects:
                with handle.lock() as obj:
                    obj.update(elapsed)
        with self._scene.lock() as scene:
            scene.update(elapsed)

    def _render(self) -> None:
        screen = self.terminal
        screen.clear_below(HUD_POSITION_X, HUD_POSITION_Y)

        with self._scene.lock() as scene:
            hud = scene.draw_hud(HUD_WIDTH - 2, HUD_HEIGHT - 2)
        for i, text in enumerate(hud[: HUD_HEIGHT - 2]):
            screen.write_at(HUD_POSITION_X + 1, HUD_POSITION_Y + 1 + i, text)
        frames.draw_hud_square(screen, HUD_POSITION_X, HUD_POSITION_Y, HUD_WIDTH, HUD_HEIGHT)

        with self._objects.lock() as objects:
            for handle in objects:
                with handle.lock() as obj:
                    obj.draw(screen)
        frames.draw_game_square(screen, GAME_POSITION_X, GAME_POSITION_Y, GAME_WIDTH, GAME_HEIGHT)

        screen.move_cursor(1, 1)
        screen.flush()
