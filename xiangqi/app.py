"""The main window: menu screens, settings and the game view."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from xiangqi.chessboard import ChessBoard
from xiangqi.gameentity import GameEntity
from xiangqi.globaldata import AiLevel, ChessFlag, GlobalData, ModuleId, ViewId
from xiangqi.network import ChessInternet, ChessLocal
from xiangqi.utils import AppUtils

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "象棋"

log = logging.getLogger(__name__)

Size = Tuple[int, int]
Rect = Tuple[int, int, int, int]

# The start button of each mode screen and the game mode it begins.
_START_MODES = {
    ViewId.SINGLE: ModuleId.SINGLE,
    ViewId.LOCAL: ModuleId.LOCAL,
    ViewId.INTERNET: ModuleId.INTERNET,
}

_VIEW_TITLES = {
    ViewId.SINGLE: "单人模式",
    ViewId.LOCAL: "在线模式",
    ViewId.INTERNET: "在线模式",
    ViewId.RESULT: "结果展示区域",
}

_LEVEL_LABELS = (
    (AiLevel.EASY, "简单"),
    (AiLevel.NORMAL, "正常"),
    (AiLevel.MASTER, "大师"),
)

_PIECE_GLYPHS = {
    ChessFlag.RED: {
        "CHARIOT": "车", "KNIGHT": "马", "ELEPHANT": "相", "GUARD": "仕",
        "GENERAL": "帅", "CANNON": "炮", "PAWN": "兵",
    },
    ChessFlag.BLACK: {
        "CHARIOT": "车", "KNIGHT": "马", "ELEPHANT": "象", "GUARD": "士",
        "GENERAL": "将", "CANNON": "炮", "PAWN": "卒",
    },
}

_FONT_NAMES = "notosanscjksc,notosanscjk,microsoftyahei,simhei,wenquanyimicrohei,pingfangsc"


class Navigator:
    """Which screen is shown, the chosen mode, window mode and AI level."""

    def __init__(
        self,
        game: Optional[GameEntity] = None,
        state: Optional[GlobalData] = None,
        screen_size: Optional[Size] = None,
    ) -> None:
        self.game = game if game is not None else GameEntity()
        self.state = state if state is not None else GlobalData.instance()
        self.screen_size: Size = screen_size or WINDOW_SIZE
        self.mode = ModuleId.NONE
        self.fullscreen = False
        self.ai_level = AiLevel.EASY
        self.view = ViewId.INIT
        self.state.view_id = self.view

    @property
    def window_size(self) -> Size:
        """Size of the window in the current show mode."""
        return self.screen_size if self.fullscreen else WINDOW_SIZE

    def show(self, view: int) -> ViewId:
        """Switch to ``view`` and return it."""
        self.view = ViewId(view)
        self.state.view_id = self.view
        return self.view

    def start_game(self, mode: int) -> ChessBoard:
        """Enter the game screen in ``mode`` and return the freshly laid-out board."""
        mode = ModuleId(mode)
        if mode is ModuleId.NONE:
            raise ValueError("a game needs a mode other than NONE")
        self.mode = mode
        self.state.module_id = mode
        self.show(ViewId.GAME)
        return self.game.flush_game(self.view, mode)

    def back_to_init(self) -> ViewId:
        """Return to the start screen."""
        return self.show(ViewId.INIT)

    def toggle_show_mode(self) -> Size:
        """Switch between full screen and window; return the new window size."""
        self.fullscreen = not self.fullscreen
        return self.window_size

    def select_ai_level(self, level: Optional[int]) -> AiLevel:
        """Set the AI level; ``None`` means the choice was cancelled and keeps it."""
        if level is not None:
            self.ai_level = AiLevel(level)
        return self.ai_level


def _ask_path(directory: bool) -> Optional[str]:
    """Ask for a file or directory with a native dialog; None when cancelled."""
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError:
        return None
    try:
        root = tkinter.Tk()
    except tkinter.TclError:
        return None
    root.withdraw()
    try:
        if directory:
            chosen = filedialog.askdirectory(
                title="选择保存路径", initialdir=str(Path.home()), mustexist=True
            )
        else:
            chosen = filedialog.askopenfilename(
                title="选择音频文件", filetypes=[("音频文件", "*.wav")]
            )
    finally:
        root.destroy()
    return chosen or None


class MainWindow:
    """The pygame window that draws the screens and reacts to clicks."""

    def __init__(
        self,
        navigator: Optional[Navigator] = None,
        utils: Optional[AppUtils] = None,
        *,
        network: bool = True,
    ) -> None:
        self.navigator = navigator if navigator is not None else Navigator()
        self.utils = utils if utils is not None else AppUtils()
        self.internet = ChessInternet() if network else None
        self.local = ChessLocal() if network else None
        self.message = ""
        self._choosing_level = False
        self._running = False
        self._surface = None
        self._font = None
        self._title_font = None

    # ----- actions -------------------------------------------------------

    def _notify(self, text: str) -> None:
        self.message = text

    def _go(self, view: ViewId) -> Callable[[], None]:
        return lambda: self.navigator.show(view)

    def _start(self, mode: ModuleId) -> Callable[[], None]:
        return lambda: self.navigator.start_game(mode)

    def _quit(self) -> None:
        self._running = False

    def _toggle_show_mode(self) -> None:
        self.navigator.toggle_show_mode()
        self._apply_display_mode()

    def _open_level_choice(self) -> None:
        self._choosing_level = True

    def _choose_level(self, level: Optional[AiLevel]) -> Callable[[], None]:
        def choose() -> None:
            self._choosing_level = False
            self.navigator.select_ai_level(level)
            if level is None:
                self._notify("未选择难度，默认使用简单难度")

        return choose

    def _set_back_music(self) -> None:
        import pygame

        chosen = _ask_path(directory=False)
        if chosen is None:
            return
        try:
            self.utils.change_music(chosen)
        except (RuntimeError, OSError, pygame.error) as exc:
            log.warning("cannot play %s: %s", chosen, exc)
            self._notify("设置音乐失败")
        else:
            self._notify("设置音乐成功")

    def _enable_start(self) -> None:
        try:
            self.utils.enable_autostart()
        except OSError as exc:
            log.warning("cannot register autostart: %s", exc)
            self._notify("设置开机自启动失败")
        else:
            self._notify("设置开机自启动成功")

    def _save_path(self) -> None:
        try:
            self.utils.set_save_path(_ask_path(directory=True) or "")
        except ValueError:
            self._notify("保存路径修改失败")
        else:
            self._notify("保存路径修改成功")

    def _delete_game(self) -> None:
        try:
            self.utils.delete_game()
        except OSError as exc:
            log.warning("cannot remove game: %s", exc)
            self._notify("卸载失败")
        else:
            self._notify("卸载成功")

    # ----- layout --------------------------------------------------------

    def _button_size(self, size: Size) -> Size:
        width, height = size
        return int(width * 0.4), int(height * 0.08)

    def _stack(self, size: Size, labels: List[str]) -> List[Rect]:
        """Centre equally spaced rows of button size down the window."""
        width, height = size
        bw, bh = self._button_size(size)
        gap = (height - len(labels) * bh) / (len(labels) + 1)
        x = (width - bw) // 2
        return [
            (x, int(gap * (i + 1) + bh * i), bw, bh) for i, _ in enumerate(labels)
        ]

    def _buttons(self, size: Size) -> List[Tuple[str, Rect, Callable[[], None]]]:
        nav = self.navigator
        view = nav.view
        if self._choosing_level:
            entries = [(label, self._choose_level(level)) for level, label in _LEVEL_LABELS]
            entries.append(("取消", self._choose_level(None)))
            rects = self._stack(size, [label for label, _ in entries])
            return [(label, rect, act) for (label, act), rect in zip(entries, rects)]
        if view is ViewId.INIT:
            entries = [
                ("单人模式", self._go(ViewId.SINGLE)),
                ("局域网模式", self._go(ViewId.LOCAL)),
                ("互联网模式", self._go(ViewId.INTERNET)),
                ("设置", self._go(ViewId.SETTING)),
            ]
            rects = self._stack(size, [label for label, _ in entries])
            return [(label, rect, act) for (label, act), rect in zip(entries, rects)]
        if view in _START_MODES:
            rects = self._stack(size, ["title", "start", "return"])
            return [
                ("开始", rects[1], self._start(_START_MODES[view])),
                ("返回", rects[2], nav.back_to_init),
            ]
        if view is ViewId.RESULT:
            rects = self._stack(size, ["title", "confirm"])
            return [("确认", rects[1], nav.back_to_init)]
        if view is ViewId.GAME:
            return self._game_buttons(size)
        if view is ViewId.SETTING:
            return self._setting_buttons(size)
        return []

    def _game_panel(self, size: Size) -> Tuple[int, List[Rect]]:
        width, height = size
        board_width = height // 12 * 10
        bw, bh = self._button_size(size)
        x = board_width + (width - board_width - bw) // 2
        y = 10
        rects = []
        for item_height in (int(height * 0.3), int(height * 0.3), bh, bh, bh):
            rects.append((x, y, bw, item_height))
            y += item_height + 15
        return board_width, rects

    def _game_buttons(self, size: Size) -> List[Tuple[str, Rect, Callable[[], None]]]:
        _, rects = self._game_panel(size)
        return [
            ("准备", rects[2], lambda: None),
            ("返回", rects[3], self.navigator.back_to_init),
            ("退出", rects[4], self._quit),
        ]

    def _setting_buttons(self, size: Size) -> List[Tuple[str, Rect, Callable[[], None]]]:
        width, height = size
        bw, bh = self._button_size(size)
        spacing = 20
        grid_w = bw * 2 + spacing
        grid_h = bh * 4 + spacing * 3
        left = (width - grid_w) // 2
        top = (height - grid_h) // 2
        cells = [
            ("全屏/窗口", 0, 0, self._toggle_show_mode),
            ("人机难度", 1, 0, self._open_level_choice),
            ("背景音乐", 2, 0, self._set_back_music),
            ("开机自启动", 0, 1, self._enable_start),
            ("保存路径", 1, 1, self._save_path),
            ("卸载游戏", 2, 1, self._delete_game),
        ]
        buttons = [
            (label, (left + col * (bw + spacing), top + row * (bh + spacing), bw, bh), act)
            for label, row, col, act in cells
        ]
        buttons.append(
            ("返回", ((width - bw) // 2, top + 3 * (bh + spacing), bw, bh),
             self.navigator.back_to_init)
        )
        return buttons

    # ----- drawing -------------------------------------------------------

    def _apply_display_mode(self) -> None:
        import pygame

        flags = pygame.FULLSCREEN if self.navigator.fullscreen else 0
        self._surface = pygame.display.set_mode(self.navigator.window_size, flags)

    def _text(self, text: str, center: Tuple[int, int], font, color) -> None:
        image = font.render(text, True, color)
        self._surface.blit(image, image.get_rect(center=center))

    def _draw_board(self, board_width: int, height: int) -> None:
        import pygame

        surface = self._surface
        pygame.draw.rect(surface, (240, 240, 240), (0, 0, board_width, height))
        cell = min(board_width / 10, height / 11)
        ox = (board_width - cell * 8) / 2
        oy = (height - cell * 9) / 2

        def point(col: int, row: int) -> Tuple[int, int]:
            return int(ox + (col - 1) * cell), int(oy + (row - 1) * cell)

        line = (90, 60, 30)
        for row in range(1, 11):
            pygame.draw.line(surface, line, point(1, row), point(9, row))
        for col in range(1, 10):
            if col in (1, 9):
                pygame.draw.line(surface, line, point(col, 1), point(col, 10))
            else:
                pygame.draw.line(surface, line, point(col, 1), point(col, 5))
                pygame.draw.line(surface, line, point(col, 6), point(col, 10))
        for top in (1, 8):
            pygame.draw.line(surface, line, point(4, top), point(6, top + 2))
            pygame.draw.line(surface, line, point(6, top), point(4, top + 2))

        radius = max(int(cell * 0.42), 4)
        for piece in self.navigator.game.board.pieces:
            if not piece.alive:
                continue
            center = point(*piece.position)
            color = (200, 30, 30) if piece.flag is ChessFlag.RED else (20, 20, 20)
            pygame.draw.circle(surface, (250, 230, 190), center, radius)
            pygame.draw.circle(surface, color, center, radius, 2)
            kind = piece.chess_id.name.split("_", 1)[0]
            self._text(_PIECE_GLYPHS[piece.flag][kind], center, self._font, color)

    def _draw(self) -> None:
        import pygame

        surface = self._surface
        size = surface.get_size()
        surface.fill((250, 250, 250))
        view = self.navigator.view
        if not self._choosing_level:
            if view is ViewId.GAME:
                board_width, rects = self._game_panel(size)
                self._draw_board(board_width, size[1])
                for rect in rects[:2]:
                    pygame.draw.rect(surface, (208, 232, 255), rect)
            elif view in _VIEW_TITLES:
                title_rect = self._stack(size, ["title"] + ["x"] * (2 if view in _START_MODES else 1))[0]
                x, y, w, h = title_rect
                self._text(_VIEW_TITLES[view], (x + w // 2, y + h // 2),
                           self._title_font, (51, 51, 51))
        for label, rect, _ in self._buttons(size):
            pygame.draw.rect(surface, (225, 225, 225), rect)
            pygame.draw.rect(surface, (120, 120, 120), rect, 1)
            x, y, w, h = rect
            self._text(label, (x + w // 2, y + h // 2), self._font, (30, 30, 30))
        if self.message:
            self._text(self.message, (size[0] // 2, size[1] - 20), self._font, (30, 30, 120))
        pygame.display.flip()

    def _click(self, pos: Tuple[int, int]) -> None:
        size = self._surface.get_size()
        for _, (x, y, w, h), action in self._buttons(size):
            if x <= pos[0] < x + w and y <= pos[1] < y + h:
                self.message = ""
                action()
                return

    # ----- main loop -----------------------------------------------------

    def _start_network(self) -> None:
        for worker in (self.internet, self.local):
            if worker is None:
                continue
            try:
                worker.start()
            except OSError as exc:
                log.warning("network service unavailable: %s", exc)

    def _stop_network(self) -> None:
        for worker in (self.internet, self.local):
            if worker is not None:
                worker.stop()

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        import pygame

        pygame.init()
        info = pygame.display.Info()
        if info.current_w > 0 and info.current_h > 0:
            self.navigator.screen_size = (info.current_w, info.current_h)
        pygame.display.set_caption(WINDOW_TITLE)
        self._apply_display_mode()
        self._font = pygame.font.SysFont(_FONT_NAMES, 20)
        self._title_font = pygame.font.SysFont(_FONT_NAMES, 16)
        self._start_network()
        clock = pygame.time.Clock()
        self._running = True
        try:
            while self._running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self._running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self._click(event.pos)
                if self._running:
                    self._draw()
                clock.tick(30)
        finally:
            self._stop_network()
            pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="xiangqi", description="Chinese chess.")
    parser.add_argument(
        "--offline", action="store_true", help="do not start the network services"
    )
    args = parser.parse_args(argv)

    utils = AppUtils()
    name = utils.init_app()
    GlobalData.instance().user_name = name
    try:
        utils.start_music()
    except Exception as exc:  # the audio backend may be missing or the file absent
        log.warning("background music unavailable: %s", exc)
    MainWindow(utils=utils, network=not args.offline).run()
    return 0