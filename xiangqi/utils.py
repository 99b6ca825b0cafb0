"""Application housekeeping: cache folders, player name, music and settings."""

from __future__ import annotations

import os
import random
import shutil
import socket
import sys
from pathlib import Path
from typing import Optional, Protocol, Union

PathLike = Union[str, "os.PathLike[str]"]

MUSIC_FILE = "chess.wav"
AUTOSTART_NAME = "Chess"
_RUN_KEY = r"Software\Microsoft\Windows\CurrentVersion\Run"


def make_player_name(hostname: str, number: int) -> str:
    """Build a player name from the host name and a four-digit number."""
    if not 0 <= number <= 9999:
        raise ValueError("number must be between 0 and 9999")
    return f"{hostname}_{number:04d}"


class MusicPlayer(Protocol):
    def play(self, path: Path) -> None: ...

    def pause(self) -> None: ...


class PygameMusicPlayer:
    """Loops one audio file at full volume through the pygame mixer."""

    def play(self, path: Path) -> None:
        import pygame

        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(os.fspath(path))
        pygame.mixer.music.set_volume(1.0)
        pygame.mixer.music.play(loops=-1)

    def pause(self) -> None:
        import pygame

        if pygame.mixer.get_init():
            pygame.mixer.music.pause()


def _xdg_autostart_dir() -> Path:
    config = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(config) / "autostart"


class AppUtils:
    """Per-installation state and the actions of the settings screen."""

    def __init__(
        self,
        *,
        game_dir: Optional[PathLike] = None,
        cache_path: Optional[PathLike] = None,
        save_path: Optional[PathLike] = None,
        hostname: Optional[str] = None,
        rng: Optional[random.Random] = None,
        player: Optional[MusicPlayer] = None,
        autostart_dir: Optional[PathLike] = None,
        executable: Optional[PathLike] = None,
    ) -> None:
        self.game_dir = Path(game_dir) if game_dir is not None else Path.cwd()
        self.cache_path = (
            Path(cache_path) if cache_path is not None else self.game_dir / "cache"
        )
        self.save_path = Path(save_path) if save_path is not None else Path.home()
        self.name = "None"
        exe_name = "chess.exe" if sys.platform == "win32" else "chess"
        self.executable = (
            Path(executable) if executable is not None else self.game_dir / exe_name
        )
        self._hostname = hostname
        self._rng = rng or random.Random()
        self._player = player
        self._autostart_dir = Path(autostart_dir) if autostart_dir else None

    @property
    def music_path(self) -> Path:
        """The default background track inside the cache."""
        return self.cache_path / "music" / MUSIC_FILE

    def init_app(self) -> str:
        """Create the cache folders if missing, set up music and pick a name."""
        if not self.cache_path.exists():
            self.cache_path.mkdir(parents=True)
            (self.cache_path / "log").mkdir()
            (self.cache_path / "music").mkdir()
        if self._player is None:
            self._player = PygameMusicPlayer()
        hostname = self._hostname or socket.gethostname()
        self.name = make_player_name(hostname, self._rng.randrange(10000))
        return self.name

    def _require_player(self) -> MusicPlayer:
        if self._player is None:
            raise RuntimeError("init_app() must be called before playing music")
        return self._player

    def start_music(self) -> None:
        """Loop the default background track."""
        self._require_player().play(self.music_path)

    def change_music(self, path: PathLike) -> None:
        """Stop the current track and loop ``path`` instead."""
        player = self._require_player()
        player.pause()
        player.play(Path(path))

    def enable_autostart(self) -> Optional[Path]:
        """Register the game to start at login; return the entry file if one is written."""
        if self._autostart_dir is None and sys.platform == "win32":
            import winreg

            with winreg.OpenKey(
                winreg.HKEY_CURRENT_USER, _RUN_KEY, 0, winreg.KEY_SET_VALUE
            ) as key:
                winreg.SetValueEx(
                    key, AUTOSTART_NAME, 0, winreg.REG_SZ, str(self.executable)
                )
            return None
        directory = self._autostart_dir or _xdg_autostart_dir()
        directory.mkdir(parents=True, exist_ok=True)
        entry = directory / "chess.desktop"
        entry.write_text(
            "[Desktop Entry]\n"
            "Type=Application\n"
            f"Name={AUTOSTART_NAME}\n"
            f"Exec={self.executable}\n",
            encoding="utf-8",
        )
        return entry

    def set_save_path(self, path: PathLike) -> None:
        """Change where games are saved."""
        if not os.fspath(path):
            raise ValueError("save path must not be empty")
        self.save_path = Path(path)

    def delete_game(self) -> None:
        """Remove the game folder and everything in it."""
        if not self.game_dir.exists():
            return
        shutil.rmtree(self.game_dir)