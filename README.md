# xiangqi

A Chinese chess (象棋) window built on pygame: menu screens, a settings
screen, a board drawn with the 32 pieces in their opening places, and
background receivers that track the occupancy of game rooms over TCP and
UDP.

## Starting the window

```
xiangqi
xiangqi --offline
```

`xiangqi` (`xiangqi.app:main`) creates the cache folders, picks a player
name, tries to start the background music and opens an 800×600 window.
`--offline` keeps the two network receivers from starting.

The start screen offers:

- **单人模式**, **局域网模式**, **互联网模式** – each leads to a screen with
  **开始** (open the game screen in that mode) and **返回** (back to the start
  screen);
- **设置** – the settings screen.

The game screen draws the board with red at the bottom and has **准备**,
**返回** (back to the start screen) and **退出** (close the window).

The settings screen has:

- **全屏/窗口** – switch between full screen and an 800×600 window;
- **人机难度** – choose 简单 / 正常 / 大师, or 取消 to keep the current level;
- **背景音乐** – pick a `.wav` file (via a tkinter dialog) and loop it;
- **开机自启动** – on Windows, write a `Chess` value under the user's
  `Software\Microsoft\Windows\CurrentVersion\Run` registry key; elsewhere,
  write `chess.desktop` into `$XDG_CONFIG_HOME/autostart`
  (default `~/.config/autostart`);
- **保存路径** – choose a save directory;
- **卸载游戏** – delete the game directory (by default the working directory)
  and everything in it;
- **返回** – back to the start screen.

The outcome of an action is shown as a line of text at the bottom of the
window.

On start-up a `cache` directory with `log` and `music` sub-directories is
created in the working directory if it is missing. Background music is looped
from `cache/music/chess.wav` through the pygame mixer; if that fails, a
warning is logged and the window opens anyway. The player name is the host
name followed by `_` and a random four-digit number.

## What the game does not do

- Pieces cannot be selected or moved in the window; the board is drawn only.
- There is no computer opponent; the chosen level is only remembered.
- **准备** does nothing, and no screen shows the room table or a result.
- The network side only receives room-status updates; no moves are exchanged,
  and no server is included.
- The save directory is recorded but nothing is saved there.

## Networking

`xiangqi.network` keeps a `HomeTable` of 100 rooms, each
`HomeStatus.NO_PEOPLE`, `ONE_PEOPLE` or `TWO_PEOPLE`.

- `ChessInternet` connects over TCP to `127.0.0.1:60000` in a background
  thread; a connection failure is kept in its `error` attribute.
- `ChessLocal` listens for UDP datagrams on port 60030 and
  `send_broadcast(data)` sends to `255.255.255.255` on the same port.

Both have `start()` / `stop()`, work as context managers and expose the table
as `homes`. Messages are `DataPacket`s (`xiangqi.globaldata`): a little-endian
32-bit `DataId` followed by a 64-byte NUL-padded UTF-8 text. A
`DataId.HOME_MSG` packet with the text `"<room>:<status>"` sets that room;
other kinds and unknown status values are ignored, and malformed messages are
logged and dropped.

```python
from xiangqi.globaldata import DataId, DataPacket
from xiangqi.network import HomeTable

table = HomeTable()
table.apply(DataPacket(DataId.HOME_MSG, "7:2"))   # True
table[7]                                            # HomeStatus.TWO_PEOPLE
```

## The board model

```python
from xiangqi.chessboard import ChessBoard, starting_layout
from xiangqi.chesspiece import check_available
from xiangqi.globaldata import ChessFlag, ChessId

board = ChessBoard()
board.init_board()                 # 32 pieces, width 9, height 10
pieces = board.flush(ChessFlag.RED)

starting_layout(ChessFlag.BLACK)   # black at the bottom, its pieces first
```

Coordinates are `(column, row)` with columns 1–9 and rows 1–10; the bottom
side starts on row 10. Each `ChessPiece` has `flag`, `chess_id`, `position`,
`alive` and `weight`.

`check_available(source, target, chess_id)` (also `ChessPiece.check_available`)
checks only the shape of a move, never other pieces: both points must be on the
board; chariots and cannons move along a row or column; knights move to a point
whose squared distance is 5, elephants 8; guards, generals and pawns are
accepted only when the source is exactly one column and one row greater than
the target.

`xiangqi.players` has `AIPlayer` and `PeoplePlayer`, each holding a
`PlayerStatus` and a `PlayerId`. `xiangqi.app.Navigator` holds the current
screen, mode, window mode and AI level without opening a window.