import pytest

from consolemenu import config
from consolemenu.config import Settings
from consolemenu.terminal import Color


class FakeTerminal:
    """in-memory terminal that replays scripted keys and records the screen"""

    def __init__(self, keys=(), width=80):
        self.keys = list(keys)
        self.width = width
        self.cells: dict[tuple[int, int], tuple[str, Color]] = {}
        self.writes: list[tuple[int, int, str, Color]] = []
        self.row = 0
        self.col = 0
        self.color = Color.DEFAULT
        self.cursor_visible = True
        self.visibility_changes: list[bool] = []
        self.clears = 0
        self.refreshes = 0

    def read_key(self):
        if not self.keys:
            raise EOFError("no more scripted keys")
        return self.keys.pop(0)

    def move(self, row, col):
        self.row, self.col = row, col

    def clear(self):
        self.cells.clear()
        self.row = self.col = 0
        self.clears += 1

    def clear_line(self):
        for row, col in list(self.cells):
            if row == self.row and col >= self.col:
                del self.cells[(row, col)]

    def write(self, text):
        self.writes.append((self.row, self.col, text, self.color))
        for ch in text:
            self.cells[(self.row, self.col)] = (ch, self.color)
            self.col += 1

    def set_color(self, color):
        self.color = color

    def set_cursor_visible(self, visible):
        self.cursor_visible = visible
        self.visibility_changes.append(visible)

    def refresh(self):
        self.refreshes += 1

    def line(self, row: int) -> str:
        cols = sorted(col for r, col in self.cells if r == row)
        return "".join(self.cells[(row, col)][0] for col in cols)

    def colors(self, row: int) -> list[Color]:
        cols = sorted(col for r, col in self.cells if r == row)
        return [self.cells[(row, col)][1] for col in cols]


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """keeps settings.json out of the real user data directory"""
    monkeypatch.setattr(config, "get_data_dir", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def settings():
    return Settings(flash_ms=0)


@pytest.fixture
def make_terminal():
    return FakeTerminal
