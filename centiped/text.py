"""Sprite-sheet fonts and strings whose letters also occupy the mushroom grid."""

from __future__ import annotations

from typing import Callable, List, Protocol, Tuple

Position = Tuple[float, float]
Rect = Tuple[int, int, int, int]


class SpriteSheet:
    """A texture cut into equal cells, numbered row by row from the top left."""

    def __init__(self, width: int, height: int, columns: int, rows: int) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError("a sprite sheet needs at least one column and one row")
        self.columns = columns
        self.rows = rows
        self.cell_width = width // columns
        self.cell_height = height // rows

    def cell_rect(self, index: int) -> Rect:
        """(left, top, width, height) of cell ``index`` in the texture."""
        if not 0 <= index < len(self):
            raise IndexError(f"cell {index} is outside a sheet of {len(self)} cells")
        row, column = divmod(index, self.columns)
        return (column * self.cell_width, row * self.cell_height, self.cell_width, self.cell_height)

    def __len__(self) -> int:
        return self.columns * self.rows


class _Field(Protocol):
    cell_size: int

    def add_to_grid(self, cell: object) -> None: ...

    def remove_position(self, pos: Position) -> None: ...


class SpriteString:
    """A line of text drawn glyph by glyph.

    Each non-blank character of the initial text puts a letter, built by
    ``make_letter(pos)``, into the mushroom field so that it blocks movement.
    Glyphs are only ever appended: new text is drawn over the old.
    """

    def __init__(
        self,
        text: str,
        pos: Position,
        sheet: SpriteSheet,
        field: _Field,
        make_letter: Callable[[Position], object],
    ) -> None:
        self._sheet = sheet
        self._field = field
        self.text = text
        self.pos: Position = (float(pos[0]), float(pos[1]))
        self.glyphs: List[Tuple[str, Position]] = []
        self.letter_positions: List[Position] = []
        self.destroyed = False

        for char, at in zip(text, self._positions(len(text))):
            self.glyphs.append((char, at))
            if char != " ":
                field.add_to_grid(make_letter(at))
                self.letter_positions.append(at)

    def _positions(self, count: int) -> List[Position]:
        x, y = self.pos
        step = self._sheet.cell_width
        return [(x + i * step, y) for i in range(count)]

    def _draw(self, text: str) -> None:
        self.glyphs.extend(zip(text, self._positions(len(text))))

    def set_text(self, text: str) -> None:
        """Replace the text and draw it from the start position."""
        self.text = text
        self._draw(text)

    def backspace(self) -> None:
        """Drop the last character, covering it with a blank glyph."""
        if self.text:
            self.text = self.text[:-1]
            self._draw(self.text + "*")

    def push_back(self) -> None:
        """Move the start position one grid cell to the left."""
        x, y = self.pos
        self.pos = (x - self._field.cell_size, y)

    def delete(self) -> None:
        """Take every letter out of the field and mark the string for removal."""
        while self.letter_positions:
            self._field.remove_position(self.letter_positions.pop())
        self.destroyed = True

    def __len__(self) -> int:
        return len(self.text)