"""The 4x4 symbol grid used at every subdivision level.

Row 0 is the northernmost band and column 0 the westernmost. The DIGIPIN
layout is fixed for interoperability with already-issued PINs; both India
and World regions use it.
"""

from types import MappingProxyType

from pindrop.lib.pincodec.errors import InvalidSymbol

GRID_SIZE = 4

DIGIPIN_GRID: tuple[tuple[str, ...], ...] = (
    ("F", "C", "9", "8"),
    ("J", "3", "2", "7"),
    ("K", "4", "5", "6"),
    ("L", "M", "P", "T"),
)


class GridAlphabet:
    """A 4x4 table of unique single-character symbols with two-way lookup."""

    def __init__(self, grid: tuple[tuple[str, ...], ...]) -> None:
        if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
            msg = f"Grid must be {GRID_SIZE}x{GRID_SIZE}"
            raise ValueError(msg)

        cells: dict[str, tuple[int, int]] = {}
        for row, symbols in enumerate(grid):
            for col, symbol in enumerate(symbols):
                if len(symbol) != 1 or symbol != symbol.upper():
                    msg = f"Grid symbols must be single uppercase characters, got {symbol!r}"
                    raise ValueError(msg)
                if symbol in cells:
                    msg = f"Duplicate grid symbol {symbol!r}"
                    raise ValueError(msg)
                cells[symbol] = (row, col)

        self._grid = tuple(tuple(row) for row in grid)
        self._cells = MappingProxyType(cells)

    @property
    def symbols(self) -> frozenset[str]:
        return frozenset(self._cells)

    @property
    def sorted_symbols(self) -> tuple[str, ...]:
        """Symbols in display order (digits first, then letters)."""
        return tuple(sorted(self._cells))

    def symbol_at(self, row: int, col: int) -> str:
        """Return the symbol at a grid cell.

        Args:
            row: Row index, 0 (north) to 3 (south).
            col: Column index, 0 (west) to 3 (east).
        """
        return self._grid[row][col]

    def cell_of(self, symbol: str) -> tuple[int, int]:
        """Return the ``(row, col)`` grid cell for a symbol, case-insensitively.

        Raises:
            InvalidSymbol: If ``symbol`` is not one of the grid symbols.
        """
        cell = self._cells.get(symbol.upper())
        if cell is None:
            raise InvalidSymbol(symbol)
        return cell

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and char.upper() in self._cells

    def __repr__(self) -> str:
        return f"GridAlphabet({''.join(''.join(row) for row in self._grid)!r})"


DIGIPIN_ALPHABET = GridAlphabet(DIGIPIN_GRID)
