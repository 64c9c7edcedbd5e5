from dataclasses import dataclass
from typing import Generator, Iterable

# Bytes per output line
WIDTH = 16

# Bytes per group within a line
GROUP_SIZE = 4

# Shown for bytes outside the printable ASCII range
PLACEHOLDER = "."

# Minimum number of hex digits in the offset column
OFFSET_DIGITS = 8

_HEX_LOWER = tuple(f"{b:02x}" for b in range(256))
_HEX_UPPER = tuple(f"{b:02X}" for b in range(256))


@dataclass(frozen=True)
class FormatOptions:
    width: int = WIDTH
    group_size: int = GROUP_SIZE
    uppercase: bool = False
    placeholder: str = PLACEHOLDER

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"Row width must be positive, got {self.width}")
        if self.group_size < 0:
            raise ValueError(f"Group size must not be negative, got {self.group_size}")
        if len(self.placeholder) != 1 or not 0x20 <= ord(self.placeholder) <= 0x7E:
            raise ValueError(f"Invalid placeholder glyph: {self.placeholder!r}")


@dataclass(frozen=True)
class DumpLine:
    offset: int
    hex_cells: tuple[str, ...]
    ascii_cells: tuple[str, ...]

    @property
    def ascii(self) -> str:
        return "".join(self.ascii_cells)


def ascii_cell(byte: int, placeholder: str = PLACEHOLDER) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else placeholder


class HexFormatter:
    """Turns raw bytes into hex dump lines.

    Lines are produced lazily, one row of ``options.width`` bytes at a time,
    so a whole file never has to be held in memory.
    """

    def __init__(self, options: FormatOptions | None = None):
        self.options = options or FormatOptions()
        self._hex = _HEX_UPPER if self.options.uppercase else _HEX_LOWER
        self._hex_section = self._hex_section_width(self.options.width)

    def lines(self, data: bytes, start: int = 0) -> Generator[DumpLine, None, None]:
        width = self.options.width
        for i in range(0, len(data), width):
            yield self._make_line(start + i, data[i : i + width])

    def stream_lines(
        self, chunks: Iterable[bytes]
    ) -> Generator[DumpLine, None, None]:
        """Regroup chunks of any size into full rows.

        Only the row holding the final bytes of the stream may be short.
        """
        width = self.options.width
        offset = 0
        pending = b""
        for chunk in chunks:
            if pending:
                chunk = pending + chunk
            # Whole rows only; the tail waits for the next chunk
            usable = len(chunk) - len(chunk) % width
            yield from self.lines(chunk[:usable], start=offset)
            offset += usable
            pending = chunk[usable:]

        if pending:
            yield self._make_line(offset, pending)

    def render(self, line: DumpLine) -> str:
        offset = f"{line.offset:0{OFFSET_DIGITS}x}"
        if self.options.uppercase:
            offset = offset.upper()

        hex_section = self._join_cells(line.hex_cells).ljust(self._hex_section)
        return f"0x{offset}: {hex_section}  {line.ascii}"

    def dump(self, data: bytes) -> Generator[str, None, None]:
        for line in self.lines(data):
            yield self.render(line)

    def dump_stream(self, chunks: Iterable[bytes]) -> Generator[str, None, None]:
        for line in self.stream_lines(chunks):
            yield self.render(line)

    def _make_line(self, offset: int, chunk: bytes) -> DumpLine:
        placeholder = self.options.placeholder
        return DumpLine(
            offset=offset,
            hex_cells=tuple(self._hex[b] for b in chunk),
            ascii_cells=tuple(ascii_cell(b, placeholder) for b in chunk),
        )

    def _join_cells(self, cells: tuple[str, ...]) -> str:
        group_size = self.options.group_size
        parts = []
        for i, cell in enumerate(cells):
            if i > 0:
                # Extra space at each group boundary
                if group_size and i % group_size == 0:
                    parts.append("  ")
                else:
                    parts.append(" ")
            parts.append(cell)
        return "".join(parts)

    def _hex_section_width(self, width: int) -> int:
        return len(self._join_cells(("00",) * width))


def hex_dump(data: bytes, width: int = WIDTH) -> str:
    """Create a hex dump of the data for debugging."""
    formatter = HexFormatter(FormatOptions(width=width))
    return "\n".join(formatter.dump(data))
