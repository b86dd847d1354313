"""
Board Image Renderer

Draws matchstick boards as PNG images with the moved sticks highlighted:
sticks taken away are drawn red, sticks laid down are drawn green.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence, Set, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .oracle import normalize_equation
from .solver.board import BoardState
from .solver.move import Move
from .solver.slots import BITS_PER_CHAR, slot_bit
from .solver.solution import Solution


# Cell geometry in pixels
CELL_WIDTH = 40
CELL_HEIGHT = 70
CELL_GAP = 14
MARGIN = 16
STICK_WIDTH = 5
LABEL_HEIGHT = 18

# Colors
BACKGROUND = "white"
STICK_COLOR = "#5d4037"
REMOVED_COLOR = "#d32f2f"
ADDED_COLOR = "#4CAF50"
GHOST_COLOR = "#e0e0e0"
LABEL_COLOR = "blue"

# Stick end points per slot, in unit cell coordinates (x right, y down)
_SEGMENTS: Dict[str, Tuple[float, float, float, float]] = {
    "a": (0.1, 0.0, 0.9, 0.0),
    "b": (1.0, 0.05, 1.0, 0.45),
    "c": (1.0, 0.55, 1.0, 0.95),
    "d": (0.1, 1.0, 0.9, 1.0),
    "e": (0.0, 0.55, 0.0, 0.95),
    "f": (0.0, 0.05, 0.0, 0.45),
    "g": (0.1, 0.5, 0.9, 0.5),
    "altg": (0.1, 0.65, 0.9, 0.65),
    "addv": (0.5, 0.2, 0.5, 0.8),
    "mul_tl_br": (0.2, 0.3, 0.8, 0.7),
    "mul_tr_bl": (0.8, 0.3, 0.2, 0.7),
    "divb": (0.1, 0.95, 0.5, 0.5),
    "divt": (0.5, 0.5, 0.9, 0.05),
}
SEGMENTS: Dict[int, Tuple[float, float, float, float]] = {
    slot_bit(name): points for name, points in _SEGMENTS.items()
}

Highlight = Set[Tuple[int, int]]


def _load_font() -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("arial.ttf", 14)
    except OSError:
        return ImageFont.load_default()


def _as_state(board: Union[str, BoardState]) -> BoardState:
    if isinstance(board, BoardState):
        return board
    return BoardState.from_equation(normalize_equation(board))


def _stick_box(position: int, bit: int) -> Tuple[float, float, float, float]:
    """Pixel end points of a stick."""
    x1, y1, x2, y2 = SEGMENTS[bit]
    left = MARGIN + position * (CELL_WIDTH + CELL_GAP)
    return (
        left + x1 * CELL_WIDTH,
        MARGIN + y1 * CELL_HEIGHT,
        left + x2 * CELL_WIDTH,
        MARGIN + y2 * CELL_HEIGHT,
    )


def render_board_image(
    board: Union[str, BoardState],
    moves: Optional[Iterable[Move]] = None,
    highlight: str = "after",
    label: Optional[str] = None,
) -> Image.Image:
    """
    Draw a board as an image.

    With highlight="before" the board is the puzzle: sticks that will be
    taken away are red and their destinations are drawn green.
    With highlight="after" the board is the result: laid sticks are green
    and the places they came from are drawn red.
    Move positions index the cells of the given board.

    Args:
        board: Equation text or BoardState
        moves: Moves to highlight
        highlight: "before" or "after"
        label: Optional caption drawn under the board

    Returns:
        RGB image

    Raises:
        ValueError: If highlight is neither "before" nor "after"
    """
    if highlight not in ("before", "after"):
        raise ValueError(f"highlight must be 'before' or 'after', got {highlight!r}")

    state = _as_state(board)
    removed: Highlight = set()
    added: Highlight = set()
    for move in moves or ():
        removed.add((move.from_position, move.from_bit))
        added.add((move.to_position, move.to_bit))

    cells = max(len(state), 1)
    width = 2 * MARGIN + cells * CELL_WIDTH + (cells - 1) * CELL_GAP
    height = 2 * MARGIN + CELL_HEIGHT + (LABEL_HEIGHT if label else 0)
    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)

    for position, value in enumerate(state.bits):
        for bit in range(BITS_PER_CHAR):
            lit = bool(value & (1 << bit))
            key = (position, bit)
            if key in removed:
                color = REMOVED_COLOR
            elif key in added:
                color = ADDED_COLOR
            elif lit:
                color = STICK_COLOR
            else:
                continue
            # Sticks that are not on this board are drawn thin
            stick_width = STICK_WIDTH if lit else max(1, STICK_WIDTH // 2)
            draw.line(_stick_box(position, bit), fill=color, width=stick_width)

    if label:
        draw.text((MARGIN, height - MARGIN - LABEL_HEIGHT + 4), label,
                  fill=LABEL_COLOR, font=_load_font())

    return image


def _padding(original_length: int, moves: Sequence[Move]) -> Tuple[int, int]:
    """Empty cells needed before and after the original to hold every move."""
    positions = [p for move in moves for p in (move.from_position, move.to_position)]
    prepend = 1 if positions and min(positions) < 0 else 0
    append = 1 if positions and max(positions) >= original_length else 0
    return prepend, append


def save_solution_image(original: str, solution: Solution, path: Union[str, Path]) -> Path:
    """
    Save a PNG with the puzzle above the solved equation.

    The moves are highlighted on the puzzle. For upright solutions they are
    highlighted on the result as well; a flipped result is drawn as read.

    Args:
        original: Puzzle equation
        solution: Solution to show
        path: Output file path

    Returns:
        Path written
    """
    moves = list(solution.moves)
    state = _as_state(original)
    prepend, append = _padding(len(state), moves)
    padded = state.padded(bool(prepend), bool(append))
    shifted = [move.shifted(prepend) for move in moves]

    before = render_board_image(padded, shifted, "before", label=normalize_equation(original))
    if solution.flipped:
        after = render_board_image(solution.equation, label=f"{solution.equation} (flipped)")
    else:
        # A cell that stays empty decodes to nothing, so recompute the padding
        result = _as_state(solution.equation)
        offset = prepend if len(result) > len(state) else 0
        after = render_board_image(
            result, [move.shifted(offset) for move in moves], "after", label=solution.equation
        )

    combined = Image.new("RGB", (max(before.width, after.width), before.height + after.height),
                         BACKGROUND)
    combined.paste(before, (0, 0))
    combined.paste(after, (0, before.height))

    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    combined.save(output, "PNG")
    return output
