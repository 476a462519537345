# draw.py
from typing import List, Optional, Sequence, Tuple
import pygame  # type: ignore

from .config import (
    CELL_SIZE, SNAKE_CELL_SIZE, SCORE_STRIP,
    BG_COLOR, BORDER_COLOR, HEAD_COLOR, BODY_COLOR, FOOD_COLOR, TEXT_COLOR, GAME_OVER_COLOR,
)
from .game import GameSnapshot
from .geometry import Block

MARGIN = (CELL_SIZE - SNAKE_CELL_SIZE) // 2

Rect = Tuple[int, int, int, int]


# ---------- Helpers ----------
def to_pixels(coord: int) -> int:
    return coord * CELL_SIZE


def window_size(width: int, height: int) -> Tuple[int, int]:
    return to_pixels(width), to_pixels(height + SCORE_STRIP)


def segment_rect(current: Block, neighbours: Sequence[Block]) -> Rect:
    """
    Pixel rect of a body segment: inset inside its cell and stretched
    across the gap towards each connected neighbour.
    """
    left, right = MARGIN, MARGIN + SNAKE_CELL_SIZE
    top, bottom = MARGIN, MARGIN + SNAKE_CELL_SIZE
    for n in neighbours:
        if n.x < current.x:
            left = -MARGIN
        elif n.x > current.x:
            right = CELL_SIZE + MARGIN
        if n.y < current.y:
            top = -MARGIN
        elif n.y > current.y:
            bottom = CELL_SIZE + MARGIN
    px, py = to_pixels(current.x), to_pixels(current.y)
    return (px + left, py + top, right - left, bottom - top)


def draw_cell(screen: pygame.Surface, block: Block, color) -> None:
    rect = pygame.Rect(to_pixels(block.x), to_pixels(block.y), CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


def draw_walls(screen: pygame.Surface, width: int, height: int) -> None:
    for x in range(width):
        draw_cell(screen, Block(x, 0), BORDER_COLOR)
        draw_cell(screen, Block(x, height - 1), BORDER_COLOR)
    for y in range(height):
        draw_cell(screen, Block(0, y), BORDER_COLOR)
        draw_cell(screen, Block(width - 1, y), BORDER_COLOR)


def draw_snake(screen: pygame.Surface, snap: GameSnapshot) -> None:
    body, digesting = snap.body, snap.digesting
    for i, block in enumerate(body):
        if i == 0:
            draw_cell(screen, block, HEAD_COLOR)
        elif digesting[i]:
            # A swallowed item fills the whole cell.
            draw_cell(screen, block, BODY_COLOR)
        else:
            neighbours = [body[i - 1]]
            if i + 1 < len(body) and digesting[i + 1]:
                neighbours.append(body[i + 1])
            pygame.draw.rect(screen, BODY_COLOR, pygame.Rect(*segment_rect(block, neighbours)))


# ---------- Frames ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot) -> None:
    screen.fill(BG_COLOR)
    draw_walls(screen, snap.width, snap.height)
    if snap.food is not None:
        draw_cell(screen, snap.food, FOOD_COLOR)
    draw_snake(screen, snap)

    # score strip
    strip = pygame.Rect(0, to_pixels(snap.height), to_pixels(snap.width), to_pixels(SCORE_STRIP))
    pygame.draw.rect(screen, BORDER_COLOR, strip)
    txt = font.render(f"Score: {snap.score}", True, FOOD_COLOR)
    screen.blit(txt, txt.get_rect(center=strip.center))


def draw_game_over(
    screen: pygame.Surface,
    font: pygame.font.Font,
    snap: GameSnapshot,
    score_lines: Optional[List[str]] = None,
    prompt: Optional[str] = None,
) -> None:
    w, h = to_pixels(snap.width), to_pixels(snap.height)
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill(GAME_OVER_COLOR)  # RGBA
    screen.blit(overlay, (0, 0))

    title = "BOARD FULL" if snap.board_full else "GAME OVER"
    lines = [title, prompt or "Press R to restart", f"Score: {snap.score}"]
    if score_lines:
        lines += [""] + score_lines

    line_h = font.get_linesize()
    y = h // 2 - (len(lines) * line_h) // 2
    for line in lines:
        if line:
            surf = font.render(line, True, TEXT_COLOR)
            screen.blit(surf, surf.get_rect(center=(w // 2, y)))
        y += line_h
