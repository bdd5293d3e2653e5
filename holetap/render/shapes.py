import pygame
from typing import Tuple


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24,
              anchor: str = "topleft") -> pygame.Rect:
    """`anchor` is any pygame.Rect position attribute: topleft, center, topright, ..."""
    font = pygame.font.SysFont(None, size)
    img = font.render(text, True, color)
    rect = img.get_rect(**{anchor: pos})
    surface.blit(img, rect)
    return rect


def draw_alpha_circle(surface: pygame.Surface, color, center: Tuple[float, float], radius: float,
                      alpha: float, width: int = 0) -> None:
    """Circle blended with 0..1 alpha (pygame.draw ignores alpha on opaque surfaces)."""
    r = max(1, int(radius))
    a = int(max(0.0, min(1.0, alpha)) * 255)
    if a <= 0:
        return
    circle_surf = pygame.Surface((r * 2 + 4, r * 2 + 4), pygame.SRCALPHA)
    pygame.draw.circle(circle_surf, (*color[:3], a), (r + 2, r + 2), r, width=width)
    surface.blit(circle_surf, (int(center[0]) - r - 2, int(center[1]) - r - 2))


def ease_out_back(t: float) -> float:
    c1 = 1.70158
    c3 = c1 + 1
    return 1 + c3 * (t - 1) ** 3 + c1 * (t - 1) ** 2
