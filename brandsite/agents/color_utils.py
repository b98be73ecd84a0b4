"""Color parsing and HSL helpers shared by the extractors and the fusion engine."""
import colorsys
import re
from typing import Optional, Tuple

HEX_PATTERN = re.compile(r'#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b')
RGB_PATTERN = re.compile(r'rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})')


def parse_color_value(color_val: str) -> Optional[str]:
    """Parse a hex or rgb()/rgba() literal into lowercase #rrggbb."""
    color_val = (color_val or '').strip().lower()

    if color_val.startswith('#'):
        digits = color_val[1:]
        if len(digits) == 3 and all(c in '0123456789abcdef' for c in digits):
            return '#' + ''.join(c * 2 for c in digits)
        if len(digits) >= 6 and all(c in '0123456789abcdef' for c in digits[:6]):
            return '#' + digits[:6]
        return None

    rgb_match = RGB_PATTERN.match(color_val)
    if rgb_match:
        r, g, b = (min(int(v), 255) for v in rgb_match.groups())
        return f"#{r:02x}{g:02x}{b:02x}"

    return None


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    normalized = parse_color_value(hex_color) or '#000000'
    return int(normalized[1:3], 16), int(normalized[3:5], 16), int(normalized[5:7], 16)


def hex_to_hsl(hex_color: str) -> Tuple[float, float, float]:
    """Hue, saturation and lightness, each in 0..1."""
    r, g, b = hex_to_rgb(hex_color)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return h, s, l


def hsl_to_hex(h: float, s: float, l: float) -> str:
    r, g, b = colorsys.hls_to_rgb(h, min(max(l, 0.0), 1.0), s)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"


def saturation(hex_color: str) -> float:
    return hex_to_hsl(hex_color)[1]


def lightness(hex_color: str) -> float:
    return hex_to_hsl(hex_color)[2]


def shift_lightness(hex_color: str, amount: float = 0.2) -> str:
    """Lighten dark colors and darken light ones by a fixed amount."""
    h, s, l = hex_to_hsl(hex_color)
    if l > 0.6:
        return hsl_to_hex(h, s, l - amount)
    return hsl_to_hex(h, s, l + amount)
