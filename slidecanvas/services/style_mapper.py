"""
Style Mapper

Best-effort classification of free-form presentation styles (hex colors,
font families, point sizes, shape-type names) into the closed style
vocabulary supported by the canvas. Every classifier is a pure function
that always returns a value from its closed set.

Classification is driven by ordered ``(predicate, result)`` rule tables
evaluated top to bottom; the first match wins, otherwise the caller's
default applies.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

from slidecanvas.models.component import Component
from slidecanvas.models.scene import CanvasColor, CanvasFill, CanvasFont, CanvasSize, GeoKind


PALETTE: Tuple[str, ...] = (
    'black', 'grey', 'light-violet', 'violet', 'blue', 'light-blue',
    'yellow', 'orange', 'green', 'light-green', 'light-red', 'red',
)

ColorRule = Tuple[Callable[[str], bool], CanvasColor]


def _is(*values: str) -> Callable[[str], bool]:
    return lambda hex_color: hex_color in values


def _starts(*prefixes: str) -> Callable[[str], bool]:
    return lambda hex_color: hex_color.startswith(prefixes)


def _has_any(*chars: str) -> Callable[[str], bool]:
    return lambda hex_color: any(c in hex_color for c in chars)


def _all(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda hex_color: all(p(hex_color) for p in predicates)


def _any(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda hex_color: any(p(hex_color) for p in predicates)


def _not(predicate: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda hex_color: not predicate(hex_color)


# Text colors: a few known brand colors, then coarse hue buckets
TEXT_COLOR_RULES: List[ColorRule] = [
    (_is('#000000'), 'black'),
    (_is('#e97132'), 'orange'),
    (_is('#4ea72e'), 'green'),
    # Reddish/orange colors
    (_all(_starts('#ff', '#e', '#d'), _has_any('7', '8', '9')), 'orange'),
    (_starts('#ff', '#e', '#d'), 'red'),
    (_any(_starts('#4'), _all(_starts('#0'), _has_any('a'))), 'green'),
    (_starts('#0'), 'blue'),
]

# Fill and stroke colors: PowerPoint theme colors, then ranges, then first hex digit
SHAPE_COLOR_RULES: List[ColorRule] = [
    (_is('#000000'), 'black'),
    (_is('#ffffff'), 'grey'),  # no white on the canvas
    (_is('#ed7d31'), 'orange'),
    (_is('#4472c4'), 'blue'),
    (_is('#5b9bd5'), 'light-blue'),
    (_is('#70ad47'), 'green'),
    (_is('#ffc000'), 'yellow'),
    (_is('#c55a5a'), 'red'),
    (_any(_starts('#ed', '#e9'), _all(_starts('#f'), _not(_has_any('ff')))), 'orange'),
    (_starts('#44', '#45'), 'blue'),
    (_starts('#5b', '#5a'), 'light-blue'),
    (_starts('#70', '#6', '#4e'), 'green'),
    (_all(_starts('#ff'), _has_any('c')), 'yellow'),
    (_starts('#ff'), 'red'),
    (_any(_starts('#c5'), _has_any('red')), 'red'),
    (_starts('#e7', '#a5'), 'grey'),
    (_starts('#4'), 'blue'),
    (_starts('#5'), 'light-blue'),
    (_starts('#7', '#6'), 'green'),
    (_starts('#e', '#f'), 'orange'),
]


def classify_color(hex_color: Optional[str], rules: Sequence[ColorRule], default: CanvasColor) -> CanvasColor:
    """Classify a hex color with the given rule table; absent/transparent yields ``default``"""
    if not hex_color:
        return default
    value = hex_color.lower()
    if value == 'transparent':
        return default
    for predicate, color in rules:
        if predicate(value):
            return color
    return default


def classify_text_color(hex_color: Optional[str]) -> CanvasColor:
    return classify_color(hex_color, TEXT_COLOR_RULES, 'black')


def classify_fill_color(hex_color: Optional[str]) -> CanvasColor:
    return classify_color(hex_color, SHAPE_COLOR_RULES, 'grey')


def classify_stroke_color(hex_color: Optional[str]) -> CanvasColor:
    return classify_color(hex_color, SHAPE_COLOR_RULES, 'black')


def has_visible_color(value: Optional[str]) -> bool:
    return bool(value) and value.lower() != 'transparent'


def resolve_fill_style(background_color: Optional[str]) -> CanvasFill:
    return 'solid' if has_visible_color(background_color) else 'none'


def resolve_geo_color(fill_color: CanvasColor, stroke_color: CanvasColor) -> CanvasColor:
    """A geo shape has a single color: the fill, unless that is the grey fallback"""
    return stroke_color if fill_color == 'grey' else fill_color


# Fonts: case-insensitive substring match, first bucket wins
FONT_RULES: List[Tuple[Tuple[str, ...], CanvasFont]] = [
    (('times', 'georgia', 'serif'), 'serif'),
    (('courier', 'consolas', 'monaco', 'mono'), 'mono'),
    (('comic', 'marker', 'sketch'), 'draw'),
]


def classify_font(font_family: Optional[str]) -> CanvasFont:
    if not font_family:
        return 'sans'
    family = font_family.lower()
    for keywords, font in FONT_RULES:
        if any(keyword in family for keyword in keywords):
            return font
    # Arial, Helvetica, Calibri and everything else
    return 'sans'


# Point size upper bounds, inclusive
SIZE_RULES: List[Tuple[float, CanvasSize]] = [
    (10, 's'),
    (13, 's'),
    (18, 'm'),
    (23, 'l'),
]


def classify_size(font_size: Optional[float]) -> CanvasSize:
    if not font_size:
        return 'm'
    for upper_bound, size in SIZE_RULES:
        if font_size <= upper_bound:
            return size
    return 'xl'


_STAR_POINTS = (4, 5, 6, 8, 10, 12, 16, 24, 32)

GEO_TYPE_MAP: Dict[str, GeoKind] = {
    'rect': 'rectangle',
    'rectangle': 'rectangle',
    'ellipse': 'ellipse',
    'oval': 'ellipse',
    'triangle': 'triangle',
    'rtTriangle': 'triangle',
    'diamond': 'diamond',
    'pentagon': 'pentagon',
    'hexagon': 'hexagon',
    'octagon': 'octagon',
    **{f'star{n}': 'star' for n in _STAR_POINTS},
    **{f'{n}-point star': 'star' for n in _STAR_POINTS},
    'rightArrow': 'arrow-right',
    'right arrow': 'arrow-right',
    'leftArrow': 'arrow-left',
    'left arrow': 'arrow-left',
    'upArrow': 'arrow-up',
    'up arrow': 'arrow-up',
    'downArrow': 'arrow-down',
    'down arrow': 'arrow-down',
    'trapezoid': 'trapezoid',
    'cloud': 'cloud',
    'heart': 'heart',
}


def classify_geo(shape_type: Optional[str]) -> GeoKind:
    """Exact, case-sensitive lookup; unknown names fall back to a rectangle"""
    if not shape_type:
        return 'rectangle'
    return GEO_TYPE_MAP.get(shape_type, 'rectangle')


def resolve_shape_type_name(component: Component) -> str:
    return (
        component.style.shape_type
        or component.metadata.shape_type
        or component.metadata.preset
        or 'rectangle'
    )
