"""
Table Decomposer

Breaks a table component into primitive canvas shapes: one background
rectangle per cell plus one text overlay per non-blank cell.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from slidecanvas.models.component import Component
from slidecanvas.models.scene import (
    CanvasColor,
    GeoProps,
    GeoShapeDescriptor,
    SceneShapeDescriptor,
    TextProps,
    TextShapeDescriptor,
    create_shape_id,
    to_rich_text,
)
from slidecanvas.services import diagnostics as diag
from slidecanvas.services.diagnostics import Diagnostics
from slidecanvas.services.geometry import place

logger = logging.getLogger(__name__)

DEFAULT_TABLE_WIDTH = 300
DEFAULT_TABLE_HEIGHT = 150
CELL_TEXT_PADDING_X = 8
CELL_TEXT_OFFSET_Y = 6
HEADER_CELL_COLOR: CanvasColor = 'blue'
DATA_CELL_COLOR: CanvasColor = 'light-blue'


@dataclass
class TableDecomposition:
    cells: List[GeoShapeDescriptor] = field(default_factory=list)
    texts: List[TextShapeDescriptor] = field(default_factory=list)
    # Emission order: each background followed by its text overlay, row-major
    shapes: List[SceneShapeDescriptor] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.shapes)


def _cell_text(cell: Any) -> str:
    if cell is None:
        return ""
    return str(cell)


def table_dimensions(component: Component) -> tuple:
    """(rows, cols) from metadata, derived from the data shape when not given"""
    table_data = component.metadata.table_data or []
    rows = component.metadata.rows or len(table_data)
    first_row = table_data[0] if table_data else None
    cols = component.metadata.cols or (len(first_row) if isinstance(first_row, list) else 0)
    return rows, cols


def decompose_table(
    component: Component,
    slide_index: int,
    index: int,
    frame_x: float,
    frame_y: float,
    parent_id: Optional[str],
    diagnostics: Optional[Diagnostics] = None,
) -> TableDecomposition:
    """
    Decompose a table component into cell shapes.

    Args:
        component: The table component (``metadata.table_data`` holds the grid)
        slide_index: 0-based slide index, used for identifiers
        index: Position of the component in stacking order, used when it has no id
        frame_x, frame_y: Slide frame origin (only used without a parent frame)
        parent_id: Frame id the cells are parented to, or None for absolute placement
        diagnostics: Collector for the empty-table diagnostic

    Returns:
        TableDecomposition with backgrounds, text overlays and the ordered shape list
    """
    result = TableDecomposition()
    key = component.key(index)
    table_data = component.metadata.table_data or []
    rows, cols = table_dimensions(component)

    if not table_data or rows <= 0 or cols <= 0:
        message = f"No table data found for table {key}"
        if diagnostics is not None:
            diagnostics.info(diag.EMPTY_TABLE, message, slide_index, component.id)
        else:
            logger.info(message)
        return result

    logger.debug(f"Processing table {key} with {rows} rows x {cols} columns")

    table_width = component.width or DEFAULT_TABLE_WIDTH
    table_height = component.height or DEFAULT_TABLE_HEIGHT
    cell_width = table_width / cols
    cell_height = table_height / rows

    table_x, table_y = place(component.x, component.y, frame_x, frame_y, parent_id is not None)
    has_header = bool(component.metadata.has_header)

    for row_index, row in enumerate(table_data):
        if not isinstance(row, list):
            continue

        for col_index, cell in enumerate(row):
            cell_x = table_x + col_index * cell_width
            cell_y = table_y + row_index * cell_height
            is_header = row_index == 0 and has_header

            background = GeoShapeDescriptor(
                id=create_shape_id(f"table-{slide_index}-{key}-cell-bg-{row_index}-{col_index}"),
                x=cell_x,
                y=cell_y,
                parent_id=parent_id,
                props=GeoProps(
                    geo='rectangle',
                    color=HEADER_CELL_COLOR if is_header else DATA_CELL_COLOR,
                    fill='solid',
                    size='s',
                    w=cell_width,
                    h=cell_height,
                ),
            )
            result.cells.append(background)
            result.shapes.append(background)

            content = _cell_text(cell)
            if not content.strip():
                continue

            text = TextShapeDescriptor(
                id=create_shape_id(f"table-{slide_index}-{key}-cell-text-{row_index}-{col_index}"),
                x=cell_x + CELL_TEXT_PADDING_X,
                y=cell_y + cell_height / 2 - CELL_TEXT_OFFSET_Y,
                parent_id=parent_id,
                props=TextProps(
                    rich_text=to_rich_text(content),
                    color='black',
                    size='s',
                    font='sans',
                ),
            )
            result.texts.append(text)
            result.shapes.append(text)

    logger.debug(f"Created table with {len(result.cells)} cells at ({table_x}, {table_y})")
    return result
