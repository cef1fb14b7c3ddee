"""
Shape Renderer.

Paints diagram shapes with QPainter. Used by the drawing canvas for
every root shape and for the shape under construction (including the
selection marquee).
"""

import math
from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import QPainter, QColor, QPen, QBrush, QFont, QPolygonF

from models.geometry import Point, Rect
from models.shapes import (
    BasicShape, CompositeShape, Link, LinkKind, SelectionRectangle, Shape, ShapeType,
)


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def _qpoint(point: Point) -> QPointF:
    return QPointF(point.x, point.y)


class ShapeRenderer:
    """
    Static utility class for rendering canvas shapes.

    Dispatches on the shape variant; groups render their descendants
    recursively.
    """

    # Colors
    FILL_COLOR = QColor("#F3F4F6")
    STROKE_COLOR = QColor("#374151")
    SELECTION_COLOR = QColor("#3B82F6")  # Blue
    GROUP_COLOR = QColor("#9CA3AF")
    MARQUEE_FILL = QColor(59, 130, 246, 40)
    PORT_SIZE = 6.0
    ARROW_SIZE = 12.0

    show_ports_on_selection = True

    @staticmethod
    def draw(painter: QPainter, shape: Shape):
        """Render any shape variant."""
        if isinstance(shape, BasicShape):
            ShapeRenderer.draw_basic(painter, shape)
        elif isinstance(shape, CompositeShape):
            ShapeRenderer.draw_group(painter, shape)
        elif isinstance(shape, Link):
            ShapeRenderer.draw_link(painter, shape)
        elif isinstance(shape, SelectionRectangle):
            ShapeRenderer.draw_marquee(painter, shape)

    @staticmethod
    def draw_basic(painter: QPainter, shape: BasicShape):
        painter.save()
        rect = _qrect(shape.get_bounds())

        painter.setBrush(QBrush(ShapeRenderer.FILL_COLOR))
        painter.setPen(QPen(ShapeRenderer.STROKE_COLOR, 1.5))
        if shape.shape_type == ShapeType.OVAL:
            painter.drawEllipse(rect)
        else:
            painter.drawRect(rect)

        if shape.name:
            ShapeRenderer._draw_label(painter, shape)

        if shape.selected and ShapeRenderer.show_ports_on_selection:
            ShapeRenderer._draw_ports(painter, shape)

        painter.restore()

    @staticmethod
    def _draw_label(painter: QPainter, shape: BasicShape):
        label = shape.label
        font = QFont()
        font.setPointSize(max(1, label.font_size))
        painter.setFont(font)

        metrics = painter.fontMetrics()
        text_width = metrics.horizontalAdvance(label.text) + 12
        text_height = metrics.height() + 6
        center = shape.get_bounds().center
        label_rect = QRectF(center.x - text_width / 2, center.y - text_height / 2,
                            text_width, text_height)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(label.color)))
        if label.shape == "oval":
            painter.drawEllipse(label_rect)
        else:
            painter.drawRect(label_rect)

        # Pick readable text over the label background
        background = QColor(label.color)
        text_color = QColor("#FFFFFF") if background.lightness() < 128 else QColor("#111827")
        painter.setPen(QPen(text_color))
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, label.text)

    @staticmethod
    def _draw_ports(painter: QPainter, shape: BasicShape):
        size = ShapeRenderer.PORT_SIZE
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(ShapeRenderer.SELECTION_COLOR))
        for point in shape.ports().values():
            painter.drawRect(QRectF(point.x - size / 2, point.y - size / 2, size, size))

    @staticmethod
    def draw_group(painter: QPainter, group: CompositeShape):
        for child in group.children:
            ShapeRenderer.draw(painter, child)

        painter.save()
        color = ShapeRenderer.SELECTION_COLOR if group.selected else ShapeRenderer.GROUP_COLOR
        pen = QPen(color, 1.0, Qt.PenStyle.DashLine)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(_qrect(group.get_bounds()).adjusted(-4, -4, 4, 4))
        painter.restore()

    @staticmethod
    def draw_link(painter: QPainter, link: Link):
        painter.save()
        color = ShapeRenderer.SELECTION_COLOR if link.selected else ShapeRenderer.STROKE_COLOR
        painter.setPen(QPen(color, 2.0 if link.selected else 1.5))

        start = _qpoint(link.start_point)
        end = _qpoint(link.end_point)
        painter.drawLine(start, end)

        if link.kind != LinkKind.ASSOCIATION and link.start_point != link.end_point:
            ShapeRenderer._draw_link_head(painter, link, color)

        painter.restore()

    @staticmethod
    def _draw_link_head(painter: QPainter, link: Link, color: QColor):
        """Hollow triangle for generalization, filled diamond for composition."""
        size = ShapeRenderer.ARROW_SIZE
        end = link.end_point
        angle = math.atan2(end.y - link.start_point.y, end.x - link.start_point.x)

        def offset(distance: float, spread: float) -> QPointF:
            return QPointF(end.x - distance * math.cos(angle + spread),
                           end.y - distance * math.sin(angle + spread))

        if link.kind == LinkKind.GENERALIZATION:
            head = QPolygonF([_qpoint(end), offset(size, math.pi / 7), offset(size, -math.pi / 7)])
            painter.setBrush(QBrush(QColor("#FFFFFF")))
        else:
            back = QPointF(end.x - 2 * size * math.cos(angle), end.y - 2 * size * math.sin(angle))
            head = QPolygonF([_qpoint(end), offset(size, math.pi / 6), back, offset(size, -math.pi / 6)])
            painter.setBrush(QBrush(color))
        painter.drawPolygon(head)

    @staticmethod
    def draw_marquee(painter: QPainter, marquee: SelectionRectangle):
        painter.save()
        painter.setPen(QPen(ShapeRenderer.SELECTION_COLOR, 1.0, Qt.PenStyle.DashLine))
        painter.setBrush(QBrush(ShapeRenderer.MARQUEE_FILL))
        painter.drawRect(_qrect(marquee.rect))
        painter.restore()
