"""HTMLExporter: standalone HTML preview of an arrangement."""

from __future__ import annotations

import logging
import pathlib

import jinja2

from ..layout.arranger import ArrangementResult
from ..layout.geometry import Rect
from .serializers import serialize_result

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"

PREVIEW_MARGIN = 20.0
BOX_COLORS = ["#4e79a7", "#f28e2b", "#e15759", "#76b7b2", "#59a14f", "#edc948"]


class HTMLExporter:
    """Export an arrangement as a self-contained HTML file with an inline SVG."""

    @staticmethod
    def render(
        result: ArrangementResult,
        frame: Rect,
        title: str = "box-arrange",
        labels: list[str] | None = None,
    ) -> str:
        """Return the preview HTML as a string.

        Parameters
        ----------
        result : ArrangementResult to draw
        frame : the bounding frame the result was arranged within
        title : page title
        labels : optional per-box labels (defaults to the item index)
        """
        if labels is not None and len(labels) != len(result):
            raise ValueError(
                f"Expected {len(result)} labels, got {len(labels)}."
            )
        boxes = [
            {
                **f.to_dict(),
                "label": labels[i] if labels is not None else str(i),
                "color": BOX_COLORS[i % len(BOX_COLORS)],
            }
            for i, f in enumerate(result)
        ]
        # Viewport covers the frame and any box drawn outside it.
        rects = [frame, *result]
        min_x = min(r.x for r in rects) - PREVIEW_MARGIN
        min_y = min(r.y for r in rects) - PREVIEW_MARGIN
        max_x = max(r.right for r in rects) + PREVIEW_MARGIN
        max_y = max(r.bottom for r in rects) + PREVIEW_MARGIN

        env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
            autoescape=jinja2.select_autoescape(["html", "j2"]),
        )
        template = env.get_template("preview.html.j2")
        return template.render(
            title=title,
            frame=frame.to_dict(),
            boxes=boxes,
            view_box=f"{min_x} {min_y} {max_x - min_x} {max_y - min_y}",
            width=max_x - min_x,
            height=max_y - min_y,
            result_json=serialize_result(result),
        )

    @staticmethod
    def export(
        path: str | pathlib.Path,
        result: ArrangementResult,
        frame: Rect,
        title: str = "box-arrange",
        labels: list[str] | None = None,
    ) -> None:
        """Write the preview HTML to ``path``."""
        path = pathlib.Path(path)
        html = HTMLExporter.render(result, frame, title=title, labels=labels)
        path.write_text(html, encoding="utf-8")
        logger.debug("wrote arrangement preview to %s", path)
