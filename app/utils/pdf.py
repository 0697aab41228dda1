import io
import textwrap
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence, Tuple

from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from app.core.exceptions import UpstreamError


# A4 at 100 dpi
PAGE_SIZE = (827, 1169)
MARGIN = 50
LINE_HEIGHT = 14
WRAP_WIDTH = 120


class ReportRenderer:
    """
    Renders table snapshots into a plain multi-page PDF.
    Each section prints one line per row as 'key: value' pairs.
    """

    def __init__(self, title: str = "Factory Operations Report"):
        self.title = title
        self.font = ImageFont.load_default()

    def _layout(self, sections: Sequence[Tuple[str, List[Dict[str, Any]]]]) -> List[str]:
        lines = [
            self.title,
            f"Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M')} UTC",
            "",
        ]
        for heading, rows in sections:
            lines.append(f"{heading} ({len(rows)} rows)")
            lines.append("-" * len(heading))
            if not rows:
                lines.append("  No data")
            for row in rows:
                text = " | ".join(f"{key}: {value}" for key, value in row.items())
                lines.extend(textwrap.wrap(
                    text, WRAP_WIDTH, initial_indent="  ", subsequent_indent="    "
                ) or ["  "])
            lines.append("")
        return lines

    def _paginate(self, lines: List[str]) -> List[Image.Image]:
        per_page = (PAGE_SIZE[1] - 2 * MARGIN) // LINE_HEIGHT
        pages = []
        for start in range(0, max(len(lines), 1), per_page):
            page = Image.new("RGB", PAGE_SIZE, "white")
            draw = ImageDraw.Draw(page)
            y = MARGIN
            for line in lines[start:start + per_page]:
                draw.text((MARGIN, y), line, fill="black", font=self.font)
                y += LINE_HEIGHT
            pages.append(page)
        return pages

    def render(
        self,
        production: List[Dict[str, Any]],
        logistics: List[Dict[str, Any]],
        tracking: List[Dict[str, Any]],
    ) -> bytes:
        sections = [
            ("Production", production),
            ("Module Requests", logistics),
            ("Tracking", tracking),
        ]
        try:
            pages = self._paginate(self._layout(sections))
            buffer = io.BytesIO()
            pages[0].save(
                buffer,
                format="PDF",
                save_all=True,
                append_images=pages[1:],
                resolution=100.0,
            )
        except (OSError, ValueError) as e:
            logger.error(f"PDF rendering failed: {e}")
            raise UpstreamError("Failed to generate report")

        return buffer.getvalue()


report_renderer = ReportRenderer()
