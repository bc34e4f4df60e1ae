"""
PDF renderer for the employment application form
Draws the primitives produced by form_layout with ReportLab
"""

from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from hrapply.services.form_layout import (
    CHECK_MARK_OFFSET,
    CHECKBOX_SIZE,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    Box,
    Checkbox,
    Image,
    Line,
    Page,
    Text,
    build_form,
)

logger = structlog.get_logger()

THAI_FONT = "Thai"
THAI_BOLD_FONT = "Thai-Bold"
THAI_FONT_FILE = "THSarabunNew.ttf"
THAI_BOLD_FONT_FILE = "THSarabunNew-Bold.ttf"

# ZapfDingbats '3' is a check mark and is always available
CHECK_MARK_FONT = "ZapfDingbats"
CHECK_MARK_GLYPH = "3"


class FormRenderer:
    """
    Renders Application Records onto the fixed two-page A4 form
    Uses bundled Thai fonts when present, Helvetica otherwise
    """

    def __init__(self, fonts_dir: Optional[str] = None, logo_path: Optional[str] = None):
        self.fonts_dir = Path(fonts_dir) if fonts_dir else None
        self.logo_path = Path(logo_path) if logo_path else None

        # Font settings
        self.fonts = {
            'normal': 'Helvetica',
            'bold': 'Helvetica-Bold',
        }

        self._register_fonts()

    def _register_fonts(self):
        """Register the Thai fonts if they ship with the deployment"""
        if self.fonts_dir is None:
            return

        regular = self.fonts_dir / THAI_FONT_FILE
        bold = self.fonts_dir / THAI_BOLD_FONT_FILE

        try:
            if regular.exists():
                pdfmetrics.registerFont(TTFont(THAI_FONT, str(regular)))
                self.fonts['normal'] = THAI_FONT
                self.fonts['bold'] = THAI_FONT
                if bold.exists():
                    pdfmetrics.registerFont(TTFont(THAI_BOLD_FONT, str(bold)))
                    self.fonts['bold'] = THAI_BOLD_FONT
        except Exception as e:
            logger.warning("Could not register Thai fonts, using defaults", error=str(e))
            self.fonts = {'normal': 'Helvetica', 'bold': 'Helvetica-Bold'}

        logger.info("Form fonts selected", normal=self.fonts['normal'], bold=self.fonts['bold'])

    @property
    def logo(self) -> Optional[str]:
        if self.logo_path is not None and self.logo_path.exists():
            return str(self.logo_path)
        return None

    def render(self, record: Optional[Dict[str, Any]]) -> bytes:
        """
        Render the full form

        Args:
            record: Application Record, possibly partial

        Returns:
            bytes: PDF document
        """
        pages = build_form(record, logo_path=self.logo)

        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(PAGE_WIDTH, PAGE_HEIGHT))
        c.setTitle("Employment Application")

        for page in pages:
            self._draw_page(c, page)
            c.showPage()

        c.save()
        pdf_bytes = buffer.getvalue()

        logger.info("Application form rendered", pages=len(pages), size_bytes=len(pdf_bytes))
        return pdf_bytes

    def _draw_page(self, c: canvas.Canvas, page: Page):
        c.setLineWidth(1)
        for item in page.items:
            if isinstance(item, Text):
                self._draw_text(c, item)
            elif isinstance(item, Box):
                c.rect(item.x, PAGE_HEIGHT - item.y - item.height, item.width, item.height, stroke=1, fill=0)
            elif isinstance(item, Line):
                c.line(item.x1, PAGE_HEIGHT - item.y1, item.x2, PAGE_HEIGHT - item.y2)
            elif isinstance(item, Checkbox):
                self._draw_checkbox(c, item)
            elif isinstance(item, Image):
                self._draw_image(c, item)

    def _draw_text(self, c: canvas.Canvas, item: Text):
        """Single line at a top-left anchor; never wrapped or clipped"""
        font_name = self.fonts['normal']
        baseline = PAGE_HEIGHT - item.y - pdfmetrics.getAscent(font_name, item.size)

        c.setFont(font_name, item.size)
        if item.align == "center" and item.width:
            c.drawCentredString(item.x + item.width / 2, baseline, item.text)
        elif item.align == "right" and item.width:
            c.drawRightString(item.x + item.width, baseline, item.text)
        else:
            c.drawString(item.x, baseline, item.text)

    def _draw_checkbox(self, c: canvas.Canvas, item: Checkbox):
        c.rect(item.x, PAGE_HEIGHT - item.y - CHECKBOX_SIZE, CHECKBOX_SIZE, CHECKBOX_SIZE, stroke=1, fill=0)
        if item.checked:
            dx, dy = CHECK_MARK_OFFSET
            mark_size = 7.5
            baseline = PAGE_HEIGHT - (item.y + dy) - pdfmetrics.getAscent(CHECK_MARK_FONT, mark_size)
            c.setFont(CHECK_MARK_FONT, mark_size)
            c.drawString(item.x + dx, baseline, CHECK_MARK_GLYPH)

    def _draw_image(self, c: canvas.Canvas, item: Image):
        image = ImageReader(item.path)
        image_width, image_height = image.getSize()
        height = item.width * image_height / image_width
        c.drawImage(image, item.x, PAGE_HEIGHT - item.y - height, item.width, height, mask='auto')
