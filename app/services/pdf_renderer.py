"""
JSA PDF rendering with ReportLab

The document is drawn top-down on a canvas, keeping a text cursor the way a
flowing layout engine would: each line advances the cursor, and a line that
would cross the bottom margin starts a new page.
"""

from io import BytesIO
from typing import List, Optional

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from app.schemas.jsa import RenderJsaRequest

TITLE = "JOB SAFETY ANALYSIS (JSA)"
DISCLAIMER = (
    "Disclaimer: AI-generated guidance. Not a legal determination or guaranteed "
    "compliance. Verify with a qualified safety professional and current "
    "OSHA/ANSI/NIOSH standards."
)

FONT = "Helvetica"
MARGIN = 50
LINE_SPACING = 1.2
HEADING_SIZE = 12
BODY_SIZE = 11

# Signature rules: two segments side by side
SIGNATURE_SEGMENTS = ((50, 300), (320, 560))


class JsaPdfWriter:
    """Cursor-based text writer over a ReportLab canvas"""

    def __init__(self, pagesize=LETTER, margin: float = MARGIN):
        self.buffer = BytesIO()
        self.canvas = canvas.Canvas(self.buffer, pagesize=pagesize)
        self.canvas.setTitle(TITLE)
        self.page_width, self.page_height = pagesize
        self.margin = margin
        self.font_size = BODY_SIZE
        self.y = self.page_height - margin

    @property
    def text_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def line_height(self) -> float:
        return self.font_size * LINE_SPACING

    def set_font_size(self, size: float) -> "JsaPdfWriter":
        self.font_size = size
        return self

    def add_page(self) -> None:
        self.canvas.showPage()
        self.y = self.page_height - self.margin

    def _ensure_room(self, height: float) -> None:
        if self.y - height < self.margin:
            self.add_page()

    def wrap(self, value: str, width: float) -> List[str]:
        """Split ``value`` into rows no wider than ``width``.

        Words go whole where they fit; a word wider than a row is broken
        between characters.
        """
        rows: List[str] = []
        for line in simpleSplit(value, FONT, self.font_size, width) or [""]:
            if stringWidth(line, FONT, self.font_size) <= width:
                rows.append(line)
                continue

            row, row_width = "", 0.0
            for char in line:
                char_width = stringWidth(char, FONT, self.font_size)
                if row and row_width + char_width > width:
                    rows.append(row)
                    row, row_width = "", 0.0
                row += char
                row_width += char_width
            rows.append(row)
        return rows

    def text(
        self, value: str, align: str = "left", underline: bool = False
    ) -> "JsaPdfWriter":
        """Write ``value`` wrapped to the text width, one line per row.

        Leading spaces indent every wrapped row of the value.
        """
        body = value.lstrip(" ")
        indent = stringWidth(" " * (len(value) - len(body)), FONT, self.font_size)

        for line in self.wrap(body, self.text_width - indent):
            self._ensure_room(self.line_height)
            self.y -= self.line_height
            self.canvas.setFont(FONT, self.font_size)
            baseline = self.y + (self.line_height - self.font_size)

            if align == "center":
                x = self.page_width / 2
                self.canvas.drawCentredString(x, baseline, line)
                x -= stringWidth(line, FONT, self.font_size) / 2
            else:
                x = self.margin + indent
                self.canvas.drawString(x, baseline, line)

            if underline:
                width = stringWidth(line, FONT, self.font_size)
                self.canvas.setLineWidth(0.5)
                self.canvas.line(x, baseline - 1.5, x + width, baseline - 1.5)
        return self

    def move_down(self, lines: float = 1) -> "JsaPdfWriter":
        self.y -= lines * self.line_height
        return self

    def heading(self, value: str, gap: float = 0.25) -> None:
        self.set_font_size(HEADING_SIZE).text(value, underline=True).move_down(gap)

    def signature_line(self) -> None:
        self._ensure_room(30)
        y = self.y - 20
        self.canvas.setLineWidth(1)
        for start, end in SIGNATURE_SEGMENTS:
            self.canvas.line(start, y, end, y)
        self.y = y - 10

    def to_bytes(self) -> bytes:
        self.canvas.save()
        return self.buffer.getvalue()


def _join(items: Optional[list], sep: str) -> str:
    return sep.join(items or [])


def render_jsa_pdf(request: RenderJsaRequest) -> bytes:
    """Render a JSA request to PDF bytes"""
    pdf = JsaPdfWriter()
    job = request.job

    # Header
    pdf.set_font_size(18).text(TITLE, align="center").move_down(0.5)
    pdf.set_font_size(10).text(DISCLAIMER, align="center").move_down()

    # Job info
    pdf.heading("Job Information")
    pdf.set_font_size(BODY_SIZE)
    pdf.text(f"Company: {job.company}")
    pdf.text(f"Task: {job.task}")
    pdf.text(f"Date: {job.date}")
    pdf.text(f"Location: {job.location}")
    if job.supervisor:
        pdf.text(f"Supervisor: {job.supervisor}")
    if job.crew:
        pdf.text(f"Crew: {_join(job.crew, ', ')}")
    pdf.move_down()

    # Hazards
    pdf.heading("Hazards & Controls")
    for idx, hazard in enumerate(request.hazards, start=1):
        pdf.set_font_size(BODY_SIZE)
        pdf.text(f"{idx}. Category: {hazard.category}")
        pdf.text(f"   Risk: {hazard.specific_risk}")
        if hazard.likelihood:
            pdf.text(f"   Likelihood: {hazard.likelihood}")
        if hazard.potential_severity:
            pdf.text(f"   Severity: {hazard.potential_severity}")
        pdf.text("   Controls:")
        for control in hazard.recommended_controls:
            pdf.text(f"     • {control}")
        pdf.text(f"   Required PPE: {_join(hazard.required_ppe, ', ')}")
        if hazard.references:
            pdf.text(f"   Notes: {_join(hazard.references, '; ')}")
        pdf.move_down(0.5)

    if request.verification_checklist:
        pdf.heading("Field Verification Checklist")
        pdf.set_font_size(BODY_SIZE)
        for i, item in enumerate(request.verification_checklist, start=1):
            pdf.text(f"[  ] {i}. {item}")
        pdf.move_down()

    # Sign-off
    pdf.heading("Sign-off", gap=0.5)
    pdf.set_font_size(BODY_SIZE)
    for label in ("Supervisor Signature:", "Employee Signature(s):", "Date:"):
        pdf.text(label).move_down(0.2)
        pdf.signature_line()

    if request.notes:
        pdf.add_page()
        pdf.heading("Additional Notes", gap=0.5)
        pdf.set_font_size(BODY_SIZE).text(request.notes)

    return pdf.to_bytes()
