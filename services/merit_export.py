import io
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import pandas as pd
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

TABULAR_COLUMNS = [
    "Rank",
    "Name",
    "Roll Number",
    "Semester",
    "Batch",
    "Total Marks",
    "Max Marks",
    "Percentage",
]
TABULAR_SHEET_NAME = "Merit List"

EXCEL_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MIMETYPE = "text/csv"
PDF_MIMETYPE = "application/pdf"

DEFAULT_PRINT_MAX_ENTRIES = 30
DEFAULT_NAME_WIDTH = 20

# Print layout, in millimetres from the top-left corner of an A4 page
PRINT_TITLE = "Merit List"
PRINT_HEADER = ("Rank", "Name", "Roll Number", "Total", "Percentage")
PRINT_COLUMNS_X = (20, 40, 90, 130, 160)
PRINT_RULE_END_X = 190
PAGE_TOP_Y = 20
PAGE_BOTTOM_Y = 280
ROW_HEIGHT = 8


def format_percentage(percentage):
    return f"{percentage:.2f}%"


def export_filename(extension, semester=None):
    return f"merit-list-{semester or 'all'}.{extension}"


# =========================================================
# TABULAR EXPORT
# =========================================================

def tabular_rows(entries):
    return [
        {
            "Rank": entry.rank,
            "Name": entry.student.name,
            "Roll Number": entry.student.roll_number,
            "Semester": entry.student.semester,
            "Batch": entry.student.batch,
            "Total Marks": entry.total_marks,
            "Max Marks": entry.max_marks,
            "Percentage": format_percentage(entry.percentage),
        }
        for entry in entries
    ]


def tabular_frame(entries):
    return pd.DataFrame(tabular_rows(entries), columns=TABULAR_COLUMNS)


def export_tabular(entries, file_format="excel"):
    """Render the entries as an .xlsx workbook or a CSV file, in input order."""
    df = tabular_frame(entries)
    output = io.BytesIO()

    if file_format == "excel":
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=TABULAR_SHEET_NAME)
    elif file_format == "csv":
        output.write(df.to_csv(index=False).encode("utf-8"))
    else:
        raise ValueError(f"Unsupported tabular format: {file_format}")

    logger.info("Exported %d merit rows as %s", len(df), file_format)
    return output.getvalue()


# =========================================================
# PRINT EXPORT
# =========================================================

@dataclass(frozen=True)
class PrintRow:
    page: int
    y: float
    cells: Tuple[str, ...]


@dataclass(frozen=True)
class PrintDocument:
    title: str
    subtitle: Optional[str]
    header_y: float
    rows: List[PrintRow]
    page_count: int

    @property
    def row_count(self):
        return len(self.rows)

    def rows_on_page(self, page):
        return [row for row in self.rows if row.page == page]


def print_cells(entry, name_width=DEFAULT_NAME_WIDTH):
    return (
        str(entry.rank),
        entry.student.name[:name_width],
        entry.student.roll_number,
        f"{entry.total_marks}/{entry.max_marks}",
        format_percentage(entry.percentage),
    )


def build_print_document(
    entries,
    title_suffix=None,
    max_entries=DEFAULT_PRINT_MAX_ENTRIES,
    name_width=DEFAULT_NAME_WIDTH,
):
    """
    Lay out the print version of the merit list.

    Only the first ``max_entries`` entries are printed (``None`` prints all).
    A running y position tracks the next line; once it passes the bottom of
    the page the next row starts a new page at the top.
    """
    subtitle = f"Semester: {title_suffix}" if title_suffix else None
    header_y = 45 if subtitle else 35

    selected = list(entries) if max_entries is None else list(entries)[:max_entries]

    rows = []
    page = 0
    y = header_y + 15
    for entry in selected:
        if y > PAGE_BOTTOM_Y:
            page += 1
            y = PAGE_TOP_Y
        rows.append(PrintRow(page=page, y=y, cells=print_cells(entry, name_width)))
        y += ROW_HEIGHT

    return PrintDocument(
        title=PRINT_TITLE,
        subtitle=subtitle,
        header_y=header_y,
        rows=rows,
        page_count=page + 1,
    )


def render_print_document(document):
    buffer = io.BytesIO()
    page_height = A4[1]
    pdf = canvas.Canvas(buffer, pagesize=A4)
    pdf.setTitle(document.title)

    def at(x, y):
        return x * mm, page_height - y * mm

    for page in range(document.page_count):
        if page == 0:
            pdf.setFont("Helvetica-Bold", 20)
            pdf.drawString(*at(20, 20), document.title)
            if document.subtitle:
                pdf.setFont("Helvetica", 14)
                pdf.drawString(*at(20, 30), document.subtitle)

            pdf.setFont("Helvetica-Bold", 10)
            for x, label in zip(PRINT_COLUMNS_X, PRINT_HEADER):
                pdf.drawString(*at(x, document.header_y), label)
            rule_y = document.header_y + 5
            pdf.line(*at(20, rule_y), *at(PRINT_RULE_END_X, rule_y))

        pdf.setFont("Helvetica", 10)
        for row in document.rows_on_page(page):
            for x, text in zip(PRINT_COLUMNS_X, row.cells):
                pdf.drawString(*at(x, row.y), text)

        pdf.showPage()

    pdf.save()
    return buffer.getvalue()


def export_printable(
    entries,
    title_suffix=None,
    max_entries=DEFAULT_PRINT_MAX_ENTRIES,
    name_width=DEFAULT_NAME_WIDTH,
):
    document = build_print_document(
        entries,
        title_suffix=title_suffix,
        max_entries=max_entries,
        name_width=name_width,
    )
    logger.info(
        "Exported %d merit rows to PDF across %d page(s)",
        document.row_count,
        document.page_count,
    )
    return render_print_document(document)
