import zlib
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

CONTENT = b"BT /F1 24 Tf 72 720 Td (Hello World) Tj ET"


def _build_pdf(objects: list[bytes], trailer: bytes) -> bytes:
    """Serialize numbered objects (1..n, generation 0) with an exact xref table."""
    out = bytearray(b"%PDF-1.4\n")
    offsets: dict[int, int] = {}
    for number, body in enumerate(objects, start=1):
        offsets[number] = len(out)
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for number in range(1, len(objects) + 1):
        out += b"%010d 00000 n \n" % offsets[number]
    out += b"trailer\n" + trailer + b"\nstartxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


def _handmade_bytes() -> bytes:
    """
    Single-page document with known object numbers:
    1 Catalog, 2 Pages, 3 Page, 4 Flate content stream, 5 Font,
    6 Info (Title is an indirect reference), 7 the title string.
    """
    compressed = zlib.compress(CONTENT)
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R"
        b" /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d /Filter /FlateDecode >>\nstream\n" % len(compressed)
        + compressed
        + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        b"<< /Title 7 0 R /Producer (Handmade) >>",
        b"(Indirect Title)",
    ]
    return _build_pdf(objects, b"<< /Size 8 /Root 1 0 R /Info 6 0 R >>")


def _create_handmade_pdf(path: Path) -> None:
    path.write_bytes(_handmade_bytes())


def _create_updated_pdf(path: Path) -> None:
    """
    The handmade document plus one incremental update that replaces the
    catalog with generation 1 of object 1.
    """
    out = bytearray(_handmade_bytes())
    previous_xref = int(out.rsplit(b"startxref\n", 1)[1].split(b"\n", 1)[0])

    catalog_offset = len(out)
    out += b"1 1 obj\n<< /Type /Catalog /Pages 2 0 R /Revision 2 >>\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n1 1\n%010d 00001 n \n" % catalog_offset
    out += b"trailer\n<< /Size 8 /Root 1 1 R /Info 6 0 R /Prev %d >>\n" % previous_xref
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    path.write_bytes(bytes(out))


def _create_object_stream_pdf(path: Path) -> None:
    """
    PDF 1.5 layout: object 1 is an object stream holding the catalog (2) and
    the page tree (3); object 4 is an uncompressed cross-reference stream.
    """
    catalog = b"<< /Type /Catalog /Pages 3 0 R >>"
    pages = b"<< /Type /Pages /Kids [] /Count 0 >>"
    header = b"2 0 3 %d " % (len(catalog) + 1)
    body = header + catalog + b" " + pages

    out = bytearray(b"%PDF-1.5\n")
    object_stream_offset = len(out)
    out += b"1 0 obj\n<< /Type /ObjStm /N 2 /First %d /Length %d >>\nstream\n" % (
        len(header),
        len(body),
    )
    out += body + b"\nendstream\nendobj\n"

    xref_offset = len(out)
    # /W [1 2 1]: type, offset or containing stream, generation or index
    rows = [
        (0, 0, 255),
        (1, object_stream_offset, 0),
        (2, 1, 0),
        (2, 1, 1),
        (1, xref_offset, 0),
    ]
    table = b"".join(
        bytes([kind]) + field.to_bytes(2, "big") + bytes([last]) for kind, field, last in rows
    )
    out += b"4 0 obj\n<< /Type /XRef /Size 5 /W [1 2 1] /Root 2 0 R /Length %d >>\n" % len(table)
    out += b"stream\n"
    out += table + b"\nendstream\nendobj\n"
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    path.write_bytes(bytes(out))


def _create_paper_pdf(path: Path) -> None:
    """Creates a deterministic single-page paper for integration testing."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    text = c.beginText(40, height - 50)

    lines = [
        "SAMPLE PAPER TITLE",
        "",
        "INTRODUCTION:",
        "This is the first paragraph of the introduction.",
        "It continues on a second line.",
        "",
        "This is the second paragraph of the introduction.",
        "",
        "METHODS:",
        "Here we describe methods.",
        "",
        "REFERENCES",
        "[1] Doe, J. A study of things. 2020.",
        "[2] Roe, R. Another study. 2021.",
    ]

    for line in lines:
        text.textLine(line)

    c.drawText(text)
    c.showPage()
    c.save()


def _create_multipage_pdf(path: Path) -> None:
    """Creates a deterministic multi-page PDF for integration testing."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    # Page 1
    text = c.beginText(40, height - 50)
    page1_lines = [
        "MULTIPAGE DOCUMENT",
        "",
        "PAGE ONE CONTENT:",
        "This content is on page one.",
    ]
    for line in page1_lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()

    # Page 2
    text = c.beginText(40, height - 50)
    page2_lines = [
        "PAGE TWO CONTENT:",
        "This content is on page two.",
    ]
    for line in page2_lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()

    c.save()


def _create_edge_case_pdf(path: Path) -> None:
    """
    Creates a PDF with edge cases for heading heuristic testing.
    - Long line (>120 chars) should NOT be a heading
    - All caps line IS a heading
    - Line ending with colon IS a heading
    """
    c = canvas.Canvas(str(path), pagesize=LETTER)
    width, height = LETTER

    text = c.beginText(40, height - 50)
    text.setFont("Helvetica", 6)  # keep the long line on the page

    long_line = "A" * 130  # > 120 chars, should NOT be heading

    lines = [
        "EDGE CASE DOCUMENT",
        "",
        "ALL CAPS HEADING",
        "Normal paragraph text here.",
        "",
        "HEADING WITH COLON:",
        "More normal text.",
        "",
        long_line,
        "Text after long line.",
    ]

    for line in lines:
        text.textLine(line)

    c.drawText(text)
    c.showPage()
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all reportlab test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_paper_pdf(dir_path / "paper.pdf")
    _create_multipage_pdf(dir_path / "multipage.pdf")
    _create_edge_case_pdf(dir_path / "edge_case.pdf")

    return dir_path


@pytest.fixture(scope="module")
def handmade_pdf(tmp_path_factory: pytest.TempPathFactory) -> Path:
    path = tmp_path_factory.mktemp("handmade") / "handmade.pdf"
    _create_handmade_pdf(path)
    return path


@pytest.fixture(scope="module")
def handmade_content() -> bytes:
    """Decoded content stream of object 4."""
    return CONTENT


@pytest.fixture(scope="module")
def handmade_offsets(handmade_pdf: Path) -> dict[int, int]:
    """Byte offset of each "N 0 obj" header, found by scanning the file."""
    data = handmade_pdf.read_bytes()
    return {n: data.index(b"\n%d 0 obj" % n) + 1 for n in range(1, 8)}


@pytest.fixture
def corrupt_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "corrupt.pdf"
    path.write_bytes(b"this is not a pdf at all\n" * 10)
    return path


@pytest.fixture(scope="module")
def updated_pdf(tmp_path_factory: pytest.TempPathFactory) -> Path:
    path = tmp_path_factory.mktemp("updated") / "updated.pdf"
    _create_updated_pdf(path)
    return path


@pytest.fixture(scope="module")
def object_stream_pdf(tmp_path_factory: pytest.TempPathFactory) -> Path:
    path = tmp_path_factory.mktemp("objstm") / "objstm.pdf"
    _create_object_stream_pdf(path)
    return path
