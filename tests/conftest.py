import io

import pytest
from PIL import Image, ImageDraw


def _render(image_format: str) -> bytes:
    image = Image.new("RGB", (200, 60), color="white")
    ImageDraw.Draw(image).text((10, 20), "Hello OCR World", fill="black")
    buf = io.BytesIO()
    image.save(buf, format=image_format)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """A small PNG with a line of black text on white."""
    return _render("PNG")


@pytest.fixture()
def jpeg_bytes() -> bytes:
    """The same picture encoded as JPEG."""
    return _render("JPEG")


@pytest.fixture()
def pdf_bytes() -> bytes:
    """Leading bytes of a PDF file; enough for content sniffing."""
    return b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n<< /Root 1 0 R >>\n%%EOF\n"


@pytest.fixture()
def five_line_text() -> str:
    return "Line one.\nLine two.\nLine three.\nLine four.\nLine five."
