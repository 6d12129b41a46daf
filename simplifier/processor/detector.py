import io
import warnings

from PIL import Image, UnidentifiedImageError

from simplifier.processor.models import DetectedFormat

_TEXT_SUFFIX = ".txt"


def sniff_image_mime_type(content: bytes) -> str | None:
    """Return the image MIME type identified from the byte signature, if any.

    Only the header is read; pixel data is never decoded. Anything Pillow
    cannot identify yields None.
    """
    if not content:
        return None
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", Image.DecompressionBombWarning)
            with Image.open(io.BytesIO(content)) as image:
                image_format = image.format
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError, SyntaxError):
        return None
    if not image_format:
        return None
    return Image.MIME.get(image_format.upper(), f"image/{image_format.lower()}")


class FormatDetector:
    """Classifies uploads as image, plain text or unsupported.

    Images are recognized by content only; the declared filename and MIME type
    are never trusted for them. Plain text is recognized by the .txt suffix.
    """

    def detect(self, content: bytes, filename: str | None) -> DetectedFormat:
        mime_type = sniff_image_mime_type(content)
        if mime_type is not None and mime_type.startswith("image/"):
            return DetectedFormat.IMAGE
        if filename and filename.lower().endswith(_TEXT_SUFFIX):
            return DetectedFormat.PLAIN_TEXT
        return DetectedFormat.UNSUPPORTED
