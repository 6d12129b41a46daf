from dataclasses import asdict
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from simplifier.logging.logger import Log
from simplifier.processor.models import PipelineError, UploadedDocument
from simplifier.processor.processor import Processor

FILE_FIELD = "file"
_STATIC_DIR = Path(__file__).parent / "static"

router = APIRouter()


@router.get("/", include_in_schema=False)
def index() -> FileResponse:
    """Serve the upload form."""
    return FileResponse(_STATIC_DIR / "index.html", media_type="text/html")


@router.post("/api/process")
async def process_document(request: Request) -> JSONResponse:
    """Summarize one uploaded document.

    The body is read straight from the multipart parser rather than through a
    declared request model, so a missing file is reported as our own 400
    instead of a validation error.
    """
    processor: Processor = request.app.state.processor
    try:
        async with request.form() as form:
            upload = form.get(FILE_FIELD)
            if not isinstance(upload, UploadFile):
                rejection = PipelineError.missing_file()
                Log.warning(
                    f"Rejected request: {rejection.message}",
                    error_kind=rejection.error_kind.value,
                )
                return JSONResponse({"error": rejection.message}, status_code=400)
            document = UploadedDocument(
                content=await upload.read(),
                filename=upload.filename or "",
                mime_type=upload.content_type or "",
            )
        result = await run_in_threadpool(processor.process, document)
    except Exception as exc:
        error = PipelineError.from_exception(exc)
        Log.error(f"Processing failed: {error.message}", error_kind=error.error_kind.value)
        return JSONResponse(
            {"error": "Processing failed", "details": error.message},
            status_code=500,
        )
    return JSONResponse(asdict(result))
