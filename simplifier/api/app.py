from fastapi import FastAPI

from simplifier.api.errors import register_exception_handlers
from simplifier.api.routes import router
from simplifier.config.settings import Settings
from simplifier.processor.processor import Processor, build_processor


def create_app(settings: Settings, processor: Processor | None = None) -> FastAPI:
    """Create the HTTP application around a single shared Processor.

    The processor holds no per-request state; each request builds its own
    pipeline context.
    """
    app = FastAPI(title="Legal Help Simplified", docs_url=None, redoc_url=None)
    app.state.processor = processor if processor is not None else build_processor(settings)
    app.state.settings = settings
    register_exception_handlers(app)
    app.include_router(router)
    return app
