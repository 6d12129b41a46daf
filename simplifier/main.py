import uvicorn

from simplifier.api.app import create_app
from simplifier.config.settings import Settings
from simplifier.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(
        f"Starting server on {settings.host}:{settings.port}",
        app_env=settings.app_env,
        summarizer_provider=settings.summarizer_provider,
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
