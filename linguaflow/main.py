import uvicorn

from linguaflow.core.app import create_app
from linguaflow.core.config import get_settings

app = create_app()


def run() -> None:
    """Entrypoint for `linguaflow-api` script."""
    settings = get_settings()
    uvicorn.run(
        "linguaflow.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        factory=False,
    )


if __name__ == "__main__":
    run()
