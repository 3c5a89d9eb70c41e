"""Entry point for the petclinic API gateway."""

import uvicorn

from petclinic.infrastructure.config import get_settings
from petclinic.presentation.api import create_gateway_app


app = create_gateway_app()


def main() -> None:
    """Run the gateway with uvicorn."""
    settings = get_settings()

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
