"""Entry point for the petclinic customers service.

Listens on ``PORT`` like the gateway; run it with ``PORT=8081`` (and
``DATABASE_URL`` pointing at the customers database) next to a gateway.
"""

import uvicorn

from petclinic.infrastructure.config import get_settings
from petclinic.presentation.api import create_customers_app


app = create_customers_app()


def main() -> None:
    """Run the customers service with uvicorn."""
    settings = get_settings()

    uvicorn.run(
        "customers_main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
