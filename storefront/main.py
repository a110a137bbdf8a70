# storefront/main.py
"""
ASGI entrypoint.

    uvicorn storefront.main:app

or, once installed, the `storefront` console script.
"""

import uvicorn

from storefront.adapters.api.main import create_app
from storefront.shared.config import settings

app = create_app()


def run() -> None:
    uvicorn.run(
        "storefront.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    run()
