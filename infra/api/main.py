from __future__ import annotations

import uvicorn

from core.config import settings
from core.logging import configure_from_settings
from infra.api.app import create_app


def run(host: str = "0.0.0.0", port: int = 8000) -> None:
    configure_from_settings()
    uvicorn.run(create_app(), host=host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
