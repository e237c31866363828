"""Run the service with uvicorn: ``python -m print_resizer``."""

import uvicorn

from .app import create_app
from .common.config import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
