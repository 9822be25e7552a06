"""Start the person service with uvicorn; host and port come from settings."""

import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run(
        "person_service.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
