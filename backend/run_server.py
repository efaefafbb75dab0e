# run_server.py
import uvicorn

from inclusive_hub.core.config import settings
from inclusive_hub.main import app


def main() -> None:
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
    )


if __name__ == "__main__":
    main()
