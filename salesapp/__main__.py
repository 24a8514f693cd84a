"""Run the API with uvicorn: ``python -m salesapp``."""
import uvicorn

from salesapp.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("salesapp.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
