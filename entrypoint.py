"""Backend entrypoint. Starts uvicorn with host and port from settings."""
import uvicorn

# Import app directly so uvicorn does not need to resolve an import string.
from market_mock.main import app, settings


def main() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
