"""Entry point to run the FastAPI backend."""

import logging
from pathlib import Path

# Load .env file FIRST before importing settings
from dotenv import load_dotenv
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)

import uvicorn


def main():
    logging.basicConfig(level=logging.INFO)
    logging.getLogger(__name__).info(f"Loaded environment from: {env_path}")

    from salon.config import get_settings
    settings = get_settings()

    uvicorn.run(
        "salon.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
