# app/main.py
import uvicorn

from app.api import create_app
from app.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()


def run():
    logger.info("Starting Product Service on 0.0.0.0:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
