from pathlib import Path
import logging
import sys

sys.path.insert(0, str(Path(__file__).parent))

import uvicorn

from config import settings


def main():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="[%(levelname)s] %(asctime)s %(message)s",
    )
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False
    )


if __name__ == "__main__":
    main()
