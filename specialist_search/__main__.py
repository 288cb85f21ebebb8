import logging

import uvicorn

from specialist_search.core.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run("specialist_search.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
