"""Blog API entrypoint.

Run with:
  python -m blog_api
"""

import uvicorn

from blog_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("blog_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
