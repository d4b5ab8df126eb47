"""Run the API with uvicorn: python -m examguide"""

import uvicorn

from examguide.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "examguide.main:app",
        host=settings.host,
        port=settings.listen_port,
    )


if __name__ == "__main__":
    main()
