"""Entry point for the stats proxy server."""

from __future__ import annotations

import logging


def main() -> None:
    import uvicorn

    from statsproxy.config import load_settings
    from statsproxy.web.app import create_app

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
