#!/usr/bin/env python3
"""Run the people catalog API with uvicorn."""
import argparse

import uvicorn

from .config import get_settings
from .main import create_app


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Serve the people catalog API.")
    parser.add_argument("--host", default=settings.host, help="Interface to bind.")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on.")
    parser.add_argument("--images-dir", default=settings.images_dir, help="Directory of person images.")
    args = parser.parse_args()

    settings = settings.model_copy(
        update={"host": args.host, "port": args.port, "images_dir": args.images_dir}
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
