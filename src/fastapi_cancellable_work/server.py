"""Process entry point: serve the application with uvicorn on port 8080."""

from __future__ import annotations

import logging

import uvicorn

from fastapi_cancellable_work.app import create_app

HOST = "0.0.0.0"
PORT = 8080


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    uvicorn.run(create_app(), host=HOST, port=PORT)


if __name__ == "__main__":
    main()
