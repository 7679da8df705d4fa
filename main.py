from __future__ import annotations

"""
Root entrypoint.

Rule: the project root keeps only this `main.py`; all other implementation lives in packages.
"""

import uvicorn

from envline.core.settings import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run("envline.api.main:create_app", factory=True, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
