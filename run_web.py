#!/usr/bin/env python3
"""
Run the FastAPI server for the SPAC Compliance Engine.
"""

import os
import sys


def main() -> None:
    # Make src importable
    repo_root = os.path.dirname(__file__)
    sys.path.insert(0, os.path.join(repo_root, "src"))

    import uvicorn

    from config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "web.app:app",
        host=os.getenv("HOST", settings.api_host),
        port=int(os.getenv("PORT", str(settings.api_port))),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
