#!/usr/bin/env python3
"""Start the Wall Framing Estimator API server."""

import uvicorn

from wallframe.config import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(
        "wallframe.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["wallframe"],
    )
