#!/usr/bin/env python
"""Script to run the task tracker server."""
import uvicorn

from unitasks.config import Settings

if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(
        "unitasks.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=True,
    )
