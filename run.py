#!/usr/bin/env python3
"""
Run script for the Flight Admin Backend
"""
import uvicorn

from flight_admin.config.settings import settings
from flight_admin.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
