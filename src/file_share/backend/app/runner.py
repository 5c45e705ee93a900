import subprocess
import sys
from typing import Optional

from file_share.backend.app.core import Settings, get_settings
from file_share.shared.proc import popen


def run(settings: Optional[Settings] = None) -> subprocess.Popen:
    settings = settings or get_settings()

    api_cmd = [
        sys.executable,
        "-m", "uvicorn",
        "file_share.backend.app.main:app",
        "--host", settings.HOST,
        "--port", str(settings.PORT),
        "--log-level", settings.LOG_LEVEL.lower(),
    ]

    print(f"Starting file share server on http://{settings.HOST}:{settings.PORT}/")
    return popen(api_cmd)
