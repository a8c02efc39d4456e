"""Runtime settings, read from the environment (and a project .env file if present).

    STRIP_IP=192.168.1.50   # enables UDP streaming to the strip controller
    STRIP_PORT=7777
    CONTROL_PORT=7778       # setVars/getVars listener
    PIXEL_COUNT=64
    FPS=30
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).parent.parent / ".env")

STRIP_IP = os.getenv("STRIP_IP", "")
STRIP_PORT = int(os.getenv("STRIP_PORT", "7777"))
CONTROL_PORT = int(os.getenv("CONTROL_PORT", "7778"))
PIXEL_COUNT = int(os.getenv("PIXEL_COUNT", "64"))
FPS = int(os.getenv("FPS", "30"))
