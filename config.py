import os

from dotenv import load_dotenv
load_dotenv()

# Empty string keeps the list in memory only.
TODO_DATA_FILE = os.getenv("TODO_DATA_FILE", "data.json")
HOST           = os.getenv("HOST", "127.0.0.1")
PORT           = int(os.getenv("PORT", "3000"))
OPEN_BROWSER   = os.getenv("OPEN_BROWSER", "1").lower() in {"1", "true", "yes", "on"}
LOG_LEVEL      = os.getenv("LOG_LEVEL", "INFO").upper()
