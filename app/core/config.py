from dotenv import load_dotenv
import os

load_dotenv()  # Load .env from root

FILESTORE_ROOT = os.getenv("FILESTORE_ROOT", os.path.join("storage", "files"))
FILESTORE_SERVER = os.getenv("FILESTORE_SERVER", "http://localhost:8080")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

try:
    FREQ_WORDS_DEFAULT_LIMIT = int(os.getenv("FREQ_WORDS_DEFAULT_LIMIT", "10"))
except ValueError:
    raise Exception("FREQ_WORDS_DEFAULT_LIMIT must be an integer. Check your .env file.")

HOST = os.getenv("HOST", "0.0.0.0")
try:
    PORT = int(os.getenv("PORT", "8080"))
except ValueError:
    raise Exception("PORT must be an integer. Check your .env file.")
