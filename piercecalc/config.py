# piercecalc/config.py
import os
from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

SNAP_PRECISION = int(os.getenv('SNAP_PRECISION', 6))  # decimal places used to merge endpoints
LOOP_ORDERING = os.getenv('LOOP_ORDERING', 'centroid').strip().lower()  # 'centroid' or 'walk'
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_FILE = os.getenv('LOG_FILE', 'error.log')
CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', 16 * 1024 * 1024))
PORT = int(os.getenv('PORT', 5000))
