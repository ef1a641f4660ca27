# activity_emissions/config.py
import os
from dotenv import load_dotenv

load_dotenv()  # pick up a local .env if present

APP_TITLE = os.getenv("APP_TITLE", "Activity Emissions API")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
