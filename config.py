# config.py
import os


class Config:
    # --- Flask-WTF CSRF / Sessions ---
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")  # change later
    WTF_CSRF_ENABLED = True

    # --- Logging ---
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # --- Uploads ---
    MAX_CONTENT_LENGTH = 2 * 1024 * 1024  # 2 MB class CSV
    BULK_IMPORT_MAX_ROWS = 500

    # --- Display ---
    # Colour coding for the deficit column
    DEFICIT_CSS = {
        "deficit": "age-deficit",        # pale red
        "no_deficit": "age-on-track",    # pale green
        "unknown": "age-unknown",        # grey
    }


class TestingConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    LOG_LEVEL = "DEBUG"
    BULK_IMPORT_MAX_ROWS = 5

    __test__ = False
