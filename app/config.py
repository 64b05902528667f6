import json
import logging
import os
import firebase_admin
from firebase_admin import credentials

from app.core.settings import settings

logger = logging.getLogger("app.config")


def _load_credentials():
    """Service account credentials from FIREBASE_CERT_JSON or FIREBASE_CERT_PATH, else None."""
    if settings.firebase_cert_json:
        try:
            return credentials.Certificate(json.loads(settings.firebase_cert_json))
        except (ValueError, IOError) as e:
            logger.warning(f"Invalid FIREBASE_CERT_JSON, trying cert path: {e}")

    path = settings.firebase_cert_path
    if path and os.path.exists(path):
        try:
            return credentials.Certificate(path)
        except (ValueError, IOError) as e:
            logger.warning(f"Invalid Firebase cert at {path}: {e}")
    return None


def init_firebase() -> bool:
    """Initialize the Firebase Admin SDK used to verify member ID tokens.

    Returns True when an app is available afterwards. Missing credentials never
    raise here; token verification then fails with 401 per request.
    """
    if firebase_admin._apps:
        return True

    cred = _load_credentials()
    if cred is None:
        if settings.is_production:
            logger.error("No Firebase credentials found in production; all bearer tokens will be rejected")
        else:
            logger.warning("No Firebase credentials found; skipping Firebase initialization")
        return False

    firebase_admin.initialize_app(cred)
    logger.info("Firebase Admin initialized")
    return True
