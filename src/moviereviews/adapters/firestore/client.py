import json
import logging
import os
from typing import Any, Optional

from google.cloud import firestore
from google.oauth2 import service_account

from moviereviews.settings import FirebaseSettings

logger = logging.getLogger(__name__)


def load_credentials(cfg: FirebaseSettings) -> Optional[service_account.Credentials]:
    """
    Resolve service account credentials.

    Order: the ``FIREBASE_SERVICE_ACCOUNT`` JSON variable (production), then
    the local key file (development). Returns None when neither is present so
    the Google SDK falls back to application-default credentials.
    """
    if cfg.service_account is not None:
        logger.info("Using Firebase credentials from environment variable")
        info = json.loads(cfg.service_account.get_secret_value())
        return service_account.Credentials.from_service_account_info(info)

    if cfg.service_account_file.exists():
        logger.info(f"Using Firebase credentials from local file {cfg.service_account_file}")
        return service_account.Credentials.from_service_account_file(str(cfg.service_account_file))

    logger.warning("No Firebase service account configured, using application-default credentials")
    return None


def create_firestore_client(cfg: FirebaseSettings) -> firestore.Client:
    """
    Build the process-wide Firestore client.

    * If ``cfg.emulator_host`` is set, ``FIRESTORE_EMULATOR_HOST`` is exported
      so the client talks to the local emulator and no credentials are loaded.
    * Otherwise the project defaults to the one named in the service account.
    """
    if cfg.emulator_host:
        os.environ["FIRESTORE_EMULATOR_HOST"] = cfg.emulator_host
        logger.info(f"Using Firestore emulator on {cfg.emulator_host}")
        return firestore.Client(project=cfg.project_id or "demo-project", database=cfg.database)

    credentials = load_credentials(cfg)
    project: Any = cfg.project_id
    if project is None and credentials is not None:
        project = credentials.project_id

    return firestore.Client(project=project, credentials=credentials, database=cfg.database)
