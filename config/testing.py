from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

# Never talk to the real sheet from tests
CLOUD_SYNC_URL = ""
