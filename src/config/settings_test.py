"""Settings for the pytest run.

Supplies a throwaway ``SECRET_KEY`` before the base settings enforce it.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-only-secret-key")

from config.settings import *  # noqa: E402,F401,F403
