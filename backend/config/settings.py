from __future__ import annotations

import sys
from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env()
IS_TESTING = "test" in sys.argv or "pytest" in " ".join(sys.argv).lower()

env_file = env.str("ENV_FILE", default=None)
for candidate in [env_file, BASE_DIR / ".env", BASE_DIR.parent / ".env"]:
    if not candidate:
        continue
    candidate_path = Path(candidate)
    if candidate_path.exists():
        env.read_env(candidate_path)
        break

SECRET_KEY = env("SECRET_KEY", default="insecure-dev-secret-key")
DEBUG = env.bool("DEBUG", default=False)
# Sensors on the LAN call the daemon by its IP or hostname; list it here or set
# ALLOW_ALL_HOSTS, otherwise Django answers them with 400 (DisallowedHost).
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1"])
if env.bool("ALLOW_ALL_HOSTS", default=False):
    ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "alarm",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# The alarm state lives in ALARM_STATE_FILE; nothing here talks to a database.
DATABASES: dict[str, dict] = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = env.str("TIME_ZONE", default="UTC")
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    # Trigger codes are matched in the route itself; there is no user model.
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": [
        "config.renderers.PlainTextRenderer",
    ],
    "DEFAULT_CONTENT_NEGOTIATION_CLASS": "config.renderers.IgnoreClientContentNegotiation",
    "EXCEPTION_HANDLER": "config.exception_handler.custom_exception_handler",
}

# Alarm daemon
ALARM_PRIMARY_CODE = env.str("ALARM_PRIMARY_CODE", default="12345")
ALARM_SECONDARY_CODE = env.str("ALARM_SECONDARY_CODE", default="00000000")
ALARM_HOME_LATITUDE = env.float("ALARM_HOME_LATITUDE", default=48.0)
ALARM_HOME_LONGITUDE = env.float("ALARM_HOME_LONGITUDE", default=15.0)
ALARM_STATE_FILE = env.str("ALARM_STATE_FILE", default="alarmstate.txt")

# Where `manage.py alarm_event` reaches the running daemon.
ALARM_DAEMON_URL = env.str("ALARM_DAEMON_URL", default="http://127.0.0.1:8081")
ALARM_DAEMON_TIMEOUT_SECONDS = env.float("ALARM_DAEMON_TIMEOUT_SECONDS", default=5.0)

# Scripts run with ALARM_SCRIPTS_DIR as their working directory, so the
# relative defaults resolve against it.
ALARM_SCRIPTS_DIR = env.str("ALARM_SCRIPTS_DIR", default=".")
ALARM_SCRIPTS = {
    "arm_away": env.str("ALARM_SCRIPT_ARM_AWAY", default="./armedaway.sh"),
    "arm_quiet": env.str("ALARM_SCRIPT_ARM_QUIET", default="./armedawayquiet.sh"),
    "disarm": env.str("ALARM_SCRIPT_DISARM", default="./disarmed.sh"),
    "disarm_quiet": env.str("ALARM_SCRIPT_DISARM_QUIET", default="./disarmedquiet.sh"),
    "alarm": env.str("ALARM_SCRIPT_ALARM", default="./alarm.sh"),
    "light_staircase": env.str("ALARM_SCRIPT_LIGHT_STAIRCASE", default="./light_staircase.sh"),
    "light_desklamp": env.str("ALARM_SCRIPT_LIGHT_DESKLAMP", default="./light_desklamp.sh"),
}

ALARM_SCRIPT_TIMEOUT_SECONDS = env.float("ALARM_SCRIPT_TIMEOUT_SECONDS", default=None)

ALARM_ACTUATORS_ENABLED = env.bool("ALARM_ACTUATORS_ENABLED", default=True)
ALLOW_ACTUATORS_IN_TESTS = env.bool("ALLOW_ACTUATORS_IN_TESTS", default=False)
if IS_TESTING and not ALLOW_ACTUATORS_IN_TESTS:
    ALARM_ACTUATORS_ENABLED = False

LOG_LEVEL = env.str("LOG_LEVEL", default="INFO").upper()
ALARM_LOG_LEVEL = env.str("ALARM_LOG_LEVEL", default=LOG_LEVEL).upper()
if IS_TESTING:
    ALARM_LOG_LEVEL = "WARNING"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "alarm": {
            "handlers": ["console"],
            "level": ALARM_LOG_LEVEL,
            "propagate": False,
        },
    },
}
