SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Engine thresholds left unset: tests run against the built-in defaults.
