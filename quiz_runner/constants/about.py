"""Static metadata describing Quiz Runner."""

APP_NAME = "Quiz Runner"
APP_VERSION = "0.1"
