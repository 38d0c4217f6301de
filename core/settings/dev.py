from .base import *  # noqa

DEBUG = True
ALLOWED_HOSTS = ["*"]
LOGGING["root"]["handlers"] = ["console"]  # type: ignore[index]
LOGGING["loggers"]["apps"]["handlers"] = ["console"]  # type: ignore[index]
REST_FRAMEWORK["DEFAULT_PERMISSION_CLASSES"] = [  # type: ignore[index]
    "rest_framework.permissions.IsAuthenticatedOrReadOnly",
]
