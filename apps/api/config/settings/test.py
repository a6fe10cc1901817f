from .base import *

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

AWS_ACCESS_KEY_ID = "testing"
AWS_SECRET_ACCESS_KEY = "testing"
AWS_REGION = "ap-northeast-2"
S3_BUCKET_NAME = "academy-test-materials"
S3_ENDPOINT_URL = None

NOTE_IMAGE_MAX_WORKERS = 4

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
