"""
Test settings: SQLite file database, in-process billing, no broker.

pytest-django picks this module up through pyproject.toml.
"""

from .settings import *  # noqa: F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'test.sqlite3',
        # 文件库而非内存库：并发测试里每个线程各开一个连接
        'TEST': {
            'NAME': BASE_DIR / 'test.sqlite3',
        },
        'OPTIONS': {
            'timeout': 20,
        },
    },
}

BILLING_BACKEND = 'local'
EVENT_PUBLISHER_BACKEND = 'null'

CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'
CELERY_TASK_ALWAYS_EAGER = True

# 让 caplog 能抓到 patients.* 的日志
LOGGING['loggers']['patients']['propagate'] = True
