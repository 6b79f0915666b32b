import sys
import os
import subprocess

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT)

import pytest

from notes_app.app_settings import get_int, get_str
from notes_app.main import parse_args
from notes_app.settings import DEFAULT_LOG_LEVEL, normalize_log_level


class FakeSettings:
    def __init__(self, values):
        self.values = values

    def value(self, key, default=None):
        return self.values.get(key, default)


def test_core_does_not_load_qt():
    code = (
        "import sys\n"
        "import notes_app.core\n"
        "assert not any(m.startswith('PySide6') for m in sys.modules), sorted(sys.modules)\n"
    )
    result = subprocess.run([sys.executable, "-c", code], cwd=ROOT, capture_output=True, text=True)
    assert result.returncode == 0, result.stderr


def test_get_int():
    settings = FakeSettings({"ui/width": "800", "ui/height": "tall"})

    assert get_int(settings, "ui/width", 420) == 800
    assert get_int(settings, "ui/height", 640) == 640
    assert get_int(settings, "missing", 5) == 5


def test_get_str():
    settings = FakeSettings({"log/console_level": "DEBUG", "empty": None})

    assert get_str(settings, "log/console_level", "INFO") == "DEBUG"
    assert get_str(settings, "empty", "INFO") == "INFO"


def test_normalize_log_level():
    assert normalize_log_level("debug") == "DEBUG"
    assert normalize_log_level(" warning ") == "WARNING"
    assert normalize_log_level("foo") == DEFAULT_LOG_LEVEL
    assert normalize_log_level(None) == DEFAULT_LOG_LEVEL


def test_log_level_argument():
    assert parse_args([]).log_level is None
    assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "foo"])
