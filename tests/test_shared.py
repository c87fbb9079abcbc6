# tests/test_shared.py
"""
Shared Utility Tests - Unit Tests for Casing, Validators and Logging

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- volunteer.shared.casing (to_camel_case, camel_case_keys)
- volunteer.shared.validators (URL and API key validation)
- volunteer.shared.logging_conf (setup_logging)
- pytest (testing framework)
"""
import logging  # Inspect configured handlers
import logging.handlers  # RotatingFileHandler type checks

import pytest  # Testing framework for writing and running tests

from volunteer.shared.casing import camel_case_keys, to_camel_case
from volunteer.shared.logging_conf import setup_logging
from volunteer.shared.validators import validate_api_key, validate_base_url, validate_endpoint_url


class TestCamelCase:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("FirstName", "firstName"),
            ("Email", "email"),
            ("URLValue", "urlValue"),
            ("ID", "id"),
            ("first_name", "first_name"),
            ("redirectTo", "redirectTo"),
            ("to", "to"),
            ("", ""),
        ],
    )
    def test_to_camel_case(self, name, expected):
        assert to_camel_case(name) == expected

    def test_camel_case_keys_leaves_values_alone(self):
        payload = {"InterestIds": [1, 2], "Email": "Ada@Example.org"}
        assert camel_case_keys(payload) == {"interestIds": [1, 2], "email": "Ada@Example.org"}

    def test_camel_case_keys_returns_copy(self):
        payload = {"Email": "a"}
        camel_case_keys(payload)
        assert payload == {"Email": "a"}


class TestValidators:
    def test_base_url(self):
        assert validate_base_url("https://proj.supabase.co")
        assert validate_base_url("http://localhost:54321")
        assert not validate_base_url("proj.supabase.co")
        assert not validate_base_url("ftp://proj.supabase.co")
        assert not validate_base_url("https://proj supabase.co")
        assert not validate_base_url("")

    def test_endpoint_url(self):
        assert validate_endpoint_url("https://proj.supabase.co/functions/v1/create-volunteer")
        assert validate_endpoint_url("functions/v1/create-volunteer")
        assert validate_endpoint_url("/functions/v1/create-volunteer")
        assert not validate_endpoint_url("//other-host/functions")
        assert not validate_endpoint_url("functions/v1/create volunteer")
        assert not validate_endpoint_url("")

    def test_api_key(self):
        assert validate_api_key("eyJhbGciOiJIUzI1NiJ9.payload.sig")
        assert not validate_api_key("short")
        assert not validate_api_key("has spaces in the key")
        assert not validate_api_key("")


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers[:]:
            handler.close()
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)

    def test_log_dir_creates_rotating_file(self, tmp_path):
        log_dir = tmp_path / "logs"

        setup_logging(level="debug", log_dir=log_dir, max_bytes=1024, backup_count=2)
        logging.getLogger("volunteer.test").info("hello from test")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        file_handlers = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 1024
        file_handlers[0].flush()
        assert "hello from test" in (log_dir / "volunteer.log").read_text(encoding="utf-8")

    def test_stdout_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("VOLUNTEER_LOG_STDOUT", "false")

        setup_logging(level=logging.WARNING)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        # Falls back to a single stdout handler when nothing else is configured
        assert len(root.handlers) == 1
