"""Tests for the input sanitizers."""
from employee_directory.core.security import sanitize_email, sanitize_input, sanitize_phone


def test_removes_script_blocks() -> None:
    assert sanitize_input('Hello <script>alert("xss")</script> World') == "Hello  World"


def test_removes_multiline_script_blocks() -> None:
    assert sanitize_input("a<SCRIPT type='x'>\nsteal()\n</script>b") == "ab"


def test_removes_tags() -> None:
    assert sanitize_input("Hello <b>World</b>") == "Hello World"


def test_removes_javascript_protocol() -> None:
    assert sanitize_input('JavaScript:alert("xss")') == 'alert("xss")'


def test_removes_event_handlers() -> None:
    assert sanitize_input('Hello onclick=alert("xss") World') == 'Hello alert("xss") World'
    assert sanitize_input("x ONMOUSEOVER = y") == "x  y"


def test_trims_and_rejects_non_text() -> None:
    assert sanitize_input("   padded  ") == "padded"
    assert sanitize_input(None) == ""
    assert sanitize_input(42) == ""


def test_sanitize_email() -> None:
    assert sanitize_email("Test@Example.COM<script>") == "test@example.comscript"
    assert sanitize_email(" user@example.com ") == "user@example.com"
    assert sanitize_email(None) == ""


def test_sanitize_phone() -> None:
    assert sanitize_phone("+90 (532) 123-45-67") == "+90 (532) 123-45-67"
    assert sanitize_phone("+90<script>alert()</script> 532 123 45 67") == "+90() 532 123 45 67"
