"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_camstream():
    """Verify camstream package can be imported."""
    from camstream.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert hasattr(settings, "hls_dir")


def test_pytest_runs():
    """Basic sanity check that pytest executes tests."""
    assert True
