"""Smoke test for application startup."""


def test_app_imports() -> None:
    """Verify the app can be imported with every router mounted."""
    from decksmith.main import app

    assert app.title == "Decksmith"
    paths = set(app.openapi()["paths"])
    assert {"/cards", "/decks", "/health", "/ready"} <= paths
