"""Tests for main module."""

from form_records import main as main_module


def test_main_serves_asgi_app_with_settings(monkeypatch) -> None:
    calls: list[tuple[str, dict[str, object]]] = []
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
    )

    main_module.main()

    assert calls == [
        (
            "form_records.api.asgi:app",
            {"host": "127.0.0.1", "port": 9001, "log_level": "warning"},
        )
    ]
