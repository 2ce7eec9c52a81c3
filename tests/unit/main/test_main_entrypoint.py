from __future__ import annotations

import runpy


def test_main_module_runs_uvicorn(monkeypatch):
    executed = {}

    def fake_run(app: str, **kwargs) -> None:
        executed["app"] = app
        executed.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)
    monkeypatch.setenv("APP_PORT", "9100")

    runpy.run_module("healthz.main.__main__", run_name="__main__")

    assert executed["app"] == "healthz.main.app:app"
    assert executed["port"] == 9100
