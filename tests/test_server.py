"""Server bootstrap: uvicorn wired to settings, run() serves until stopped."""

import logging

from datadip_mock import server
from datadip_mock.config import Settings


def test_build_server_uses_settings_port_and_host():
    settings = Settings(_env_file=None, port=9191, host="127.0.0.1")
    srv = server.build_server(settings)
    assert srv.config.port == 9191
    assert srv.config.host == "127.0.0.1"
    assert srv.config.app == "datadip_mock.main:app"
    assert srv.config.log_config is None


def test_run_starts_server_on_configured_port(monkeypatch, caplog):
    monkeypatch.setenv("PORT", "8181")
    started = []

    class _FakeServer:
        def run(self):
            started.append(True)

    built_with = []

    def fake_build(settings):
        built_with.append(settings)
        return _FakeServer()

    monkeypatch.setattr(server, "build_server", fake_build)
    monkeypatch.setattr(server, "setup_logging", lambda *a, **k: None)
    with caplog.at_level(logging.INFO, logger="datadip_mock.server"):
        server.run()

    assert started == [True]
    assert built_with[0].port == 8181
    assert "Listening on port 8181" in caplog.text
