"""
test_app_factory.py
Tests the app factory in piercecalc/__init__.py for configuration defaults, overrides and blueprint registration.
"""
import pytest
from flask import Flask
from piercecalc import create_app, config

def test_create_app_returns_flask():
    app = create_app()
    assert isinstance(app, Flask), "create_app() should return a Flask app instance"

def test_defaults_come_from_config_module():
    app = create_app()
    assert app.config['SNAP_PRECISION'] == config.SNAP_PRECISION
    assert app.config['LOOP_ORDERING'] == config.LOOP_ORDERING
    assert app.config['MAX_CONTENT_LENGTH'] == config.MAX_CONTENT_LENGTH

def test_overrides_applied():
    app = create_app({'SNAP_PRECISION': 3, 'LOOP_ORDERING': 'walk'})
    assert app.config['SNAP_PRECISION'] == 3
    assert app.config['LOOP_ORDERING'] == 'walk'

def test_invalid_ordering_rejected():
    with pytest.raises(ValueError):
        create_app({'LOOP_ORDERING': 'spiral'})

def test_blueprints_registered():
    app = create_app()
    assert 'upload' in app.blueprints, "'upload' blueprint should be registered"
    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert {'/upload', '/compute', '/health'} <= rules

def test_unhandled_error_returns_json_500(monkeypatch):
    from piercecalc.utils import pierce

    def boom(*args, **kwargs):
        raise RuntimeError("boom")
    monkeypatch.setattr(pierce, "compute_drawing", boom)
    app = create_app({'TESTING': False, 'PROPAGATE_EXCEPTIONS': False})
    resp = app.test_client().post("/compute", json={"entities": []})
    assert resp.status_code == 500
    assert "boom" in resp.get_json()["error"]
