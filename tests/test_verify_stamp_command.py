from __future__ import annotations

import json
from io import StringIO
from unittest.mock import Mock, patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.stamps.registry import reset_registry

POST_PATH = "apps.stamps.providers.worldid.requests.post"


@pytest.fixture(autouse=True)
def _fresh_registry():
    reset_registry()
    yield
    reset_registry()


def _write_payload(tmp_path, **overrides):
    payload = {
        "type": "WorldID",
        "address": "0xabc",
        "proofs": {"nullifier_hash": "abc", "merkle_root": "0xroot", "proof": "0xproof"},
    }
    payload.update(overrides)
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_verify_stamp_prints_valid_outcome(tmp_path):
    path = _write_payload(tmp_path)
    out = StringIO()
    with patch(POST_PATH) as mocked_post:
        mocked_post.return_value = Mock(status_code=200, json=Mock(return_value={"success": True}))
        call_command("verify_stamp", str(path), stdout=out)

    assert json.loads(out.getvalue()) == {"type": "WorldID", "valid": True, "record": {"nullifier_hash": "abc"}}


def test_verify_stamp_fails_on_invalid_outcome(tmp_path):
    path = _write_payload(tmp_path)
    out = StringIO()
    with patch(POST_PATH) as mocked_post:
        mocked_post.return_value = Mock(status_code=500, json=Mock(return_value={}))
        with pytest.raises(CommandError) as excinfo:
            call_command("verify_stamp", str(path), stdout=out)

    assert "500" in str(excinfo.value)
    assert json.loads(out.getvalue())["error"] == ["500"]


def test_verify_stamp_type_override(tmp_path):
    path = _write_payload(tmp_path, type="Other")
    with patch(POST_PATH) as mocked_post:
        mocked_post.return_value = Mock(status_code=200, json=Mock(return_value={"success": True}))
        call_command("verify_stamp", str(path), "--type", "WorldID", stdout=StringIO())
    assert mocked_post.called


def test_verify_stamp_unknown_type(tmp_path):
    path = _write_payload(tmp_path, type="Other")
    with pytest.raises(CommandError):
        call_command("verify_stamp", str(path), stdout=StringIO())


def test_verify_stamp_bad_json(tmp_path):
    path = tmp_path / "payload.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CommandError):
        call_command("verify_stamp", str(path), stdout=StringIO())


def test_verify_stamp_missing_file(tmp_path):
    with pytest.raises(CommandError):
        call_command("verify_stamp", str(tmp_path / "missing.json"), stdout=StringIO())
