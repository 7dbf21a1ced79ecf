import json

import run_assignment
from okta_group_assign import ProviderError


def _write_config(root):
    (root / "configs").mkdir()
    (root / "configs" / "config.json").write_text(json.dumps({"environment": {"log_level": "INFO"}}))


def _patch_config_root(monkeypatch, root):
    original = run_assignment.ConfigLoader

    def loader(config_file, environment):
        return original(config_file=config_file, environment=environment, base_path=root)

    monkeypatch.setattr(run_assignment, "ConfigLoader", loader)


def test_main_assigns_user(tmp_path, monkeypatch, capsys):
    _write_config(tmp_path)
    _patch_config_root(monkeypatch, tmp_path)
    monkeypatch.setenv("OKTA_API_TOKEN", "token")
    calls = []

    def fake_invoke(params, context):
        calls.append((params, context))
        return {"userId": params["userId"], "assigned": True}

    monkeypatch.setattr(run_assignment, "run_invoke_sync", fake_invoke)

    code = run_assignment.main(["--user-id", "u1", "--group-id", "g1", "--okta-domain", "dev.okta.com"])

    assert code == 0
    params, context = calls[0]
    assert params == {"userId": "u1", "groupId": "g1", "oktaDomain": "dev.okta.com"}
    assert context.secrets["OKTA_API_TOKEN"] == "token"
    assert json.loads(capsys.readouterr().out)["assigned"] is True


def test_main_routes_failure_through_error_hook(tmp_path, monkeypatch, capsys):
    _write_config(tmp_path)
    _patch_config_root(monkeypatch, tmp_path)
    failure = ProviderError("Failed to assign user to group: API rate limit exceeded", status_code=429)
    seen = {}

    def fake_invoke(params, context):
        raise failure

    def fake_error(params, context):
        seen["error"] = params["error"]
        return {"recovered": True}

    monkeypatch.setattr(run_assignment, "run_invoke_sync", fake_invoke)
    monkeypatch.setattr(run_assignment, "run_error_sync", fake_error)

    code = run_assignment.main(["--user-id", "u1", "--group-id", "g1", "--okta-domain", "dev.okta.com"])

    assert code == 0
    assert seen["error"] is failure
    assert json.loads(capsys.readouterr().out) == {"recovered": True}


def test_main_reports_unrecovered_failure(tmp_path, monkeypatch, capsys):
    _write_config(tmp_path)
    _patch_config_root(monkeypatch, tmp_path)
    monkeypatch.delenv("OKTA_API_TOKEN", raising=False)

    code = run_assignment.main(["--user-id", "u1", "--group-id", "g1", "--okta-domain", "dev.okta.com"])

    assert code == 1
    assert "Missing required secret: OKTA_API_TOKEN" in capsys.readouterr().err


def test_main_halt(tmp_path, monkeypatch, capsys):
    _write_config(tmp_path)
    _patch_config_root(monkeypatch, tmp_path)

    code = run_assignment.main(["--halt", "--reason", "cancelled"])

    assert code == 0
    result = json.loads(capsys.readouterr().out)
    assert result["userId"] == "unknown"
    assert result["reason"] == "cancelled"
    assert result["cleanupCompleted"] is True


def test_main_missing_config(tmp_path, monkeypatch, capsys):
    _patch_config_root(monkeypatch, tmp_path)

    assert run_assignment.main(["--user-id", "u1"]) == 1
    assert "Configuration error" in capsys.readouterr().err
