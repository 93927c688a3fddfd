import splatlog

from propbag import cfg, log


def test_setup_uses_verbosity_setting(monkeypatch):
    calls = []
    monkeypatch.setattr(splatlog, "setup", lambda **kwds: calls.append(kwds))

    with cfg.configure(verbosity=2):
        log.setup()
    log.setup(verbosity=1)

    assert [call["verbosity"] for call in calls] == [2, 1]
    assert calls[0]["verbosity_levels"] == {"propbag": log.VERBOSITY_LEVELS}
