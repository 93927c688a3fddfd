import contextvars
from collections import OrderedDict

import pytest

from propbag import cfg
from propbag.err import ArgTypeError


def test_defaults():
    settings = cfg.current()
    assert settings is cfg.GLOBAL
    assert settings.container_factory is dict
    assert settings.wrap_enums is True


def test_configure_is_scoped():
    with cfg.configure(container_factory=OrderedDict) as settings:
        assert cfg.current() is settings
        assert settings.container_factory is OrderedDict
        with cfg.configure(wrap_enums=False):
            assert cfg.current().container_factory is OrderedDict
            assert cfg.current().wrap_enums is False
        assert cfg.current().wrap_enums is True
    assert cfg.current() is cfg.GLOBAL


def test_configure_restores_on_error():
    with pytest.raises(RuntimeError):
        with cfg.configure(wrap_enums=False):
            raise RuntimeError("boom")
    assert cfg.current().wrap_enums is True


def test_configure_does_not_leak_across_contexts():
    def inside():
        manager = cfg.configure(verbosity=3)
        manager.__enter__()
        return cfg.current().verbosity

    assert contextvars.copy_context().run(inside) == 3
    assert cfg.current() is cfg.GLOBAL


def test_bad_values_are_rejected():
    with pytest.raises(ArgTypeError) as excinfo:
        cfg.configure(wrap_enums="yes")
    assert excinfo.value.name == "wrap_enums"
    assert excinfo.value.value == "yes"

    with pytest.raises(ArgTypeError):
        cfg.configure(container_factory={})

    with pytest.raises(ArgTypeError):
        cfg.configure(verbosity="loud")


def test_unknown_settings_are_rejected():
    with pytest.raises(TypeError, match="unknown setting 'colour'"):
        cfg.configure(colour="blue")


def test_managers_are_single_use():
    manager = cfg.configure(wrap_enums=False)
    with manager:
        with pytest.raises(RuntimeError):
            manager.__enter__()


def test_verbosity_default_comes_from_env(monkeypatch):
    monkeypatch.setenv(cfg.VERBOSITY_ENV_NAME, "2")
    assert cfg.Settings().verbosity == 2

    monkeypatch.setenv(cfg.VERBOSITY_ENV_NAME, "")
    assert cfg.Settings().verbosity == 0

    monkeypatch.delenv(cfg.VERBOSITY_ENV_NAME)
    assert cfg.Settings().verbosity == 0
