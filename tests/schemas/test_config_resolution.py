"""Tests for configuration resolution (Param < User < CLI)."""

import pytest
from pydantic import ValidationError

from matrix2triplets.schemas import (
    CLIConfig,
    InternalConfig,
    ParamConfig,
    UserConfig,
    resolve_config,
)
from matrix2triplets.schemas.resolve import deep_merge


class TestDeepMerge:
    """deep_merge semantics."""

    def test_nested_dicts_merge(self):
        base = {"reader": {"orientation": "row", "delimiter": None}}
        override = {"reader": {"delimiter": ","}}
        assert deep_merge(base, override) == {"reader": {"orientation": "row", "delimiter": ","}}

    def test_later_overrides_win(self):
        merged = deep_merge({"a": 1}, {"a": 2}, {"a": 3})
        assert merged == {"a": 3}

    def test_base_not_mutated(self):
        base = {"reader": {"orientation": "row"}}
        deep_merge(base, {"reader": {"orientation": "col"}})
        assert base == {"reader": {"orientation": "row"}}


class TestDefaults:
    """Defaults from ParamConfig."""

    def test_defaults(self, internal_config):
        assert internal_config.reader.orientation == "row"
        assert internal_config.reader.delimiter is None
        assert internal_config.reader.comment_prefix == "#"
        assert internal_config.symmetry.enabled is False
        assert internal_config.emitter.sort_mode == "none"
        assert internal_config.logging.level == "WARNING"

    def test_missing_layers_give_defaults(self, param_config, internal_config):
        config = resolve_config(param_config)
        assert config == internal_config
        assert config.reader.delimiter is None

    def test_unset_cli_fields_leave_user_values(self, param_config):
        user = UserConfig.model_validate({"NSORT": True})
        config = resolve_config(param_config, user, CLIConfig(symmetric=True))
        assert config.emitter.sort_mode == "numeric"
        assert config.symmetry.enabled is True


class TestPrecedence:
    """CLI > user > param."""

    def test_user_overrides_param(self, param_config):
        user = UserConfig.model_validate({"BYCOL": True, "DELIM": ","})
        config = resolve_config(param_config, user)
        assert config.reader.orientation == "col"
        assert config.reader.delimiter == ","

    def test_cli_overrides_user(self, param_config):
        user = UserConfig.model_validate({"BYCOL": True, "SORT": True})
        cli = CLIConfig(orientation="row")
        config = resolve_config(param_config, user, cli)
        assert config.reader.orientation == "row"  # CLI wins
        assert config.emitter.sort_mode == "lex"  # User value preserved

    def test_cli_only_overrides_specified_fields(self, param_config):
        user = UserConfig.model_validate({"DELIM": "tab", "SYM": True})
        cli = CLIConfig(sort_mode="numeric")
        config = resolve_config(param_config, user, cli)
        assert config.reader.delimiter == "\t"
        assert config.symmetry.enabled is True
        assert config.emitter.sort_mode == "numeric"

    def test_cli_overrides_do_not_mutate_user(self, param_config):
        user = UserConfig.model_validate({"DELIM": ","})
        resolve_config(param_config, user, CLIConfig(delimiter=";"))
        assert user.delim == ","

    def test_make_config_fixture(self, make_config):
        config = make_config(orientation="col", symmetric=True)
        assert config.reader.orientation == "col"
        assert config.symmetry.enabled is True


class TestInternalConfig:
    """InternalConfig is frozen and strict."""

    def test_internal_config_is_frozen(self, internal_config):
        with pytest.raises(ValidationError):
            internal_config.emitter = {"sort_mode": "lex"}

    def test_internal_config_rejects_bad_sort_mode(self, param_config):
        user = UserConfig.model_validate({"emitter": {"sort_mode": "shuffle"}})
        with pytest.raises(ValidationError):
            resolve_config(param_config, user)

    def test_internal_config_maps_tab(self):
        config = InternalConfig.model_validate({
            "reader": {"orientation": "row", "delimiter": "TAB", "comment_prefix": "#"},
            "symmetry": {"enabled": False},
            "emitter": {"sort_mode": "none"},
            "logging": {"level": "INFO"},
        })
        assert config.reader.delimiter == "\t"

    def test_param_config_sort_mode_normalized(self):
        param = ParamConfig.model_validate({"emitter": {"sort_mode": " LEX "}})
        assert param.emitter.sort_mode == "lex"
