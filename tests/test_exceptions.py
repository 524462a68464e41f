"""Tests for the exception hierarchy."""

import pytest

from data_api_client.core.exceptions import ConfigError, DataApiError, InputError
from data_api_client.core.exit_codes import ExitCode


@pytest.mark.unit
class TestExitCodes:
    def test_exit_code_values(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.USAGE_ERROR == 2
        assert ExitCode.INPUT_ERROR == 3
        assert ExitCode.NETWORK_ERROR == 5
        assert ExitCode.TIMEOUT == 6
        assert ExitCode.CONFIG_ERROR == 7

    def test_exit_code_is_int(self):
        for code in ExitCode:
            assert isinstance(code, int)


@pytest.mark.unit
class TestDataApiError:
    def test_base_exception(self):
        err = DataApiError("test error")
        assert str(err) == "test error"
        assert err.message == "test error"
        assert err.exit_code == ExitCode.GENERAL_ERROR

    def test_is_exception(self):
        assert issubclass(DataApiError, Exception)


@pytest.mark.unit
class TestInputError:
    def test_exit_code(self):
        err = InputError("No 'sql' statement provided.")
        assert err.exit_code == ExitCode.INPUT_ERROR

    def test_inherits_from_base(self):
        assert isinstance(InputError("bad"), DataApiError)


@pytest.mark.unit
class TestConfigError:
    def test_exit_code(self):
        err = ConfigError("'secret_arn' string value required")
        assert err.exit_code == ExitCode.CONFIG_ERROR

    def test_inherits_from_base(self):
        assert isinstance(ConfigError("bad"), DataApiError)


@pytest.mark.unit
def test_catch_all_by_base():
    for exc_class in [InputError, ConfigError]:
        with pytest.raises(DataApiError):
            raise exc_class("test")
