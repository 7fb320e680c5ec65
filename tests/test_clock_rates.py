#!/usr/bin/env python3
"""
Tests for the RTP clock rate table and its TOML configuration
"""

import logging

import pytest

from rtp_numerics.clock_rates import (
    DEFAULT_CLOCK_RATES,
    load_clock_rates,
    clock_rate_for_payload_type,
)
from rtp_numerics.exceptions import (
    RtpNumericsError,
    ClockRateConfigError,
    UnknownPayloadTypeError,
)


def write_config(tmp_path, text):
    config_file = tmp_path / "rates.toml"
    config_file.write_text(text)
    return config_file


class TestDefaults:
    """Tests for the RFC 3551 static payload types"""

    def test_common_payload_types(self):
        assert clock_rate_for_payload_type(0) == 8000     # PCMU
        assert clock_rate_for_payload_type(8) == 8000     # PCMA
        assert clock_rate_for_payload_type(9) == 8000     # G722
        assert clock_rate_for_payload_type(10) == 44100   # L16
        assert clock_rate_for_payload_type(26) == 90000   # JPEG
        assert clock_rate_for_payload_type(34) == 90000   # H263

    def test_dynamic_payload_type_unknown(self):
        with pytest.raises(UnknownPayloadTypeError) as exc_info:
            clock_rate_for_payload_type(96)
        assert exc_info.value.payload_type == 96
        assert "96" in str(exc_info.value)

    def test_unknown_is_key_error(self):
        with pytest.raises(KeyError):
            clock_rate_for_payload_type(2)

    def test_defaults_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_CLOCK_RATES[96] = 90000


class TestLoadClockRates:
    """Tests for load_clock_rates()"""

    def test_overlay_on_defaults(self, tmp_path):
        config_file = write_config(tmp_path, "[clock_rates]\n96 = 90000\n111 = 48000\n")
        rates = load_clock_rates(config_file)

        assert rates[96] == 90000
        assert rates[111] == 48000
        assert rates[0] == 8000
        assert 96 not in DEFAULT_CLOCK_RATES

    def test_override_static_type(self, tmp_path):
        config_file = write_config(tmp_path, "[clock_rates]\n9 = 16000\n")
        assert load_clock_rates(config_file)[9] == 16000
        assert DEFAULT_CLOCK_RATES[9] == 8000

    def test_whole_float_rate_accepted(self, tmp_path):
        config_file = write_config(tmp_path, "[clock_rates]\n100 = 48000.0\n")
        rate = load_clock_rates(str(config_file))[100]
        assert rate == 48000
        assert isinstance(rate, int)

    def test_missing_table_gives_defaults(self, tmp_path):
        config_file = write_config(tmp_path, "[other]\nkey = 1\n")
        assert load_clock_rates(config_file) == dict(DEFAULT_CLOCK_RATES)

    def test_lookup_with_loaded_rates(self, tmp_path):
        rates = load_clock_rates(write_config(tmp_path, "[clock_rates]\n111 = 48000\n"))
        assert clock_rate_for_payload_type(111, rates) == 48000

    def test_each_call_returns_new_dict(self, tmp_path):
        config_file = write_config(tmp_path, "[clock_rates]\n96 = 90000\n")
        first = load_clock_rates(config_file)
        first[97] = 1
        assert 97 not in load_clock_rates(config_file)

    def test_logs_loaded_count(self, tmp_path, caplog):
        config_file = write_config(tmp_path, "[clock_rates]\n96 = 90000\n97 = 8000\n")
        with caplog.at_level(logging.INFO, logger="rtp_numerics.clock_rates"):
            load_clock_rates(config_file)
        assert "Loaded 2 clock rate(s)" in caplog.text


class TestLoadClockRatesErrors:
    """Tests for rejected configuration files"""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ClockRateConfigError, match="not found"):
            load_clock_rates(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path):
        with pytest.raises(ClockRateConfigError):
            load_clock_rates(write_config(tmp_path, "[clock_rates\n96 = 90000\n"))

    def test_table_not_a_table(self, tmp_path):
        with pytest.raises(ClockRateConfigError, match="must be a table"):
            load_clock_rates(write_config(tmp_path, "clock_rates = 5\n"))

    @pytest.mark.parametrize("key", ["abc", "128", "-1"])
    def test_bad_payload_type(self, tmp_path, key):
        config_file = write_config(tmp_path, f'[clock_rates]\n"{key}" = 8000\n')
        with pytest.raises(ClockRateConfigError):
            load_clock_rates(config_file)

    @pytest.mark.parametrize("value", ["0", "-8000", "48000.5", "true", '"fast"'])
    def test_bad_rate(self, tmp_path, value):
        config_file = write_config(tmp_path, f"[clock_rates]\n96 = {value}\n")
        with pytest.raises(ClockRateConfigError):
            load_clock_rates(config_file)

    def test_not_utf8(self, tmp_path):
        config_file = tmp_path / "rates.toml"
        config_file.write_bytes(b"[clock_rates]\n96 = 90000 # \xff\xfe\n")
        with pytest.raises(ClockRateConfigError):
            load_clock_rates(config_file)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(ClockRateConfigError):
            load_clock_rates(tmp_path)

    def test_errors_share_base_class(self, tmp_path):
        with pytest.raises(RtpNumericsError):
            load_clock_rates(tmp_path / "missing.toml")
