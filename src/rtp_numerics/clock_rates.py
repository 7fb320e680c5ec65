"""
RTP Clock Rate Table

Maps RTP payload types to media clock rates (ticks per second), which are
the ticks_per_second argument of convert_rtp_timestamp_to_ms().

Static payload types come from RFC 3551. Dynamic types (96-127) are
negotiated per session, so deployments list them in a TOML file:

    [clock_rates]
    96 = 90000    # H264
    111 = 48000   # Opus

Keys are strings because TOML requires it.
"""

import logging
import math
from types import MappingProxyType
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import toml

from .exceptions import ClockRateConfigError, UnknownPayloadTypeError

logger = logging.getLogger(__name__)

MAX_PAYLOAD_TYPE = 127

# RFC 3551 section 6, static audio/video payload types
DEFAULT_CLOCK_RATES: Mapping[int, int] = MappingProxyType({
    0: 8000,     # PCMU
    3: 8000,     # GSM
    4: 8000,     # G723
    5: 8000,     # DVI4
    6: 16000,    # DVI4
    7: 8000,     # LPC
    8: 8000,     # PCMA
    9: 8000,     # G722 (clock rate kept at 8000 for historical reasons)
    10: 44100,   # L16 stereo
    11: 44100,   # L16 mono
    12: 8000,    # QCELP
    13: 8000,    # CN
    14: 90000,   # MPA
    15: 8000,    # G728
    16: 11025,   # DVI4
    17: 22050,   # DVI4
    18: 8000,    # G729
    25: 90000,   # CelB
    26: 90000,   # JPEG
    28: 90000,   # nv
    31: 90000,   # H261
    32: 90000,   # MPV
    33: 90000,   # MP2T
    34: 90000,   # H263
})


def _parse_payload_type(key) -> int:
    try:
        payload_type = int(key)
    except (TypeError, ValueError):
        raise ClockRateConfigError(f"Payload type must be an integer, got {key!r}")
    if not 0 <= payload_type <= MAX_PAYLOAD_TYPE:
        raise ClockRateConfigError(
            f"Payload type {payload_type} out of range 0-{MAX_PAYLOAD_TYPE}"
        )
    return payload_type


def _parse_clock_rate(payload_type: int, value) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ClockRateConfigError(
            f"Clock rate for payload type {payload_type} must be a number, got {value!r}"
        )
    if not math.isfinite(value) or value <= 0 or value != int(value):
        raise ClockRateConfigError(
            f"Clock rate for payload type {payload_type} must be a positive integer, got {value!r}"
        )
    return int(value)


def load_clock_rates(config_file: Union[str, Path]) -> Dict[int, int]:
    """
    Load clock rates from a TOML file, overlaid on the RFC 3551 defaults.

    Args:
        config_file: Path to TOML configuration file

    Returns:
        New dict of payload type -> clock rate (Hz)

    Raises:
        ClockRateConfigError: If the file is missing, unparsable, or has
            invalid payload types or rates
    """
    config_file = Path(config_file)
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = toml.load(f)
    except FileNotFoundError as e:
        raise ClockRateConfigError(f"Configuration file not found: {config_file}") from e
    except toml.TomlDecodeError as e:
        raise ClockRateConfigError(f"Error parsing {config_file}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ClockRateConfigError(f"Error reading {config_file}: {e}") from e

    table = config.get('clock_rates', {})
    if not isinstance(table, dict):
        raise ClockRateConfigError(f"[clock_rates] in {config_file} must be a table")

    rates = dict(DEFAULT_CLOCK_RATES)
    for key, value in table.items():
        payload_type = _parse_payload_type(key)
        rates[payload_type] = _parse_clock_rate(payload_type, value)
        logger.debug(f"Payload type {payload_type}: {rates[payload_type]} Hz")

    logger.info(f"Loaded {len(table)} clock rate(s) from {config_file}")
    return rates


def clock_rate_for_payload_type(payload_type: int,
                                rates: Optional[Mapping[int, int]] = None) -> int:
    """
    Look up the clock rate for a payload type.

    Args:
        payload_type: RTP payload type (0-127)
        rates: Table from load_clock_rates() (default: RFC 3551 static types)

    Raises:
        UnknownPayloadTypeError: If the payload type has no clock rate
    """
    if rates is None:
        rates = DEFAULT_CLOCK_RATES
    try:
        return rates[payload_type]
    except KeyError:
        raise UnknownPayloadTypeError(payload_type) from None
