"""
RTP Numerics - sequence number and timestamp arithmetic for RTP/RTCP

Two independent groups of pure functions:

- sequence: ordering and distance of 16-bit RTP sequence numbers,
  handling wraparound at 65535 -> 0
- timestamp: wall-clock milliseconds -> 64-bit NTP timestamps (RTCP SR),
  and RTP media timestamps -> milliseconds for a codec clock rate

Quick Start:
    from rtp_numerics import is_newer_than, millis_to_ntp_timestamp

    is_newer_than(2, 65534)              # True, the counter wrapped
    hex(millis_to_ntp_timestamp(0))      # '0x83aa7e8000000000'

Copyright 2025
"""

__version__ = "1.0.0"
__author__ = "RTP Numerics Project"

from .sequence import (
    SEQUENCE_NUMBER_MODULUS,
    SEQUENCE_NUMBER_HALF_RANGE,
    get_sequence_number_delta,
    apply_sequence_number_delta,
    is_older_than,
    is_newer_than,
    rolled_over_to,
    is_next_after,
    num_packets_between,
    sequence_number_deltas,
    unwrap_sequence_numbers,
)
from .timestamp import (
    NTP_EPOCH_OFFSET_SECONDS,
    NtpTimestamp,
    milliseconds_since_1970,
    millis_to_ntp_timestamp,
    millis_to_ntp_timestamp_msw_lsw,
    ntp_timestamp_to_millis,
    convert_rtp_timestamp_to_ms,
    convert_rtp_timestamps_to_ms,
)
from .clock_rates import DEFAULT_CLOCK_RATES, load_clock_rates, clock_rate_for_payload_type
from .exceptions import RtpNumericsError, ClockRateConfigError, UnknownPayloadTypeError

__all__ = [
    # === Sequence numbers ===
    "SEQUENCE_NUMBER_MODULUS",
    "SEQUENCE_NUMBER_HALF_RANGE",
    "get_sequence_number_delta",
    "apply_sequence_number_delta",
    "is_older_than",
    "is_newer_than",
    "rolled_over_to",
    "is_next_after",
    "num_packets_between",
    "sequence_number_deltas",
    "unwrap_sequence_numbers",
    # === Timestamps ===
    "NTP_EPOCH_OFFSET_SECONDS",
    "NtpTimestamp",
    "milliseconds_since_1970",
    "millis_to_ntp_timestamp",
    "millis_to_ntp_timestamp_msw_lsw",
    "ntp_timestamp_to_millis",
    "convert_rtp_timestamp_to_ms",
    "convert_rtp_timestamps_to_ms",
    # === Configuration ===
    "DEFAULT_CLOCK_RATES",
    "load_clock_rates",
    "clock_rate_for_payload_type",
    # === Errors ===
    "RtpNumericsError",
    "ClockRateConfigError",
    "UnknownPayloadTypeError",
]
