#!/usr/bin/env python3
"""
NTP and RTP Timestamp Conversion

Converts wall-clock milliseconds to the 64-bit NTP fixed-point format
carried in RTCP sender reports, and RTP media timestamps to milliseconds
given the codec clock rate.

NTP timestamp layout (big-endian, as serialized on the wire):

    |<------- 32 bits ------->|<------- 32 bits ------->|
    | seconds since 1900-01-01 | fraction of second*2^32 |

Range limitation: the seconds word is truncated to 32 bits without
complaint, so dates after 2036-02-07 wrap back to the start of the NTP
era. Dates before 1900 wrap the other way.

See http://lists.ntp.org/pipermail/questions/2006-July/010866.html
"""

import struct
import time
from typing import NamedTuple, Union

import numpy as np

# Seconds from 1900-01-01 to 1970-01-01
NTP_EPOCH_OFFSET_SECONDS = 2208988800

_UINT32_MASK = 0xFFFFFFFF
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_NTP_STRUCT = struct.Struct('>II')


class NtpTimestamp(NamedTuple):
    """NTP timestamp split into its most and least significant words."""
    seconds: int    # msw, seconds since 1900 (mod 2^32)
    fraction: int   # lsw, fraction of a second scaled by 2^32

    def to_int(self) -> int:
        """Pack into the unsigned 64-bit value (seconds in the high word)."""
        return (self.seconds << 32) | self.fraction

    @classmethod
    def from_int(cls, value: int) -> 'NtpTimestamp':
        value = int(value)
        return cls((value >> 32) & _UINT32_MASK, value & _UINT32_MASK)

    def to_bytes(self) -> bytes:
        """8-byte network order encoding, as placed in an RTCP SR."""
        return _NTP_STRUCT.pack(self.seconds, self.fraction)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'NtpTimestamp':
        """
        Decode the first 8 bytes of data.

        Raises:
            ValueError: If fewer than 8 bytes are given
        """
        try:
            seconds, fraction = _NTP_STRUCT.unpack_from(data)
        except struct.error as e:
            raise ValueError(f"NTP timestamp needs 8 bytes, got {len(data)}") from e
        return cls(seconds, fraction)

    @property
    def middle_32_bits(self) -> int:
        """Compact NTP form used in RTCP LSR/DLSR fields."""
        return ((self.seconds & 0xFFFF) << 16) | (self.fraction >> 16)

    def __str__(self):
        return f"({self.seconds}, {self.fraction})"


def milliseconds_since_1970() -> int:
    """
    :return: milliseconds since 01.01.1970 (host wall clock) as integer
    """
    return time.time_ns() // 1_000_000


def millis_to_ntp_timestamp_msw_lsw(timestamp_ms: int) -> NtpTimestamp:
    """
    Convert a millisecond timestamp to NTP seconds and fraction words.

    Args:
        timestamp_ms: Milliseconds since 1970-01-01

    Returns:
        NtpTimestamp with seconds truncated to 32 bits
    """
    timestamp_ms = int(timestamp_ms)
    # floor division keeps the sub-second remainder in [0, 999] for negative input too
    seconds_since_1970, remaining_ms = divmod(timestamp_ms, 1000)
    seconds = seconds_since_1970 + NTP_EPOCH_OFFSET_SECONDS

    msw = seconds & _UINT32_MASK
    lsw = (remaining_ms << 32) // 1000
    return NtpTimestamp(msw, lsw)


def millis_to_ntp_timestamp(timestamp_ms: int) -> int:
    """
    Convert a millisecond timestamp to a packed 64-bit NTP timestamp.

    Example:
        >>> hex(millis_to_ntp_timestamp(0))
        '0x83aa7e8000000000'
    """
    return millis_to_ntp_timestamp_msw_lsw(timestamp_ms).to_int()


def ntp_timestamp_to_millis(ntp: Union[int, NtpTimestamp]) -> int:
    """
    Convert an NTP timestamp back to milliseconds since 1970.

    The fraction is rounded up to a whole millisecond, which makes this the
    exact inverse of millis_to_ntp_timestamp() within the current NTP era.
    """
    if not isinstance(ntp, NtpTimestamp):
        ntp = NtpTimestamp.from_int(ntp)
    seconds_since_1970 = ntp.seconds - NTP_EPOCH_OFFSET_SECONDS
    # ceiling undoes the floor taken when the fraction was produced
    millis = -((-ntp.fraction * 1000) >> 32)
    return seconds_since_1970 * 1000 + millis


def convert_rtp_timestamp_to_ms(rtp_timestamp: int, ticks_per_second: float) -> int:
    """
    Convert an RTP timestamp (or timestamp delta) to milliseconds.

    The result is truncated toward zero and saturated to the signed 32-bit
    range. ticks_per_second must be positive; this is not checked.

    Args:
        rtp_timestamp: RTP timestamp in clock ticks
        ticks_per_second: Codec clock rate, e.g. 90000 for video, 8000 for PCMU

    Returns:
        Milliseconds
    """
    millis = int((rtp_timestamp / ticks_per_second) * 1000)
    return max(_INT32_MIN, min(_INT32_MAX, millis))


def convert_rtp_timestamps_to_ms(rtp_timestamps, ticks_per_second: float) -> np.ndarray:
    """Vectorized convert_rtp_timestamp_to_ms() returning int64 (no saturation)."""
    ticks = np.asarray(rtp_timestamps, dtype=np.float64)
    return np.trunc((ticks / ticks_per_second) * 1000).astype(np.int64)
