#!/usr/bin/env python3
"""
Packet Timing Demo

Walks a short, reordered RTP packet trace across the sequence number
wrap and shows the numbers a receiver and an RTCP sender report need.

Usage:
    python examples/packet_timing_demo.py
    python examples/packet_timing_demo.py --config examples/clock_rates.toml --payload-type 111
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from rtp_numerics import (
    is_next_after,
    is_newer_than,
    rolled_over_to,
    num_packets_between,
    unwrap_sequence_numbers,
    milliseconds_since_1970,
    millis_to_ntp_timestamp_msw_lsw,
    convert_rtp_timestamp_to_ms,
    load_clock_rates,
    clock_rate_for_payload_type,
)

# (sequence number, RTP timestamp) in arrival order: 65535 arrives late, 1 is lost
TRACE = [(65532, 0), (65533, 960), (65534, 1920), (0, 3840), (65535, 2880), (2, 5760)]


def demo_sequence(trace):
    print("\n" + "="*60)
    print("Sequence numbers")
    print("="*60)

    highest = trace[0][0]
    for seq, _ in trace[1:]:
        if is_next_after(seq, highest):
            note = "in order"
        elif is_newer_than(seq, highest):
            note = f"gap of {num_packets_between(highest, seq)}"
        else:
            note = "late"
        if rolled_over_to(highest, seq):
            note += ", wrapped"
        print(f"  {seq:5d}: {note}")
        if is_newer_than(seq, highest):
            highest = seq

    extended = unwrap_sequence_numbers([seq for seq, _ in trace])
    print(f"  extended: {extended.tolist()}")


def demo_timestamps(trace, clock_rate: int):
    print("\n" + "="*60)
    print(f"RTP timestamps at {clock_rate} Hz")
    print("="*60)

    first_ts = trace[0][1]
    for seq, ts in trace:
        print(f"  {seq:5d}: +{convert_rtp_timestamp_to_ms(ts - first_ts, clock_rate)} ms")

    now = milliseconds_since_1970()
    ntp = millis_to_ntp_timestamp_msw_lsw(now)
    print(f"\n  sender report NTP: 0x{ntp.to_int():016X} (wire {ntp.to_bytes().hex()})")


def main():
    parser = argparse.ArgumentParser(description='RTP packet timing demo')
    parser.add_argument('--config', '-c', help='TOML file with a [clock_rates] table')
    parser.add_argument('--payload-type', '-p', type=int, default=111,
                        help='Payload type of the trace (default: 111)')
    args = parser.parse_args()

    rates = load_clock_rates(args.config) if args.config else {111: 48000}
    clock_rate = clock_rate_for_payload_type(args.payload_type, rates)

    demo_sequence(TRACE)
    demo_timestamps(TRACE, clock_rate)


if __name__ == '__main__':
    main()
