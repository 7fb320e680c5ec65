#!/usr/bin/env python3
"""
Command Line Interface for rtp-numerics

Inspect sequence number comparisons and timestamp conversions:

    rtp-numerics seq 65534 2
    rtp-numerics ntp 1700000000123
    rtp-numerics ntp --now
    rtp-numerics rtp-ms 180000 --rate 90000
    rtp-numerics rtp-ms 16000 --payload-type 111 --config rates.toml
"""

import sys
import logging
import argparse
import math

from .clock_rates import load_clock_rates, clock_rate_for_payload_type
from .exceptions import RtpNumericsError
from .sequence import (
    SEQUENCE_NUMBER_MODULUS,
    get_sequence_number_delta,
    is_older_than,
    is_newer_than,
    is_next_after,
    rolled_over_to,
    num_packets_between,
)
from .timestamp import (
    milliseconds_since_1970,
    millis_to_ntp_timestamp_msw_lsw,
    convert_rtp_timestamp_to_ms,
)

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool):
    root_logger = logging.getLogger()
    level = logging.DEBUG if debug else logging.INFO
    root_logger.setLevel(level)

    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(levelname)s:%(name)s:%(message)s'))
        root_logger.addHandler(handler)
    else:
        for handler in root_logger.handlers:
            handler.setLevel(level)

    if debug:
        logger.debug("DEBUG logging enabled")


def cmd_seq(args):
    """Print delta and ordering of two sequence numbers"""
    a, b = args.a % SEQUENCE_NUMBER_MODULUS, args.b % SEQUENCE_NUMBER_MODULUS
    if (a, b) != (args.a, args.b):
        logger.warning(f"Reduced inputs mod {SEQUENCE_NUMBER_MODULUS}: {args.a} -> {a}, {args.b} -> {b}")

    print(f"delta({a}, {b}) = {get_sequence_number_delta(a, b)}")
    print(f"{a} older than {b}: {is_older_than(a, b)}")
    print(f"{a} newer than {b}: {is_newer_than(a, b)}")
    print(f"{a} next after {b}: {is_next_after(a, b)}")
    print(f"{a} rolled over to {b}: {rolled_over_to(a, b)}")
    if is_older_than(a, b):
        print(f"packets between: {num_packets_between(a, b)}")
    elif is_older_than(b, a):
        print(f"packets between: {num_packets_between(b, a)}")


def cmd_ntp(args):
    """Print NTP words for a millisecond timestamp"""
    if args.now:
        millis = milliseconds_since_1970()
    elif args.millis is not None:
        millis = args.millis
    else:
        raise RtpNumericsError("Give a millisecond timestamp or --now")

    ntp = millis_to_ntp_timestamp_msw_lsw(millis)
    print(f"millis:          {millis}")
    print(f"seconds (msw):   {ntp.seconds} (0x{ntp.seconds:08X})")
    print(f"fraction (lsw):  {ntp.fraction} (0x{ntp.fraction:08X})")
    print(f"ntp timestamp:   0x{ntp.to_int():016X}")
    print(f"middle 32 bits:  0x{ntp.middle_32_bits:08X}")


def cmd_rtp_ms(args):
    """Print milliseconds for an RTP timestamp"""
    if args.rate is not None:
        rate = args.rate
    else:
        rates = load_clock_rates(args.config) if args.config else None
        rate = clock_rate_for_payload_type(args.payload_type, rates)
        logger.debug(f"Payload type {args.payload_type} clock rate: {rate} Hz")

    if not math.isfinite(rate) or rate <= 0:
        raise RtpNumericsError(f"Clock rate must be positive, got {rate}")

    print(convert_rtp_timestamp_to_ms(args.timestamp, rate))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rtp-numerics',
        description='RTP sequence number and NTP/RTP timestamp arithmetic',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--debug', '-d', action='store_true', help='Enable DEBUG logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Sequence number comparison
    seq_parser = subparsers.add_parser('seq', help='Compare two RTP sequence numbers')
    seq_parser.add_argument('a', type=int, help='First sequence number')
    seq_parser.add_argument('b', type=int, help='Second sequence number')
    seq_parser.set_defaults(func=cmd_seq)

    # Millis -> NTP
    ntp_parser = subparsers.add_parser('ntp', help='Convert milliseconds since 1970 to NTP')
    when_group = ntp_parser.add_mutually_exclusive_group()
    when_group.add_argument('millis', type=int, nargs='?', help='Milliseconds since 1970')
    when_group.add_argument('--now', action='store_true', help='Use the current wall clock')
    ntp_parser.set_defaults(func=cmd_ntp)

    # RTP timestamp -> millis
    rtp_parser = subparsers.add_parser('rtp-ms', help='Convert an RTP timestamp to milliseconds')
    rtp_parser.add_argument('timestamp', type=int, help='RTP timestamp (ticks)')
    rate_group = rtp_parser.add_mutually_exclusive_group(required=True)
    rate_group.add_argument('--rate', '-r', type=float, help='Clock rate in Hz')
    rate_group.add_argument('--payload-type', '-p', type=int, help='Look up clock rate by payload type')
    rtp_parser.add_argument('--config', '-c', help='TOML file with a [clock_rates] table')
    rtp_parser.set_defaults(func=cmd_rtp_ms)

    return parser


def main(argv=None):
    """Main entry point for rtp-numerics command"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        sys.exit(1)

    _configure_logging(args.debug)

    try:
        args.func(args)
    except RtpNumericsError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()
