"""
Exceptions raised by the configuration layer and CLI.

The sequence number and timestamp functions never raise.
"""


class RtpNumericsError(Exception):
    """
    Base class for all rtp_numerics errors.
    """
    pass


class ClockRateConfigError(RtpNumericsError):
    """
    Thrown when a clock rate configuration file is missing or malformed.
    """
    pass


class UnknownPayloadTypeError(RtpNumericsError, KeyError):
    """
    Thrown when no clock rate is known for an RTP payload type.
    """

    def __init__(self, payload_type):
        super().__init__(payload_type)
        self.payload_type = payload_type

    def __str__(self):
        return f"No clock rate configured for payload type {self.payload_type}"
