"""Allow running as: python -m rtp_numerics"""

from .cli import main

if __name__ == '__main__':
    main()
