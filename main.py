#!/usr/bin/env python3
"""
Farkle Odds - score a six-dice roll and work out the chances of improving it
"""

from farkle_odds.cli.__main__ import main


if __name__ == '__main__':
    main()
