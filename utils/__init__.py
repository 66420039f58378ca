"""
Utility modules for the Avalanche Forecast skill.

This package contains configuration, constants, factories and speech helpers.
"""

from .constants import (BREAK, ERROR_MESSAGES, MONTH_DAYS, MONTH_NAMES,
                        SLOTS)

__all__ = ['BREAK', 'ERROR_MESSAGES', 'MONTH_DAYS', 'MONTH_NAMES', 'SLOTS']
