"""Millisecond ratios for the supported time units.

Months and years are fixed-ratio approximations: a year is 365.25 days and a
month is one twelfth of a year.
"""

MS_PER_SECOND = 1000
MS_PER_MINUTE = MS_PER_SECOND * 60
MS_PER_HOUR = MS_PER_MINUTE * 60
MS_PER_DAY = MS_PER_HOUR * 24
MS_PER_WEEK = MS_PER_DAY * 7
MS_PER_YEAR = MS_PER_DAY * 365.25
MS_PER_MONTH = MS_PER_YEAR / 12
