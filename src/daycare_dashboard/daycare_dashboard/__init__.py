"""Day-care operations dashboard package.

Feature modules (attendance, activity, irc, provision) summarize their own
records; ``cross_module`` reconciles them per user per day and ``dashboard``
aggregates every alert stream. A thin Flask controller sits on top.
"""
