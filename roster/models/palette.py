# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Shared team palette — default colors handed out round-robin to new teams.
"""

TEAM_COLORS: tuple[str, ...] = (
    "#10B981",  # emerald
    "#F59E0B",  # amber
    "#3B82F6",  # blue
    "#EF4444",  # red
    "#8B5CF6",  # violet
    "#EC4899",  # pink
)
