"""
session_stats.py
----------------
Tracks statistics for the current play session.
Separated from GameState so the high score survives restarts.
"""


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run statistics. Reset on every restart; high score is kept."""

    def __init__(self):
        self.score = 0
        self.high_score = 0
        self.enemies_killed = 0
        self.enemies_escaped = 0
        self.shots_fired = 0
        self.run_time = 0.0
        self.games_played = 0

    # ===========================================================
    # Core Stats
    # ===========================================================

    def add_score(self, amount: int):
        """Add to current score and update high score."""
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score

    def add_kill(self, count: int = 1):
        self.enemies_killed += count

    def add_escape(self):
        self.enemies_escaped += 1

    def add_shot(self):
        self.shots_fired += 1

    def add_game(self):
        self.games_played += 1

    def add_time(self, dt: float):
        self.run_time += dt

    @property
    def accuracy(self) -> float:
        """Kills per shot, 0.0 before the first shot."""
        if self.shots_fired == 0:
            return 0.0
        return self.enemies_killed / self.shots_fired

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset run stats for a new game. Preserves high score."""
        self.score = 0
        self.enemies_killed = 0
        self.enemies_escaped = 0
        self.shots_fired = 0
        self.run_time = 0.0


# ===========================================================
# Singleton Access
# ===========================================================

_SESSION_STATS = None


def get_session_stats() -> SessionStats:
    """Get or create the session stats singleton."""
    global _SESSION_STATS
    if _SESSION_STATS is None:
        _SESSION_STATS = SessionStats()
    return _SESSION_STATS


def reset_session_stats() -> None:
    """Drop the singleton. Used on full restart and between tests."""
    global _SESSION_STATS
    _SESSION_STATS = None
