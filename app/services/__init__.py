from app.services.seeding import seed_default_user
from app.services.streaks import StreakSummary, compute_streaks

__all__ = ["StreakSummary", "compute_streaks", "seed_default_user"]
