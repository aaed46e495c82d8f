"""FitStreak: workout, nutrition and hydration tracking with streaks."""
