"""Quiz-related constants shared across UI and core layers."""

TIME_PER_QUESTION: int = 30
TICK_INTERVAL_MS: int = 1000
LOW_TIME_WARNING_SECONDS: int = 10
OPTION_COUNT: int = 4
UNANSWERED_OPTION_INDEX: int = -1

# Feedback message thresholds (score percent, inclusive lower bounds)
SCORE_EXCELLENT_THRESHOLD: int = 90
SCORE_GREAT_THRESHOLD: int = 80
SCORE_GOOD_THRESHOLD: int = 70
SCORE_FAIR_THRESHOLD: int = 60

# Colour band thresholds
SCORE_BAND_HIGH_THRESHOLD: int = 80
SCORE_BAND_MEDIUM_THRESHOLD: int = 60
