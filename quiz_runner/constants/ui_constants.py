"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quiz Challenge"
WINDOW_MIN_WIDTH: int = 640
WINDOW_MIN_HEIGHT: int = 560

START_TITLE: str = "Quiz Challenge"
START_DESCRIPTION_TEMPLATE: str = "Test your knowledge with {count} questions across various topics"
START_QUESTIONS_CAPTION: str = "Questions"
START_TIME_CAPTION: str = "Per Question"
START_BUTTON: str = "Start Quiz"

QUESTION_HEADER_TEMPLATE: str = "Question {number} of {total}"
TIME_REMAINING_TEMPLATE: str = "{seconds}s"
RUNNING_SCORE_TEMPLATE: str = "Score: {correct}/{answered} correct"
NEXT_QUESTION_BUTTON: str = "Next Question"
FINISH_QUIZ_BUTTON: str = "Finish Quiz"

RESULTS_TITLE: str = "Quiz Complete!"
RESULTS_COUNT_TEMPLATE: str = "{correct} out of {total} correct"
RESULTS_CORRECT_CAPTION: str = "Correct"
RESULTS_INCORRECT_CAPTION: str = "Incorrect"
RESULTS_AVERAGE_TIME_CAPTION: str = "Avg. Time"
RESULTS_REVIEW_TITLE: str = "Question Review"
RESULTS_REVIEW_ROW_TEMPLATE: str = "{mark}  Question {number}  [{category}]  {seconds}s"
RESULTS_UNANSWERED_NOTE: str = "(no answer)"
RESTART_BUTTON: str = "Take Quiz Again"

