"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "FlagQuiz"
PLAYER_URL_PLACEHOLDER: str = "http://<host-ip>:8000/"

START_DESCRIPTION: str = "Which country does this flag belong to? Choose a difficulty to begin."
DIFFICULTY_BUTTON_LABELS: dict[str, str] = {
    "beginner": "Beginner",
    "intermediate": "Intermediate",
    "advanced": "Advanced",
}

MODE_BUTTON_RESTART: str = "Back to Start"
MODE_BUTTON_QUICK_RESTART: str = "Play Again (same difficulty)"

QUESTION_COUNTER_TEMPLATE: str = "Question {current} / {total}"
SCORE_TEMPLATE: str = "Score: {score} / {answered}"
FEEDBACK_CORRECT: str = "Correct! It is {name}."
FEEDBACK_INCORRECT: str = "Not quite. The answer was {name}."
MAP_PLACEHOLDER: str = "The answer will be shown on the map."

CONFIRM_ABANDON_TITLE: str = "Leave session"
CONFIRM_ABANDON_MESSAGE: str = "End the current session and return to the start screen?"
START_FAILED_TITLE: str = "Could not start"

PLAYER_URL_TEMPLATE: str = "Play in a browser at: {url}"
GAME_PROMPT: str = "Which country does this flag belong to?"
FLAG_LOADING_TEXT: str = "Loading flag..."
FLAG_UNAVAILABLE_TEXT: str = "Flag image unavailable"
FLAG_MAX_WIDTH: int = 360
FLAG_MAX_HEIGHT: int = 220
MAP_ZOOM_DEGREES: float = 8.0
