"""Static metadata describing FlagQuiz."""

APP_NAME = "FlagQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "FlagQuiz is a flag recognition game built with Qt and FastAPI. "
    "Pick a difficulty, name the country behind each flag, and see where it lies on the map."
)

HELP_TEXT = (
    "Choose a difficulty to start a session. Each question shows one flag and four country names; "
    "click the country the flag belongs to. After every answer the correct country is highlighted "
    "on the map before the next flag appears.\n\n"
    "Beginner: 10 questions from the 25 best-known countries of Europe and the Americas.\n"
    "Intermediate: 15 questions from 60 countries across Europe, Asia, the Americas and Oceania.\n"
    "Advanced: 20 questions from up to 150 countries worldwide."
)
