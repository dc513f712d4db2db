from . import quizzes
