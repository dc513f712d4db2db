class QuizError(Exception):
    """Base error rendered by the API as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(QuizError):
    status_code = 400


class NotFoundError(QuizError):
    status_code = 404


class PersistenceError(QuizError):
    status_code = 500
