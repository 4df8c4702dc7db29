from ninja.errors import HttpError


class APIError(HttpError):
    """Базовый класс для API ошибок."""

    default_detail = "Произошла ошибка"
    status_code = 500

    def __init__(self, message: str | None = None):
        super().__init__(self.status_code, message or self.default_detail)


class ValidationAPIError(APIError):
    """Ошибка валидации данных."""

    default_detail = "Ошибка валидации данных"
    status_code = 400


class NotFoundAPIError(APIError):
    """Ошибка: ресурс не найден."""

    default_detail = "Запрашиваемый ресурс не найден"
    status_code = 404


class ConflictAPIError(APIError):
    """Ошибка конфликта данных."""

    default_detail = "Конфликт при обработке данных"
    status_code = 409
