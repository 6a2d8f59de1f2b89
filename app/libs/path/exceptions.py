class PathEvaluationError(ValueError):
    detail: str = "Failed to evaluate path."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.__class__.detail
        super().__init__(self.detail)
