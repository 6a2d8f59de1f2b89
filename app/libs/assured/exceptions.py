class AssuredError(Exception):
    detail: str = "Request specification error."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.__class__.detail
        super().__init__(self.detail)


# =============================================================================
# Path parameters
# =============================================================================
class PathParamError(AssuredError, ValueError):
    detail = "Path parameters were not correctly defined."

    @classmethod
    def redundant(cls, values: list[str]) -> "PathParamError":
        return cls(f"{cls.detail} Redundant path parameters are: {', '.join(values)}.")

    @classmethod
    def undefined(cls, expected: int, actual: int, names: list[str]) -> "PathParamError":
        return cls(
            f"Invalid number of path parameters. Expected {expected}, was {actual}. "
            f"Undefined path parameters are: {', '.join(names)}."
        )


# =============================================================================
# Filter chain
# =============================================================================
class FilterChainError(AssuredError, RuntimeError):
    detail = "Filter chain was used incorrectly."


class ContinuationAlreadyUsedError(FilterChainError):
    detail = "FilterContext.next() was already invoked for this filter."


class InvalidFilterResultError(FilterChainError):
    detail = "Filter did not return a Response."


# =============================================================================
# Validation
# =============================================================================
class ResponseValidationError(AssuredError, AssertionError):
    detail = "Response validation failed."

    def __init__(self, failures: list[str]):
        self.failures = failures
        count = len(failures)
        noun = "expectation" if count == 1 else "expectations"
        super().__init__(f"{count} {noun} failed.\n" + "\n".join(failures))


# =============================================================================
# Request construction
# =============================================================================
class InvalidRequestError(AssuredError, ValueError):
    detail = "Request specification is invalid."
