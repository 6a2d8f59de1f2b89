from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .chain import FilterContext
    from .models import Response
    from .request_spec import RequestSpecification
    from .response_spec import ResponseSpecification

DispatchFn = Callable[["RequestSpecification", "ResponseSpecification"], "Response"]
Filter = Callable[["RequestSpecification", "ResponseSpecification", "FilterContext"], "Response"]
