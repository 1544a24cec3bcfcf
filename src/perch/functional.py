"""Function composition for request pipelines.

Guards run before the router and either pass the request on or replace
it with a response. Because the router returns non-requests unchanged,
a guard and a router compose directly::

    app = App(compose(route(*routes), require_json))
"""

from collections.abc import Callable
from functools import reduce
from typing import Any


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose unary *functions* right to left.

    ``compose(f, g)(x)`` is ``f(g(x))``. With no functions, returns the
    identity.
    """

    def composed(value: Any) -> Any:
        return reduce(lambda acc, function: function(acc), reversed(functions), value)

    return composed
