"""
Type helpers - renders annotations as display strings and strips indirection.

Display strings are for documentation only and are never parsed back:
- builtins and classes render as their __name__ (str, int, Bucket)
- generics render with capitalized typing names (List[Bucket], Dict[str, int])
- X | None and Optional[X] both render as Optional[X]
- unresolved forward references render as their source text
"""

import logging
import types
from typing import Annotated, Any, ForwardRef, Literal, Union, get_args, get_origin

logger = logging.getLogger(__name__)

NoneType = type(None)

# typing spelling for builtin generic origins
_GENERIC_NAMES = {
    list: "List",
    dict: "Dict",
    set: "Set",
    frozenset: "FrozenSet",
    tuple: "Tuple",
    type: "Type",
}


def format_type(tp: Any) -> str:
    """
    Render a type annotation as a display string

    Never raises: anything that cannot be rendered precisely falls back to
    its repr.
    """
    try:
        return _format(tp)
    except Exception as e:
        logger.warning(f"Could not render type {tp!r}: {e}")
        return repr(tp)


def _format(tp: Any) -> str:
    if tp is None or tp is NoneType:
        return "None"
    if tp is Ellipsis:
        return "..."
    if isinstance(tp, str):
        return tp
    if isinstance(tp, ForwardRef):
        return tp.__forward_arg__
    if isinstance(tp, list):
        # Callable parameter list
        return f"[{', '.join(_format(a) for a in tp)}]"
    if tp is Any:
        return "Any"

    origin = get_origin(tp)
    if origin is None:
        name = getattr(tp, "__name__", None)
        if name:
            return name
        return str(tp).replace("typing.", "")

    args = get_args(tp)

    if origin is Annotated:
        return _format(args[0])

    if origin is Union or origin is types.UnionType:
        members = [a for a in args if a is not NoneType]
        inner = ", ".join(_format(a) for a in members)
        if len(members) < len(args):
            if len(members) == 1:
                return f"Optional[{inner}]"
            return f"Optional[Union[{inner}]]"
        return f"Union[{inner}]"

    if origin is Literal:
        return f"Literal[{', '.join(repr(a) for a in args)}]"

    origin_name = _GENERIC_NAMES.get(origin) or getattr(origin, "__name__", None) or str(origin)
    if args:
        return f"{origin_name}[{', '.join(_format(a) for a in args)}]"
    return origin_name


def unwrap_indirection(tp: Any) -> Any:
    """
    Strip Annotated and Optional wrappers down to the referenced type

    Unions of more than one non-None member are returned unchanged.
    """
    while True:
        origin = get_origin(tp)
        if origin is Annotated:
            tp = get_args(tp)[0]
            continue
        if origin is Union or origin is types.UnionType:
            members = [a for a in get_args(tp) if a is not NoneType]
            if len(members) == 1:
                tp = members[0]
                continue
        return tp
