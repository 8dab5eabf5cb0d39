from fez import SExpression
from fez.errors import FezSyntaxError
from fez.types.pair import NIL, to_list


def form_operands(form: str, tail: SExpression) -> list[SExpression]:
    """Return the operands of a special form, rejecting a dotted tail."""
    operands, terminator = to_list(tail)
    if terminator is not NIL:
        raise FezSyntaxError(f"{form} form is not a proper list")
    return operands
