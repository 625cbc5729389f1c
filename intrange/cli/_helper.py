from typing import Any, Optional

from click import ParamType, Parameter, Context, BadParameter

from ..api import Range, InvalidArgument


class RangeType(ParamType):
    name = "range"

    def convert(self, value: Any, param: Optional[Parameter], ctx: Optional[Context]) -> Range:
        if isinstance(value, Range):
            return value

        try:
            return Range.from_ex_fmt(value)
        except InvalidArgument as e:
            self.fail(str(e), param, ctx)


RANGE = RangeType()


def bad_parameter(err: InvalidArgument, hint: str) -> BadParameter:
    return BadParameter(str(err), param_hint=hint)


def fmt(value: Any) -> str:
    if value is None:
        return "none"
    elif isinstance(value, bool):
        return "true" if value else "false"

    return str(value)
