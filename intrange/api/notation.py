from logging import getLogger
from typing import Tuple

from .errors import InvalidArgument

_logger = getLogger(__name__)

RANGE_DELIMITER = '..'
STEP_DELIMITER = '//'


def parse(text: str) -> Tuple[int, int, int]:
    """
    Parses the textual range notation ``LOWER..UPPER`` or ``LOWER..UPPER//STEP``.

    :param text: the notation to parse
    :return: a tuple (lower, upper, step), where step is 0 if it was omitted
    """
    parts = text.strip().split(RANGE_DELIMITER)

    if len(parts) != 2:
        raise InvalidArgument(f"'{text}' is not in the form LOWER{RANGE_DELIMITER}UPPER[{STEP_DELIMITER}STEP]")

    lower, rest = parts
    upper, step = rest, '0'

    if STEP_DELIMITER in rest:
        upper, step = rest.split(STEP_DELIMITER, 1)

    try:
        return int(lower), int(upper), int(step)
    except ValueError as e:
        _logger.debug("Failed to parse range notation '%s': %s", text, e)
        raise InvalidArgument(f"'{text}' does not consist of integer bounds and step") from e


def format(lower: int, upper: int, step: int) -> str:
    default_step = 1 if lower <= upper else -1

    if step == default_step:
        return f"{lower}{RANGE_DELIMITER}{upper}"
    else:
        return f"{lower}{RANGE_DELIMITER}{upper}{STEP_DELIMITER}{step}"
