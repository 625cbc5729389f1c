import datetime
from logging import getLogger
from os import mkdir
from os.path import isdir, isfile, abspath, isabs, dirname
from typing import Iterable, Optional

import progressbar

_logger = getLogger(__name__)


def mkdirs(path: str):
    if not isabs(path):
        path = abspath(path)

    if isdir(path):
        return

    if isfile(path):
        raise ValueError(f"'{path}' is a regular file, but was supposed to be a directory")

    mkdirs(dirname(path))
    mkdir(path)


def write_lines(values: Iterable, target: str, total: Optional[int] = None, chunk_size: int = 1024) -> int:
    """
    Writes one value per line to the target file while showing a progress bar.

    :param values: the values to write
    :param target: the file to write to. Missing parent directories are created.
    :param total: the expected number of values, if known. Enables the percentage and ETA display.
    :param chunk_size: the number of lines to write between progress bar updates
    :return: the number of lines written
    """
    if chunk_size <= 0 or not isinstance(chunk_size, int):
        raise ValueError("The chunk size must be a positive integer")

    mkdirs(dirname(abspath(target)))

    if total is not None and total > 0:
        eta = progressbar.AdaptiveETA(samples=datetime.timedelta(seconds=5))
        eta.INTERVAL = datetime.timedelta(milliseconds=500)

        widgets = [
            ' ',
            progressbar.Timer(format='%(elapsed)s'),
            ' ',
            progressbar.Bar(left='[', right=']'),
            ' ',
            progressbar.Percentage(),
            ' (',
            eta,
            ') ',
        ]
        bar = progressbar.ProgressBar(max_value=total, widgets=widgets)
    else:
        widgets = [
            ' ',
            progressbar.Timer(format='%(elapsed)s'), ' - ',
            progressbar.Counter(), ' - ',
            progressbar.AnimatedMarker()
        ]
        bar = progressbar.ProgressBar(max_value=progressbar.UnknownLength, widgets=widgets)

    _logger.info("Writing %s values to %s", "?" if total is None else total, target)

    written = 0
    chunk = []

    with open(target, "w") as f, bar:
        bar.start()

        for value in values:
            chunk.append(f"{value}\n")

            if len(chunk) >= chunk_size:
                f.writelines(chunk)
                written += len(chunk)
                bar.update(written)
                chunk = []

        if chunk:
            f.writelines(chunk)
            written += len(chunk)
            bar.update(written)

    return written
