# src/spicenet_core/simulation/rawfile.py
"""
Reader for ngspice ASCII rawfiles (the output of `write` with `set filetype=ascii`).

A rawfile holds one or more plots. Each plot is a block of `Key: value` header
lines, a `Variables:` table (index, name, type per line) and a `Values:` section
in which every point starts with its index followed by one value per variable.
Complex plots write each value as `real,imag`.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from .exceptions import RawFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawPlot:
    title: str
    plot_name: str
    flags: str
    vectors: Dict[str, np.ndarray]

    @property
    def is_complex(self) -> bool:
        return "complex" in self.flags.lower()


def _parse_value(token: str, is_complex: bool):
    try:
        if is_complex:
            real, _, imag = token.partition(",")
            return complex(float(real), float(imag) if imag else 0.0)
        return float(token)
    except ValueError as e:
        raise RawFileError(details=f"Cannot read value '{token}': {e}") from e


def read_raw_file(text: str) -> List[RawPlot]:
    """Parses the text of an ASCII rawfile into its plots, in file order."""
    lines = text.splitlines()
    plots: List[RawPlot] = []
    i = 0

    while i < len(lines):
        header: Dict[str, str] = {}
        while i < len(lines) and lines[i].strip().lower() != "variables:":
            key, sep, value = lines[i].partition(":")
            if sep:
                header[key.strip().lower()] = value.strip()
            i += 1
        if i >= len(lines):
            if header:
                raise RawFileError(details="Plot header is not followed by a 'Variables:' section.")
            break
        i += 1

        try:
            n_vars = int(header["no. variables"])
            n_points = int(header["no. points"])
        except (KeyError, ValueError) as e:
            raise RawFileError(details=f"Plot header lacks a valid variable or point count: {e}") from e

        names: List[str] = []
        for _ in range(n_vars):
            fields = lines[i].split() if i < len(lines) else []
            if len(fields) < 2:
                raise RawFileError(details=f"Expected {n_vars} variable line(s), got a short table.")
            names.append(fields[1])
            i += 1

        if i >= len(lines) or lines[i].strip().lower() != "values:":
            raise RawFileError(details="Variable table is not followed by a 'Values:' section.")
        i += 1

        flags = header.get("flags", "real")
        is_complex = "complex" in flags.lower()
        row_width = n_vars + 1
        needed = n_points * row_width
        tokens: List[str] = []
        while len(tokens) < needed and i < len(lines):
            tokens.extend(lines[i].split())
            i += 1
        if len(tokens) < needed:
            raise RawFileError(details=f"Expected {n_points} point(s) of {n_vars} value(s), file ends early.")

        data = np.empty((n_points, n_vars), dtype=complex if is_complex else float)
        for point in range(n_points):
            row = tokens[point * row_width + 1:(point + 1) * row_width]
            data[point] = [_parse_value(token, is_complex) for token in row]

        plot = RawPlot(
            title=header.get("title", ""),
            plot_name=header.get("plotname", ""),
            flags=flags,
            vectors={name: data[:, k].copy() for k, name in enumerate(names)},
        )
        logger.debug(f"Read plot '{plot.plot_name}' with {n_vars} vector(s) of {n_points} point(s).")
        plots.append(plot)

    return plots
