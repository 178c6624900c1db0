"""
Run Reporting - console text, text file and CSV output.

Presentation only: consumes (RunResult, Statistics) records and never feeds
anything back into the pricing core.

- Console/text: fixed-layout block per run
- CSV: one row per run via pandas
- Multi-run files are suffixed A, B, C, ... in run order
"""

import logging
import string
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, TextIO, Union

import pandas as pd

from mc_option_pricing.config.settings import SETTINGS, ReportConfig
from mc_option_pricing.orchestration.runner import RunRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_RULE = "*" * 60

# =============================================================================
# Helpers
# =============================================================================


def _barrier_present(value: float) -> bool:
    return abs(value - SETTINGS.decision.barrier_sentinel) > SETTINGS.decision.barrier_display_threshold


def file_suffix(index: int) -> str:
    """Letter suffix for the index-th report file: 0 -> 'A', 25 -> 'Z', 26 -> 'AA'."""
    letters = string.ascii_uppercase
    suffix = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        suffix = letters[remainder] + suffix
    return suffix


def record_to_dict(record: RunRecord) -> Dict[str, Any]:
    """Flatten a record into one row of named values."""
    result, stats = record
    params = result.parameters
    engine_name, scheme_name, payoff_name = result.model_names

    row: Dict[str, Any] = {
        "random_engine": engine_name,
        "scheme": scheme_name,
        "payoff": payoff_name,
        "mc_price": result.approximated_price,
        **stats.to_dict(),
        "rate": params.rate,
        "strike": params.strike,
        "expiry": params.expiry,
        "spot": params.spot,
        "volatility": params.volatility,
        "simulation_count": params.simulation_count,
        "step_count": result.step_count,
        "upper_barrier": result.upper_barrier,
        "lower_barrier": result.lower_barrier,
    }
    return row


# =============================================================================
# Reporter
# =============================================================================


class RunReporter:
    """
    Renders pricing records.

    Parameters
    ----------
    config : ReportConfig, optional
        Report configuration. If None, uses SETTINGS.report.

    Examples
    --------
    >>> reporter = RunReporter()
    >>> print(reporter.to_text(record))
    >>> reporter.save_all(records, "out/", format="csv")
    """

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or SETTINGS.report

    def to_text(self, record: RunRecord) -> str:
        """Fixed-layout text block for one run."""
        result, stats = record
        params = result.parameters
        engine_name, scheme_name, payoff_name = result.model_names
        precision = self.config.elapsed_precision

        lines = [
            _RULE,
            "OUTPUT",
            _RULE,
            "",
            "*** Model Parameters ***",
            f"1. RNG variate:             {engine_name}",
            f"2. FDM Scheme:              {scheme_name}",
            f"3. Underlying derivative:   {payoff_name}",
            "",
            "*** Simulation Results and Statistics ***",
            f"MCS Option Price:     {result.approximated_price} [$]",
            f"Mean Stock Price:     {stats.mean_price} [$]",
            f"Max Stock Price:      {stats.max_price} [$]",
            f"Min Stock Price:      {stats.min_price} [$]",
            f"Standard Deviation:   {stats.standard_deviation}",
            f"Standard Error:       {stats.standard_error}",
            f"Exact Price:          {stats.exact_price} [$]",
            f"Decision:             {str(stats.decision).lower()}",
            f"Elapsed time of simulation: {stats.elapsed_seconds:.{precision}g} seconds",
            "",
            "*** Simulation input parameters ***",
            f"Rate of Return:  {params.rate}",
            f"Strike Price:    {params.strike} [$]",
            f"Expiry Time:     {params.expiry} [years]",
            f"Stock Price:     {params.spot} [$]",
            f"Volatility:      {params.volatility}",
            f"NSIM:            {params.simulation_count}",
        ]

        if result.step_count != 0:
            lines.append(f"NSteps:          {result.step_count}")
        if _barrier_present(result.upper_barrier):
            lines.append(f"Option Upper Cap: {result.upper_barrier}")
        if _barrier_present(result.lower_barrier):
            lines.append(f"Option Lower Cap: {result.lower_barrier}")

        lines.append(_RULE)
        return "\n".join(lines)

    def to_frame(self, records: Sequence[RunRecord]) -> pd.DataFrame:
        """One row per run."""
        frame = pd.DataFrame([record_to_dict(r) for r in records])
        frame.index.name = "run"
        return frame

    def print_console(self, records: Sequence[RunRecord], stream: TextIO = sys.stdout) -> None:
        """Write every record's text block to stream."""
        for record in records:
            stream.write(self.to_text(record))
            stream.write("\n\n")

    def save_report(
        self,
        record: RunRecord,
        directory: PathLike,
        format: str = "text",
        suffix: str = "A",
    ) -> Path:
        """
        Save one run to "<file_stem> <suffix>.<ext>" in directory.

        Parameters
        ----------
        record : RunRecord
            Run to save
        directory : str or Path
            Output directory (created if missing)
        format : str
            "text" / "txt" or "csv"
        suffix : str
            File name suffix

        Returns
        -------
        Path
            Written file

        Raises
        ------
        ValueError
            If format is not supported
        """
        fmt = format.lower()
        if fmt in ("text", "txt"):
            ext = "txt"
        elif fmt == "csv":
            ext = "csv"
        else:
            raise ValueError(f"Unsupported format: {format}. Use 'text' or 'csv'.")

        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        filepath = out_dir / f"{self.config.file_stem} {suffix}.{ext}"

        if ext == "txt":
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(self.to_text(record))
                f.write("\n")
        else:
            self.to_frame([record]).to_csv(filepath, sep=self.config.csv_separator)

        logger.info(f"File: {filepath} has been created")
        return filepath

    def save_all(
        self,
        records: Sequence[RunRecord],
        directory: PathLike,
        format: str = "text",
    ) -> List[Path]:
        """Save each run to its own file, suffixed A, B, C, ..."""
        return [
            self.save_report(record, directory, format, file_suffix(i))
            for i, record in enumerate(records)
        ]

    def save_summary_csv(self, records: Sequence[RunRecord], filepath: PathLike) -> Path:
        """Save all runs to a single CSV file."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_frame(records).to_csv(path, sep=self.config.csv_separator)
        logger.info(f"File: {path} has been created")
        return path
