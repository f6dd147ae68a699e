"""Settings of the heat load console.

The console reads no command-line flags or environment variables; the values
below are the defaults the program runs with. A script embedding the package
can change the attributes of `SETTINGS` before the first logger is created.
"""
import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Settings:
    """
    Attributes
    ----------
    default_export_path:
        File path used for the CSV export when the user leaves the path
        prompt blank.
    name_width:
        Column width of the item names in the summary table. Names are
        truncated to one character less than this width.
    method_width:
        Column width of the method tags in the summary table.
    log_level:
        Minimum level of the log records written to the console (stderr).
    log_file:
        Optional path of a log file that receives all log records.
    """
    default_export_path: str = 'heat_load.csv'
    name_width: int = 28
    method_width: int = 14
    log_level: int = logging.WARNING
    log_file: Path | str | None = None


SETTINGS = Settings()
