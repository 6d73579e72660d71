import configparser
import os
from pathlib import Path
from . import coordinate


CONFIG_FILE = os.path.expanduser("~/.merkator/config")
FORMAT_SECTION = "format"


def get_config(config_path=CONFIG_FILE):
    config = configparser.ConfigParser()
    _ = config.read(config_path)
    return config


def get_format_config(config=None, config_path=CONFIG_FILE):
    """
    Formatting options from the [format] section with defaults filled in.

    Returns a dict with keys "seconds-precision" (int) and "decimal-order"
    (str). Raises ValueError for invalid option values.
    """
    if config is None:
        config = get_config(config_path=config_path)

    options = {
        "seconds-precision": coordinate.DEFAULT_SECONDS_PRECISION,
        "decimal-order": coordinate.DEFAULT_DECIMAL_ORDER
    }
    if not config.has_section(FORMAT_SECTION):
        return options

    if config.has_option(FORMAT_SECTION, "seconds-precision"):
        precision = config.getint(FORMAT_SECTION, "seconds-precision")
        if precision < 0:
            raise ValueError("seconds-precision must be >= 0")
        options["seconds-precision"] = precision
    if config.has_option(FORMAT_SECTION, "decimal-order"):
        order = config.get(FORMAT_SECTION, "decimal-order").strip()
        # Raises ValueError for unknown orders
        _ = coordinate.decimal_order(order)
        options["decimal-order"] = order.lower()

    return options


def set_format_config(config, seconds_precision=None, decimal_order=None):
    """Set [format] options in config, adding the section if needed."""
    if not config.has_section(FORMAT_SECTION):
        config.add_section(FORMAT_SECTION)
    if seconds_precision is not None:
        seconds_precision = int(seconds_precision)
        if seconds_precision < 0:
            raise ValueError("seconds-precision must be >= 0")
        config.set(FORMAT_SECTION, "seconds-precision", str(seconds_precision))
    if decimal_order is not None:
        # Raises ValueError for unknown orders
        _ = coordinate.decimal_order(decimal_order)
        config.set(FORMAT_SECTION, "decimal-order", decimal_order.strip().lower())
    return config


def save_config(config, config_path=CONFIG_FILE):
    # Write config data to disk
    Path(os.path.dirname(config_path)).mkdir(exist_ok=True, parents=True)
    with open(config_path, mode="w", encoding="utf-8") as fh:
        config.write(fh)
